# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
N64 boot checksum - Python library.

This package computes and repairs the CRC pair stored in the header of
an N64 cartridge ROM image.

Example usage:
    from n64checksum import RomImage, calculate

    rom = RomImage.from_file("game.z64")
    report = rom.verify()
    print(f"Boot chip: {report.cic}")

    for field in report.fields:
        print(f"{field.name}: 0x{field.stored:08X} "
              f"(calculated 0x{field.calculated:08X})")

    # Fix mismatched header words
    rom.repair()
    rom.save("game.z64")
"""

from .crc32 import crc32
from .cic import CicVariant, DEFAULT_VARIANT, FINGERPRINTS, SEEDS
from .checksum import (
    Accumulators,
    ChecksumResult,
    ChecksumError,
    BufferTooShortError,
    UnrecognizedVariantError,
    identify_cic,
    seed_for,
    rotl32,
    mix,
    combine,
    calculate,
)
from .header import (
    HEADER_SIZE,
    BOOT_CODE_SIZE,
    CRC1_OFFSET,
    CRC2_OFFSET,
    CHECKSUM_START,
    CHECKSUM_LENGTH,
    MIN_ROM_SIZE,
    read32,
    write32,
    read_checksums,
    write_checksums,
)
from .rom import ChecksumField, ChecksumReport, RomImage, repair_file

__version__ = "0.1.0"

__all__ = [
    # CRC
    "crc32",
    # Boot chips
    "CicVariant",
    "DEFAULT_VARIANT",
    "FINGERPRINTS",
    "SEEDS",
    # Checksum
    "Accumulators",
    "ChecksumResult",
    "identify_cic",
    "seed_for",
    "rotl32",
    "mix",
    "combine",
    "calculate",
    # Errors
    "ChecksumError",
    "BufferTooShortError",
    "UnrecognizedVariantError",
    # Header
    "HEADER_SIZE",
    "BOOT_CODE_SIZE",
    "CRC1_OFFSET",
    "CRC2_OFFSET",
    "CHECKSUM_START",
    "CHECKSUM_LENGTH",
    "MIN_ROM_SIZE",
    "read32",
    "write32",
    "read_checksums",
    "write_checksums",
    # ROM image
    "ChecksumField",
    "ChecksumReport",
    "RomImage",
    "repair_file",
]
