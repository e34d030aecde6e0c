# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
N64 ROM header layout and big-endian word helpers.

All multi-byte fields of a ROM image are stored big-endian.
"""

import struct
from typing import Tuple

HEADER_SIZE = 0x40
BOOT_CODE_SIZE = 0x1000 - HEADER_SIZE

CRC1_OFFSET = 0x10
CRC2_OFFSET = 0x14

CHECKSUM_START = 0x00001000
CHECKSUM_LENGTH = 0x00100000

MIN_ROM_SIZE = CHECKSUM_START + CHECKSUM_LENGTH

_WORD = struct.Struct(">I")


def read32(data: bytes, offset: int) -> int:
    """Read a big-endian 32-bit word at offset."""
    return _WORD.unpack_from(data, offset)[0]


def write32(buffer: bytearray, offset: int, value: int) -> None:
    """
    Write a 32-bit value into buffer at offset, big-endian.

    Raises:
        ValueError: If value is not a 32-bit unsigned integer or the
            four bytes do not fit inside the buffer
    """
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"Value out of 32-bit range: {value:#x}")
    if offset < 0 or offset + 4 > len(buffer):
        raise ValueError(f"Offset {offset:#x} outside buffer of {len(buffer)} bytes")
    _WORD.pack_into(buffer, offset, value)


def read_checksums(data: bytes) -> Tuple[int, int]:
    """Return the (crc1, crc2) pair stored in the header."""
    return read32(data, CRC1_OFFSET), read32(data, CRC2_OFFSET)


def write_checksums(buffer: bytearray, crc1: int, crc2: int) -> None:
    """Store both checksum words in the header."""
    write32(buffer, CRC1_OFFSET, crc1)
    write32(buffer, CRC2_OFFSET, crc2)
