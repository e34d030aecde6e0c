# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and synthetic ROM fixtures."""

import struct

import pytest

from n64checksum.crc32 import crc32, _CRC32_TABLE
from n64checksum.cic import CicVariant, FINGERPRINTS
from n64checksum.header import (
    BOOT_CODE_SIZE,
    CHECKSUM_LENGTH,
    CHECKSUM_START,
    HEADER_SIZE,
    MIN_ROM_SIZE,
)

BOOT_CODE_END = HEADER_SIZE + BOOT_CODE_SIZE

# Variant -> boot code CRC-32 that identifies it
FINGERPRINT_OF = {cic: fingerprint for fingerprint, cic in FINGERPRINTS.items()}


def forge_crc32(prefix: bytes, target: int) -> bytes:
    """Return 4 bytes that make crc32(prefix + result) == target."""
    by_top_byte = {entry >> 24: index for index, entry in enumerate(_CRC32_TABLE)}

    # Walk back from the target register to the table indices needed
    reg = target ^ 0xFFFFFFFF
    indices = []
    for _ in range(4):
        index = by_top_byte[reg >> 24]
        indices.insert(0, index)
        reg = ((reg ^ _CRC32_TABLE[index]) << 8) & 0xFFFFFFFF

    # Walk forward choosing bytes that hit those indices
    reg = crc32(prefix) ^ 0xFFFFFFFF
    patch = bytearray()
    for index in indices:
        patch.append((reg ^ index) & 0xFF)
        reg = (reg >> 8) ^ _CRC32_TABLE[index]
    return bytes(patch)


def set_boot_chip(rom: bytearray, cic) -> None:
    """Patch the last boot code word so the boot code identifies as cic."""
    prefix = bytes(rom[HEADER_SIZE:BOOT_CODE_END - 4])
    rom[BOOT_CODE_END - 4:BOOT_CODE_END] = forge_crc32(prefix, FINGERPRINT_OF[cic])


def build_rom(cic=None, fill_word=None, words=None, size=MIN_ROM_SIZE) -> bytearray:
    """
    Build a synthetic ROM image.

    Args:
        cic: Boot chip the boot code should identify as (default: none)
        fill_word: Value repeated over the whole checksum window
        words: Explicit window words (overrides fill_word)
        size: Image size in bytes
    """
    rom = bytearray(size)
    count = CHECKSUM_LENGTH // 4
    if words is not None:
        rom[CHECKSUM_START:CHECKSUM_START + CHECKSUM_LENGTH] = struct.pack(
            f">{count}I", *words)
    elif fill_word is not None:
        rom[CHECKSUM_START:CHECKSUM_START + CHECKSUM_LENGTH] = (
            struct.pack(">I", fill_word) * count)
    if cic is not None:
        set_boot_chip(rom, cic)
    return rom


def lcg_words(seed: int, count: int = CHECKSUM_LENGTH // 4):
    """Deterministic pseudo-random 32-bit words."""
    words = []
    state = seed
    for _ in range(count):
        state = (state * 1664525 + 1013904223) & 0xFFFFFFFF
        words.append(state)
    return words


@pytest.fixture
def make_rom():
    """Factory fixture for synthetic ROM images."""
    return build_rom


@pytest.fixture(scope="session")
def noisy_words():
    """One checksum window of pseudo-random words."""
    return lcg_words(0x6102)


@pytest.fixture
def rom_file(tmp_path, noisy_words):
    """A 6102 ROM file with a stale header checksum."""
    path = tmp_path / "game.z64"
    rom = build_rom(cic=CicVariant.CIC_6102, words=noisy_words,
                    size=MIN_ROM_SIZE + 0x1000)
    rom[MIN_ROM_SIZE:] = b"\xA5" * 0x1000
    path.write_bytes(bytes(rom))
    return path
