# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
N64 boot checksum calculation.

The boot checksum is computed over the first megabyte of program data
following the boot code (0x1000..0x101000). Six 32-bit accumulators are
seeded from the CIC variant, mixed with every big-endian word of that
window, and folded into the two words stored at header offsets 0x10 and
0x14. All arithmetic wraps at 32 bits.
"""

import logging
import struct
from dataclasses import dataclass
from typing import Optional, Tuple

from .cic import CicVariant, SEEDS, from_fingerprint
from .crc32 import crc32
from .header import (
    BOOT_CODE_SIZE,
    CHECKSUM_LENGTH,
    CHECKSUM_START,
    HEADER_SIZE,
    MIN_ROM_SIZE,
)

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF

# Window of boot code words mixed into t1 by CIC-NUS-6105
SHADOW_OFFSET = HEADER_SIZE + 0x0710
SHADOW_WORDS = 0x100 // 4

_WINDOW = struct.Struct(f">{CHECKSUM_LENGTH // 4}I")
_SHADOW = struct.Struct(f">{SHADOW_WORDS}I")


class ChecksumError(Exception):
    """Base exception for checksum errors."""
    pass


class BufferTooShortError(ChecksumError):
    """ROM image is too small to hold the checksummed region."""

    def __init__(self, size: int, required: int = MIN_ROM_SIZE):
        super().__init__(
            f"ROM image is {size} bytes, at least {required} bytes required"
        )
        self.size = size
        self.required = required


class UnrecognizedVariantError(ChecksumError):
    """No checksum seed exists for the boot chip."""

    def __init__(self, cic: int):
        super().__init__(f"Cannot compute checksum for boot chip {cic}")
        self.cic = cic


@dataclass(frozen=True)
class Accumulators:
    """Accumulator state at the end of the mixing pass."""
    t1: int
    t2: int
    t3: int
    t4: int
    t5: int
    t6: int


@dataclass(frozen=True)
class ChecksumResult:
    """Calculated checksum pair."""
    crc1: int
    crc2: int
    cic: CicVariant

    @property
    def words(self) -> Tuple[int, int]:
        return self.crc1, self.crc2

    @property
    def value(self) -> int:
        """Both words packed into one 64-bit integer, crc1 high."""
        return (self.crc1 << 32) | self.crc2


def identify_cic(data: bytes) -> CicVariant:
    """
    Identify the boot chip from the CRC-32 of the boot code.

    Raises:
        BufferTooShortError: If data does not contain the whole boot code
    """
    required = HEADER_SIZE + BOOT_CODE_SIZE
    if len(data) < required:
        raise BufferTooShortError(len(data), required)
    return from_fingerprint(crc32(data, HEADER_SIZE, BOOT_CODE_SIZE))


def _variant(cic: int) -> CicVariant:
    try:
        return CicVariant(cic)
    except ValueError:
        raise UnrecognizedVariantError(cic) from None


def seed_for(cic: int) -> int:
    """
    Return the accumulator seed for a boot chip.

    Raises:
        UnrecognizedVariantError: If cic is not a known boot chip
    """
    return SEEDS[_variant(cic)]


def rotl32(value: int, amount: int) -> int:
    """Rotate a 32-bit value left by amount (0..31) bits."""
    return ((value << amount) | (value >> (32 - amount))) & MASK32


def mix(data: bytes, cic: int) -> Accumulators:
    """
    Run the mixing pass over the checksum window.

    Args:
        data: ROM image, at least MIN_ROM_SIZE bytes
        cic: Boot chip selecting the seed and the t1 cross-term

    Returns:
        Accumulators after the last word

    Raises:
        UnrecognizedVariantError: If cic has no seed
    """
    seed = seed_for(cic)
    t1 = t2 = t3 = t4 = t5 = t6 = seed

    words = _WINDOW.unpack_from(data, CHECKSUM_START)
    # Word i of the window pairs with shadow word (i * 4) & 0xFF
    shadow = _SHADOW.unpack_from(data, SHADOW_OFFSET) if cic == CicVariant.CIC_6105 else None

    for index, d in enumerate(words):
        if t6 + d > MASK32:
            t4 = (t4 + 1) & MASK32
        t6 = (t6 + d) & MASK32
        t3 ^= d
        r = rotl32(d, d & 0x1F)
        t5 = (t5 + r) & MASK32
        if t2 > d:
            t2 ^= r
        else:
            t2 ^= t6 ^ d

        if shadow is not None:
            t1 = (t1 + (shadow[index % SHADOW_WORDS] ^ d)) & MASK32
        else:
            t1 = (t1 + (t5 ^ d)) & MASK32

    return Accumulators(t1=t1, t2=t2, t3=t3, t4=t4, t5=t5, t6=t6)


def combine(cic: int, acc: Accumulators) -> Tuple[int, int]:
    """Fold the accumulators into the (crc1, crc2) pair."""
    if cic == CicVariant.CIC_6103:
        return (
            ((acc.t6 ^ acc.t4) + acc.t3) & MASK32,
            ((acc.t5 ^ acc.t2) + acc.t1) & MASK32,
        )
    if cic == CicVariant.CIC_6106:
        return (
            (acc.t6 * acc.t4 + acc.t3) & MASK32,
            (acc.t5 * acc.t2 + acc.t1) & MASK32,
        )
    return acc.t6 ^ acc.t4 ^ acc.t3, acc.t5 ^ acc.t2 ^ acc.t1


def calculate(data: bytes, cic: Optional[int] = None) -> ChecksumResult:
    """
    Calculate the boot checksum of a ROM image.

    The image is only read, never modified.

    Args:
        data: ROM image, at least MIN_ROM_SIZE bytes
        cic: Boot chip override (default: identified from the boot code)

    Returns:
        ChecksumResult with both words and the boot chip used

    Raises:
        BufferTooShortError: If data is smaller than MIN_ROM_SIZE
        UnrecognizedVariantError: If the boot chip has no seed
    """
    if len(data) < MIN_ROM_SIZE:
        raise BufferTooShortError(len(data))

    if cic is None:
        cic = identify_cic(data)
    cic = _variant(cic)

    crc1, crc2 = combine(cic, mix(data, cic))
    logger.debug("%s checksum: 0x%08X 0x%08X", cic, crc1, crc2)
    return ChecksumResult(crc1=crc1, crc2=crc2, cic=cic)
