# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
CRC-32 (ISO HDLC / IEEE 802.3) implementation.

Used to fingerprint the boot code of a ROM image so the CIC boot chip
that shipped with the cartridge can be identified.
"""

from typing import Optional

# Pre-computed CRC-32 lookup table
_CRC32_TABLE = []


def _init_table():
    """Initialize the CRC-32 lookup table."""
    poly = 0xEDB88320
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        _CRC32_TABLE.append(crc)


_init_table()


def crc32(data: bytes, offset: int = 0, length: Optional[int] = None) -> int:
    """
    Compute CRC-32 (ISO HDLC) checksum.

    Args:
        data: Bytes to compute checksum for
        offset: First byte of the range (default 0)
        length: Number of bytes in the range (default: up to the end)

    Returns:
        32-bit CRC value
    """
    end = len(data) if length is None else offset + length
    crc = 0xFFFFFFFF
    for byte in memoryview(data)[offset:end]:
        crc = _CRC32_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF
