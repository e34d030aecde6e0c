# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for header layout helpers."""

import struct

import pytest

from n64checksum.header import (
    CRC1_OFFSET,
    CRC2_OFFSET,
    MIN_ROM_SIZE,
    read32,
    read_checksums,
    write32,
    write_checksums,
)


class TestLayout:
    """Tests for header constants."""

    def test_offsets(self):
        """Checksum slots sit at 0x10 and 0x14."""
        assert CRC1_OFFSET == 0x10
        assert CRC2_OFFSET == 0x14

    def test_min_size(self):
        """Minimum image covers header, boot code and 1 MiB of data."""
        assert MIN_ROM_SIZE == 0x101000


class TestRead32:
    """Tests for read32 function."""

    def test_big_endian(self):
        """Words are read most significant byte first."""
        assert read32(b"\x12\x34\x56\x78", 0) == 0x12345678

    def test_offset(self):
        """Offset selects the word."""
        assert read32(b"\x00\x00\xDE\xAD\xBE\xEF", 2) == 0xDEADBEEF

    def test_truncated(self):
        """Reading past the end raises."""
        with pytest.raises(struct.error):
            read32(b"\x00\x01\x02", 0)


class TestWrite32:
    """Tests for write32 function."""

    def test_big_endian(self):
        """Words are written most significant byte first."""
        buf = bytearray(8)
        write32(buf, 4, 0x80371240)
        assert buf == b"\x00\x00\x00\x00\x80\x37\x12\x40"

    def test_only_four_bytes_touched(self):
        """Neighbouring bytes are preserved."""
        buf = bytearray(b"\xAA" * 8)
        write32(buf, 2, 0)
        assert buf == b"\xAA\xAA\x00\x00\x00\x00\xAA\xAA"

    def test_value_out_of_range(self):
        """Values wider than 32 bits are rejected."""
        with pytest.raises(ValueError, match="32-bit"):
            write32(bytearray(4), 0, 0x100000000)
        with pytest.raises(ValueError, match="32-bit"):
            write32(bytearray(4), 0, -1)

    def test_offset_out_of_range(self):
        """Words must fit in the buffer."""
        with pytest.raises(ValueError, match="outside buffer"):
            write32(bytearray(4), 1, 0)
        with pytest.raises(ValueError, match="outside buffer"):
            write32(bytearray(4), -1, 0)


class TestChecksumSlots:
    """Tests for read_checksums / write_checksums."""

    def test_write_then_read(self):
        """Stored pair is read back from 0x10 / 0x14."""
        buf = bytearray(0x40)
        write_checksums(buf, 0x635A2BFF, 0x8B022326)
        assert buf[0x10:0x18] == bytes.fromhex("635A2BFF8B022326")
        assert read_checksums(buf) == (0x635A2BFF, 0x8B022326)
