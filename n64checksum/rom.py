# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
ROM image checksum verification and repair.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from .checksum import BufferTooShortError, ChecksumResult, calculate, identify_cic
from .cic import CicVariant
from .header import (
    CRC1_OFFSET,
    CRC2_OFFSET,
    MIN_ROM_SIZE,
    read_checksums,
    write32,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChecksumField:
    """Stored and calculated value of one header checksum slot."""
    name: str
    offset: int
    stored: int
    calculated: int

    @property
    def is_ok(self) -> bool:
        return self.stored == self.calculated


@dataclass(frozen=True)
class ChecksumReport:
    """Result of comparing the header against the calculated checksum."""
    cic: CicVariant
    crc1: ChecksumField
    crc2: ChecksumField

    @property
    def fields(self) -> List[ChecksumField]:
        return [self.crc1, self.crc2]

    @property
    def bad_fields(self) -> List[ChecksumField]:
        return [field for field in self.fields if not field.is_ok]

    @property
    def is_ok(self) -> bool:
        return not self.bad_fields


class RomImage:
    """
    In-memory N64 ROM image.

    Example:
        rom = RomImage.from_file("game.z64")
        report = rom.repair()
        if not report.is_ok:
            rom.save("game.z64")
    """

    def __init__(self, data: bytes):
        """
        Wrap a ROM image.

        Args:
            data: Raw image in native (big-endian) byte order

        Raises:
            BufferTooShortError: If data is smaller than MIN_ROM_SIZE
        """
        if len(data) < MIN_ROM_SIZE:
            raise BufferTooShortError(len(data))
        self._data = bytearray(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RomImage":
        """Load a ROM image from a file."""
        return cls(Path(path).read_bytes())

    @property
    def data(self) -> bytes:
        """Return a copy of the image bytes."""
        return bytes(self._data)

    @property
    def cic(self) -> CicVariant:
        """Boot chip identified from the boot code."""
        return identify_cic(self._data)

    @property
    def stored_checksums(self) -> Tuple[int, int]:
        """(crc1, crc2) as currently stored in the header."""
        return read_checksums(self._data)

    def calculate(self) -> ChecksumResult:
        """Calculate the checksum of the image."""
        return calculate(self._data)

    def verify(self) -> ChecksumReport:
        """Compare the stored checksum with the calculated one."""
        result = self.calculate()
        crc1, crc2 = self.stored_checksums
        return ChecksumReport(
            cic=result.cic,
            crc1=ChecksumField("CRC 1", CRC1_OFFSET, crc1, result.crc1),
            crc2=ChecksumField("CRC 2", CRC2_OFFSET, crc2, result.crc2),
        )

    def repair(self) -> ChecksumReport:
        """
        Rewrite mismatched header checksum slots.

        Returns:
            The report from before the repair
        """
        report = self.verify()
        for field in report.bad_fields:
            logger.info(
                "%s: 0x%08X -> 0x%08X", field.name, field.stored, field.calculated
            )
            write32(self._data, field.offset, field.calculated)
        return report

    def save(self, path: Union[str, Path]) -> None:
        """Write the image to a file."""
        Path(path).write_bytes(self._data)


def repair_file(path: Union[str, Path]) -> ChecksumReport:
    """
    Verify a ROM file and patch its header checksum in place.

    Only the four bytes of each mismatched slot are written back; the
    rest of the file is left untouched.

    Returns:
        The report from before the repair

    Raises:
        BufferTooShortError: If the file is smaller than MIN_ROM_SIZE
        FileNotFoundError: If the file does not exist
    """
    with open(path, "r+b") as f:
        rom = RomImage(f.read())
        report = rom.repair()
        patched = rom.data
        for field in report.bad_fields:
            f.seek(field.offset)
            f.write(patched[field.offset:field.offset + 4])
    return report
