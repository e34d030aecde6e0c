#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Boot checksum tool for N64 ROM images.

Usage:
    python n64sums.py check game.z64
    python n64sums.py fix game.z64
    python n64sums.py fix game.z64 --output fixed.z64
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from n64checksum import ChecksumError, ChecksumReport, RomImage, repair_file


def print_report(report: ChecksumReport, fixed: bool = False):
    """Print the boot chip and both checksum slots."""
    print(f"BootChip: {report.cic}")
    for field in report.fields:
        if field.is_ok:
            status = "Good"
        elif fixed:
            status = "Bad, fixed"
        else:
            status = "Bad"
        print(f"{field.name}: 0x{field.stored:08X}  "
              f"Calculated: 0x{field.calculated:08X} ({status})")


def cmd_check(rom_path: Path) -> bool:
    """Verify the header checksum of a ROM."""
    report = RomImage.from_file(rom_path).verify()
    print_report(report)
    return report.is_ok


def cmd_fix(rom_path: Path, output: Optional[Path] = None) -> bool:
    """Repair the header checksum, in place or into a copy."""
    if output is None:
        report = repair_file(rom_path)
    else:
        rom = RomImage.from_file(rom_path)
        report = rom.repair()
        rom.save(output)
    print_report(report, fixed=True)
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verify and fix the boot checksum of N64 ROM images"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # check command
    check_parser = subparsers.add_parser("check", help="Verify the header checksum")
    check_parser.add_argument("file", type=Path, help="ROM image (.z64, big-endian)")

    # fix command
    fix_parser = subparsers.add_parser("fix", help="Fix the header checksum")
    fix_parser.add_argument("file", type=Path, help="ROM image (.z64, big-endian)")
    fix_parser.add_argument("--output", "-o", type=Path, default=None,
                            help="Write the fixed image here instead of in place")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if not args.file.exists():
        print(f"Error: File not found: {args.file}")
        sys.exit(1)

    try:
        if args.command == "check":
            ok = cmd_check(args.file)
        else:
            ok = cmd_fix(args.file, args.output)
    except (ChecksumError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
