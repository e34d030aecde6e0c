# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
CIC boot chip variants.

Every retail cartridge carries one of a handful of CIC lockout chips. The
chip determines the seed of the boot checksum and how its accumulators are
folded into the final pair, and is recognised from the CRC-32 of the boot
code that accompanies it.
"""

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class CicVariant(IntEnum):
    """Known CIC-NUS boot chips."""
    CIC_6101 = 6101
    CIC_6102 = 6102
    CIC_6103 = 6103
    CIC_6105 = 6105
    CIC_6106 = 6106

    def __str__(self) -> str:
        return f"CIC-NUS-{self.value}"


# Variant assumed when the boot code is not one of the known dumps
DEFAULT_VARIANT = CicVariant.CIC_6105

# CRC-32 of the boot code (0x40..0x1000) -> boot chip
FINGERPRINTS = {
    0x6170A4A1: CicVariant.CIC_6101,
    0x90BB6CB5: CicVariant.CIC_6102,
    0x0B050EE0: CicVariant.CIC_6103,
    0x98BC2C86: CicVariant.CIC_6105,
    0xACC8580A: CicVariant.CIC_6106,
}

SEEDS = {
    CicVariant.CIC_6101: 0xF8CA4DDC,
    CicVariant.CIC_6102: 0xF8CA4DDC,
    CicVariant.CIC_6103: 0xA3886759,
    CicVariant.CIC_6105: 0xDF26F436,
    CicVariant.CIC_6106: 0x1FEA617A,
}


def from_fingerprint(fingerprint: int) -> CicVariant:
    """
    Map a boot code CRC-32 to its boot chip.

    Unknown fingerprints fall back to CIC-NUS-6105, matching the
    behaviour of the reference checksum tools.
    """
    cic = FINGERPRINTS.get(fingerprint)
    if cic is None:
        logger.warning(
            "Unknown boot code (CRC32 0x%08X); defaulting to %s",
            fingerprint, DEFAULT_VARIANT,
        )
        return DEFAULT_VARIANT
    return cic
