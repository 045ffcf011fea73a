"""Standard (IEEE 802.3) CRC-32 checksum."""

from __future__ import annotations

import zlib


def crc32(data: bytes) -> int:
    """Return the unsigned 32-bit CRC of ``data``."""
    return zlib.crc32(data) & 0xFFFFFFFF