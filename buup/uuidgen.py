"""Version 4 UUIDs drawn from a small, non-cryptographic pseudo-random generator."""

from __future__ import annotations

import threading
import uuid

from .base import Transformer, TransformerCategory

_INITIAL_STATE = 12345
_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MODULUS = 2**31


class _LcgState(threading.local):
    """Per-thread linear congruential generator state."""

    def __init__(self) -> None:
        self.value = _INITIAL_STATE

    def next(self) -> int:
        self.value = (_MULTIPLIER * self.value + _INCREMENT) % _MODULUS
        return self.value

    def random_bytes(self) -> bytes:
        return b"".join(self.next().to_bytes(4, "big") for _ in range(4))


_state = _LcgState()


class UuidGenerate(Transformer):
    """Generates a random version 4 UUID; the input is ignored.

    The generator is not cryptographically secure.
    """

    name = "UUID Generate (v4)"
    id = "uuid_generate"
    description = (
        "Generates a version 4 UUID. Input is ignored. "
        "WARNING: Uses a non-cryptographically secure PRNG."
    )
    category = TransformerCategory.OTHER
    default_test_input = ""

    def transform(self, text: str) -> str:
        if _state.value == _INITIAL_STATE:
            seed = (id(text) & 0xFFFFFFFF) ^ 0xDEADBEEF
            _state.value = (seed + 1) & 0xFFFFFFFF

        raw = bytearray(_state.random_bytes())
        raw[6] = (raw[6] & 0x0F) | 0x40
        raw[8] = (raw[8] & 0x3F) | 0x80
        return str(uuid.UUID(bytes=bytes(raw)))