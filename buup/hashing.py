"""SHA-1 and SHA-256 digests and the transformers that print them as hex."""

from __future__ import annotations

import hashlib

from .base import Transformer, TransformerCategory


def sha1_digest(data: bytes) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data``."""
    return hashlib.sha1(data).digest()


def sha256_digest(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


class Sha1Hash(Transformer):
    """Hex SHA-1 digest of the UTF-8 encoded input."""

    name = "SHA-1 Hash"
    id = "sha1hash"
    description = (
        "Computes the SHA-1 hash of the input text "
        "(Warning: SHA-1 is cryptographically weak)"
    )
    category = TransformerCategory.CRYPTO
    default_test_input = "buup"

    def transform(self, text: str) -> str:
        return sha1_digest(text.encode("utf-8")).hex()


class Sha256Hash(Transformer):
    """Hex SHA-256 digest of the UTF-8 encoded input."""

    name = "SHA-256 Hash"
    id = "sha256hash"
    description = "Computes the SHA-256 hash of the input text"
    category = TransformerCategory.CRYPTO
    default_test_input = "buup"

    def transform(self, text: str) -> str:
        return sha256_digest(text.encode("utf-8")).hex()