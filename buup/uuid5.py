"""Name-based (version 5, SHA-1) UUIDs from a namespace and a name."""

from __future__ import annotations

import uuid

from .base import InvalidArgumentError, Transformer, TransformerCategory
from .hashing import sha1_digest

NAMESPACE_DNS = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_URL = "6ba7b811-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_OID = "6ba7b812-9dad-11d1-80b4-00c04fd430c8"
NAMESPACE_X500 = "6ba7b814-9dad-11d1-80b4-00c04fd430c8"

_PREDEFINED = {
    "dns": NAMESPACE_DNS,
    "namespace_dns": NAMESPACE_DNS,
    "url": NAMESPACE_URL,
    "namespace_url": NAMESPACE_URL,
    "oid": NAMESPACE_OID,
    "namespace_oid": NAMESPACE_OID,
    "x500": NAMESPACE_X500,
    "namespace_x500": NAMESPACE_X500,
}

_HYPHEN_POSITIONS = (8, 13, 18, 23)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_namespace(namespace: str) -> bytes:
    """Return the 16 bytes of ``namespace``.

    ``namespace`` is either a UUID in the hyphenated 8-4-4-4-12 form or one of
    the predefined names ``dns``, ``url``, ``oid`` and ``x500`` (optionally
    prefixed with ``namespace_``). Raises :class:`InvalidArgumentError` when it
    is neither.
    """
    uuid_text = _PREDEFINED.get(namespace.lower().strip(), namespace)

    if len(uuid_text.encode("utf-8")) != 36 or any(
        len(uuid_text) <= pos or uuid_text[pos] != "-" for pos in _HYPHEN_POSITIONS
    ):
        raise InvalidArgumentError(
            "Invalid namespace UUID format: must be in the format "
            "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"
        )

    for index, char in enumerate(uuid_text):
        if index in _HYPHEN_POSITIONS:
            if char != "-":
                raise InvalidArgumentError(
                    "Invalid namespace UUID format: hyphens must be at positions "
                    "8, 13, 18, and 23"
                )
        elif char not in _HEX_DIGITS:
            raise InvalidArgumentError(
                "Invalid namespace UUID format: character at position "
                f"{index} is not a valid hex digit"
            )

    return bytes.fromhex(uuid_text.replace("-", ""))


def uuid5(namespace: bytes, name: str) -> str:
    """Return the version 5 UUID for ``name`` within the 16-byte ``namespace``."""
    digest = bytearray(sha1_digest(bytes(namespace) + name.encode("utf-8"))[:16])
    digest[6] = (digest[6] & 0x0F) | 0x50
    digest[8] = (digest[8] & 0x3F) | 0x80
    return str(uuid.UUID(bytes=bytes(digest)))


class Uuid5Generate(Transformer):
    """Generates a version 5 UUID from input of the form ``namespace|name``."""

    name = "UUID v5 Generate (SHA-1, namespace-based)"
    id = "uuid5_generate"
    description = (
        "Generates a version 5 UUID based on namespace and name using SHA-1. "
        'Input format: "namespace|name". Namespace can be a UUID or one of: '
        "dns, url, oid, x500."
    )
    category = TransformerCategory.CRYPTO
    default_test_input = "dns|example.com"

    def transform(self, text: str) -> str:
        namespace_text, sep, name = text.partition("|")
        if not sep:
            raise InvalidArgumentError(
                "Input must be in the format 'namespace|name'. Namespace can be "
                "a UUID or one of: dns, url, oid, x500."
            )
        namespace = parse_namespace(namespace_text.strip())
        return uuid5(namespace, name.strip())