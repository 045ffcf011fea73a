"""Percent-encoding of text for URLs, with ``+`` standing for a space."""

from __future__ import annotations

from .base import Transformer, TransformerCategory, UrlDecodeError

_UNRESERVED = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.~"
)
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def url_encode(text: str) -> str:
    """Percent-encode the UTF-8 bytes of ``text``; spaces become ``+``."""
    pieces = []
    for byte in text.encode("utf-8"):
        if byte in _UNRESERVED:
            pieces.append(chr(byte))
        elif byte == 0x20:
            pieces.append("+")
        else:
            pieces.append(f"%{byte:02X}")
    return "".join(pieces)


def url_decode(text: str) -> str:
    """Decode percent-escapes and ``+`` in ``text``.

    Raises :class:`UrlDecodeError` on a truncated or malformed escape, or when
    the decoded bytes are not valid UTF-8.
    """
    decoded = bytearray()
    stream = iter(text.encode("utf-8"))
    for byte in stream:
        if byte == ord("+"):
            decoded.append(0x20)
        elif byte == ord("%"):
            digits = bytes(b for _, b in zip(range(2), stream))
            if len(digits) < 2:
                raise UrlDecodeError("Invalid URL encoding: unexpected end of input")
            if not all(d in _HEX_DIGITS for d in digits):
                raise UrlDecodeError("Invalid URL encoding: invalid hex digit")
            decoded.append(int(digits, 16))
        else:
            decoded.append(byte)
    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UrlDecodeError("Invalid UTF-8 sequence in decoded URL") from exc


class UrlEncode(Transformer):
    """Encodes text for use in URLs."""

    name = "URL Encode"
    id = "urlencode"
    description = "Encode text for use in URLs"
    category = TransformerCategory.ENCODER
    default_test_input = "Hello, World! This is a test + example?"

    def transform(self, text: str) -> str:
        return url_encode(text)


class UrlDecode(Transformer):
    """Decodes URL-encoded text."""

    name = "URL Decode"
    id = "urldecode"
    description = "Decode URL-encoded text"
    category = TransformerCategory.DECODER
    default_test_input = "Hello%2C+World%21"

    def transform(self, text: str) -> str:
        return url_decode(text)