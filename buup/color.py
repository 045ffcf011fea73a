"""A colour value and its conversions between hex, RGB, HSL and CMYK notations."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from .base import InvalidArgumentError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")


def _strip_prefix_repeatedly(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_suffix_repeatedly(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _unsigned_digits(text: str, digits: frozenset[str]) -> str | None:
    body = text[1:] if text.startswith("+") else text
    if body and all(c in digits for c in body):
        return body
    return None


def _parse_hex_byte(text: str) -> int:
    body = _unsigned_digits(text, _HEX_DIGITS)
    if body is None or int(body, 16) > 255:
        raise InvalidArgumentError("Invalid hex color")
    return int(body, 16)


def _parse_u8(text: str, message: str) -> int:
    body = _unsigned_digits(text, _DEC_DIGITS)
    if body is None or int(body) > 255:
        raise InvalidArgumentError(message)
    return int(body)


def _parse_float(text: str, message: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise InvalidArgumentError(message)
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidArgumentError(message) from exc


def _to_u8(value: float) -> int:
    """Truncate to an integer saturated to 0..255 (NaN becomes 0)."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def _split_args(text: str, prefix: str) -> list[str]:
    body = _strip_suffix_repeatedly(_strip_prefix_repeatedly(text, prefix), ")")
    return [part.strip() for part in body.split(",")]


@dataclass
class Color:
    """An RGB colour with an optional alpha channel, each 0..255."""

    r: int
    g: int
    b: int
    a: int | None = None

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional)."""
        digits = _strip_prefix_repeatedly(text, "#")
        if len(digits.encode("utf-8")) not in (6, 8):
            raise InvalidArgumentError("Invalid hex color format")
        r, g, b = (_parse_hex_byte(digits[i:i + 2]) for i in (0, 2, 4))
        a = _parse_hex_byte(digits[6:8]) if len(digits) == 8 else None
        return cls(r, g, b, a)

    @classmethod
    def from_rgb(cls, text: str) -> Color:
        """Parse ``rgb(r,g,b)`` or ``rgb(r,g,b,a)`` with integer components."""
        parts = _split_args(text, "rgb(")
        if len(parts) not in (3, 4):
            raise InvalidArgumentError("Invalid RGB format")
        values = [_parse_u8(part, "Invalid RGB value") for part in parts]
        return cls(*values)

    @classmethod
    def from_hsl(cls, text: str) -> Color:
        """Parse ``hsl(Hdeg,S%,L%)`` with an optional fractional alpha."""
        parts = _split_args(text, "hsl(")
        if len(parts) not in (3, 4):
            raise InvalidArgumentError("Invalid HSL format")
        message = "Invalid HSL value"
        h = _parse_float(_strip_suffix_repeatedly(parts[0], "deg"), message)
        s = _parse_float(_strip_suffix_repeatedly(parts[1], "%"), message) / 100.0
        l = _parse_float(_strip_suffix_repeatedly(parts[2], "%"), message) / 100.0
        a = _to_u8(_parse_float(parts[3], message) * 255.0) if len(parts) == 4 else None
        r, g, b = cls.hsl_to_rgb(h, s, l)
        return cls(r, g, b, a)

    @classmethod
    def from_cmyk(cls, text: str) -> Color:
        """Parse ``cmyk(C%,M%,Y%,K%)`` with an optional fractional alpha."""
        parts = _split_args(text, "cmyk(")
        if len(parts) not in (4, 5):
            raise InvalidArgumentError("Invalid CMYK format")
        message = "Invalid CMYK value"
        c, m, y, k = (
            _parse_float(_strip_suffix_repeatedly(part, "%"), message) / 100.0
            for part in parts[:4]
        )
        a = _to_u8(_parse_float(parts[4], message) * 255.0) if len(parts) == 5 else None
        return cls(
            _to_u8((1.0 - c) * (1.0 - k) * 255.0),
            _to_u8((1.0 - m) * (1.0 - k) * 255.0),
            _to_u8((1.0 - y) * (1.0 - k) * 255.0),
            a,
        )

    def to_hex(self) -> str:
        """Render as lowercase ``#rrggbb`` or ``#rrggbbaa``."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text if self.a is None else f"{text}{self.a:02x}"

    def to_rgb(self) -> str:
        """Render as ``rgb(r,g,b)`` or ``rgb(r,g,b,a)``."""
        values = [self.r, self.g, self.b] + ([] if self.a is None else [self.a])
        return f"rgb({','.join(map(str, values))})"

    def to_hsl(self) -> str:
        """Render as ``hsl(Hdeg,S%,L%)``, with alpha as a fraction when present."""
        h, s, l = self.rgb_to_hsl(self.r, self.g, self.b)
        body = f"{h:.0f}deg,{s * 100.0:.0f}%,{l * 100.0:.0f}%"
        if self.a is not None:
            body += f",{self.a / 255.0:.2f}"
        return f"hsl({body})"

    def to_cmyk(self) -> str:
        """Render as ``cmyk(C%,M%,Y%,K%)``, with alpha as a fraction when present."""
        c, m, y, k = self.rgb_to_cmyk(self.r, self.g, self.b)
        body = ",".join(f"{value * 100.0:.0f}%" for value in (c, m, y, k))
        if self.a is not None:
            body += f",{self.a / 255.0:.2f}"
        return f"cmyk({body})"

    @staticmethod
    def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
        """Convert hue in degrees and saturation/lightness in 0..1 to RGB bytes."""
        c = (1.0 - abs(2.0 * l - 1.0)) * s
        x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
        m = l - c / 2.0

        sector = _to_u8(h / 60.0)
        if sector == 0:
            r, g, b = c, x, 0.0
        elif sector == 1:
            r, g, b = x, c, 0.0
        elif sector == 2:
            r, g, b = 0.0, c, x
        elif sector == 3:
            r, g, b = 0.0, x, c
        elif sector == 4:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x

        return (
            _to_u8((r + m) * 255.0),
            _to_u8((g + m) * 255.0),
            _to_u8((b + m) * 255.0),
        )

    @staticmethod
    def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
        """Convert RGB bytes to hue in [0, 360) and saturation/lightness in 0..1."""
        rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
        high = max(rf, gf, bf)
        low = min(rf, gf, bf)
        l = (high + low) / 2.0

        if high == low:
            return 0.0, 0.0, l

        spread = high - low
        s = spread / (high + low) if l <= 0.5 else spread / (2.0 - high - low)
        if high == rf:
            h = 60.0 * ((gf - bf) / spread)
        elif high == gf:
            h = 60.0 * (2.0 + (bf - rf) / spread)
        else:
            h = 60.0 * (4.0 + (rf - gf) / spread)
        return h % 360.0, s, l

    @staticmethod
    def rgb_to_cmyk(r: int, g: int, b: int) -> tuple[float, float, float, float]:
        """Convert RGB bytes to cyan, magenta, yellow and key in 0..1."""
        rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
        k = 1.0 - max(rf, gf, bf)
        if abs(k - 1.0) < sys.float_info.epsilon:
            return 0.0, 0.0, 0.0, 1.0
        return (
            (1.0 - rf - k) / (1.0 - k),
            (1.0 - gf - k) / (1.0 - k),
            (1.0 - bf - k) / (1.0 - k),
            k,
        )