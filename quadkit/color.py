"""RGBA colors, named color constants and HSL conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


def _channel_to_byte(value: float) -> int:
    """Scale a 0..1 channel to 0..255, truncating and saturating like a float-to-u8 cast."""
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value * 255.0)))


def _check_byte(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")
    return value


@dataclass(frozen=True)
class Color:
    """A color made of red, green, blue and alpha channels, each nominally 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.r, self.g, self.b, self.a)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a color from four components between 0 and 255."""
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            _check_byte(name, value)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build an opaque color from a 0xRRGGBB integer; the top byte is ignored."""
        if not isinstance(hex_value, int) or not 0 <= hex_value <= 0xFFFFFFFF:
            raise ValueError(f"hex value must fit in 32 bits, got {hex_value!r}")
        return cls.from_rgba(
            (hex_value >> 16) & 0xFF,
            (hex_value >> 8) & 0xFF,
            hex_value & 0xFF,
            255,
        )

    @classmethod
    def from_bytes(cls, data: Sequence[int]) -> Color:
        """Build a color from a sequence of four bytes (r, g, b, a)."""
        values = list(data)
        if len(values) != 4:
            raise ValueError(f"expected 4 color bytes, got {len(values)}")
        return cls.from_rgba(*values)

    def to_bytes(self) -> bytes:
        """Return the color as four bytes (r, g, b, a)."""
        return bytes(_channel_to_byte(channel) for channel in self)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return the channels as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


def color_u8(r: float, g: float, b: float, a: float) -> Color:
    """Build a color from four components on a 0..255 scale (fractions allowed)."""
    return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


LIGHTGRAY = Color(0.78, 0.78, 0.78, 1.00)
GRAY = Color(0.51, 0.51, 0.51, 1.00)
DARKGRAY = Color(0.31, 0.31, 0.31, 1.00)
YELLOW = Color(0.99, 0.98, 0.00, 1.00)
GOLD = Color(1.00, 0.80, 0.00, 1.00)
ORANGE = Color(1.00, 0.63, 0.00, 1.00)
PINK = Color(1.00, 0.43, 0.76, 1.00)
RED = Color(0.90, 0.16, 0.22, 1.00)
MAROON = Color(0.75, 0.13, 0.22, 1.00)
GREEN = Color(0.00, 0.89, 0.19, 1.00)
LIME = Color(0.00, 0.62, 0.18, 1.00)
DARKGREEN = Color(0.00, 0.46, 0.17, 1.00)
SKYBLUE = Color(0.40, 0.75, 1.00, 1.00)
BLUE = Color(0.00, 0.47, 0.95, 1.00)
DARKBLUE = Color(0.00, 0.32, 0.67, 1.00)
PURPLE = Color(0.78, 0.48, 1.00, 1.00)
VIOLET = Color(0.53, 0.24, 0.75, 1.00)
DARKPURPLE = Color(0.44, 0.12, 0.49, 1.00)
BEIGE = Color(0.83, 0.69, 0.51, 1.00)
BROWN = Color(0.50, 0.42, 0.31, 1.00)
DARKBROWN = Color(0.30, 0.25, 0.18, 1.00)
WHITE = Color(1.00, 1.00, 1.00, 1.00)
BLACK = Color(0.00, 0.00, 0.00, 1.00)
BLANK = Color(0.00, 0.00, 0.00, 0.00)
MAGENTA = Color(1.00, 0.00, 1.00, 1.00)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Color:
    """Convert hue, saturation and lightness (all 0..1) to an opaque color."""
    if s == 0.0:
        return Color(l, l, l, 1.0)
    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return Color(
        _hue_to_rgb(p, q, h + 1.0 / 3.0),
        _hue_to_rgb(p, q, h),
        _hue_to_rgb(p, q, h - 1.0 / 3.0),
        1.0,
    )


def rgb_to_hsl(color: Color) -> tuple[float, float, float]:
    """Convert a color to a (hue, saturation, lightness) tuple; alpha is ignored."""
    r, g, b = color.r, color.g, color.b
    high = max(r, g, b)
    low = min(r, g, b)

    lightness = (high + low) / 2.0
    delta = high - low
    if delta == 0.0:
        return (0.0, 0.0, lightness)

    if lightness < 0.5:
        saturation = delta / (high + low)
    else:
        saturation = delta / (2.0 - high - low)

    r2 = (((high - r) / 6.0) + (delta / 2.0)) / delta
    g2 = (((high - g) / 6.0) + (delta / 2.0)) / delta
    b2 = (((high - b) / 6.0) + (delta / 2.0)) / delta

    if high == r:
        hue = b2 - g2
    elif high == g:
        hue = (1.0 / 3.0) + r2 - b2
    else:
        hue = (2.0 / 3.0) + g2 - r2

    if hue < 0.0:
        hue += 1.0
    elif hue > 1.0:
        hue -= 1.0

    return (hue, saturation, lightness)