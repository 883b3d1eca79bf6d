"""RGB colours, HSV conversion and a few colour effects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

RGB = Tuple[int, int, int]
HSV = Tuple[float, float, float]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels; out-of-range values wrap like a byte."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, int(getattr(self, name)) & 0xFF)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        """Build a colour from hue in degrees and saturation/value in 0..1."""
        return cls(*color_from_hsv(hue, saturation, value))

    def __add__(self, other: "Color") -> "Color":
        return Color(
            min(self.r + other.r, 255),
            min(self.g + other.g, 255),
            min(self.b + other.b, 255),
        )

    def __sub__(self, other: "Color") -> "Color":
        return Color(
            max(self.r - other.r, 0),
            max(self.g - other.g, 0),
            max(self.b - other.b, 0),
        )

    def __mul__(self, other: "Color") -> "Color":
        return Color(
            int(_clamp(self.r * other.r, 0, 255)),
            int(_clamp(self.g * other.g, 0, 255)),
            int(_clamp(self.b * other.b, 0, 255)),
        )

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b


def color_from_hsv(hue: float, saturation: float, value: float) -> RGB:
    """Convert HSV (hue in degrees) to an RGB tuple of bytes."""
    chroma = value * saturation
    h_prime = math.fmod(hue / 60.0, 6.0)
    x = chroma * (1.0 - abs(math.fmod(h_prime, 2.0) - 1.0))
    m = value - chroma

    if 0 <= h_prime < 1:
        r, g, b = chroma, x, 0.0
    elif 1 <= h_prime < 2:
        r, g, b = x, chroma, 0.0
    elif 2 <= h_prime < 3:
        r, g, b = 0.0, chroma, x
    elif 3 <= h_prime < 4:
        r, g, b = 0.0, x, chroma
    elif 4 <= h_prime < 5:
        r, g, b = x, 0.0, chroma
    elif 5 <= h_prime < 6:
        r, g, b = chroma, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return tuple(int((c + m) * 255.0) & 0xFF for c in (r, g, b))  # type: ignore[return-value]


def color_to_hsv(col: Color) -> HSV:
    """Convert a colour to (hue in degrees, saturation, value)."""
    r, g, b = (c / 255.0 for c in col)
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    hue = 0.0
    saturation = 0.0
    if delta > 0:
        if c_max == r:
            hue = 60.0 * math.fmod((g - b) / delta, 6.0)
        elif c_max == g:
            hue = 60.0 * (((b - r) / delta) + 2.0)
        else:
            hue = 60.0 * (((r - g) / delta) + 4.0)
        saturation = delta / c_max if c_max > 0 else 0.0
    value = c_max

    if hue < 0:
        hue += 360.0
    return hue, saturation, value


def color_to_rgb(col: Color) -> RGB:
    """Return the colour as an (r, g, b) tuple."""
    return col.r, col.g, col.b


def greyscale(col: Color) -> Color:
    """Convert a colour to grey using its luminance."""
    luminance = 0.299 * (col.r / 255.0) + 0.587 * (col.g / 255.0) + 0.114 * (col.b / 255.0)
    level = int(luminance * 255.0)
    return Color(level, level, level)


def darken(amount: int, col: Color) -> Color:
    """Subtract amount from every channel, stopping at zero."""
    return Color(*(c - amount if c > amount else 0 for c in col))


def apply_colored_light(col: Color, light: HSV) -> Color:
    """Scale each channel by a light intensity in 0..1; missing channels stay dark."""
    return Color(
        *(int(_clamp((c / 255.0) * intensity, 0.0, 1.0) * 255.0) for c, intensity in zip(col, light))
    )


def lerp(first: Color, second: Color, amount: float) -> Color:
    """Interpolate linearly between two colours; amount runs from 0 to 1."""
    return Color(
        *(int(_clamp(a + (b - a) * amount, 0.0, 255.0)) for a, b in zip(first, second))
    )