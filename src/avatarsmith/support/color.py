"""RGB and HSL color value types.

Engines derive a base :class:`RGBColor` from the seed hash, convert it to
:class:`HSLColor` and perturb hue, saturation and lightness to build their
palettes.  Both types are immutable; every modifier returns a new instance.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass, replace

_HEX_RE = re.compile(r"^#?(?P<hex>[0-9a-fA-F]{6})$")


def _channel(value: float) -> int:
    """Scale a 0..1 channel to 0..255, rounding half up."""
    return min(255, max(0, math.floor(value * 255 + 0.5)))


def _clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    return min(maximum, max(minimum, value))


@dataclass(frozen=True)
class RGBColor:
    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        """Parse ``#rrggbb`` (leading ``#`` optional)."""
        m = _HEX_RE.match(value)
        if not m:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = m.group("hex")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_hsl(self) -> HSLColor:
        h, l, s = colorsys.rgb_to_hls(self.red / 255, self.green / 255, self.blue / 255)
        return HSLColor(h * 360, s, l)

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class HSLColor:
    """A color in HSL space.

    ``hue`` is in degrees and always normalised into ``[0, 360)``;
    ``saturation`` and ``lightness`` are fractions and clamped to ``[0, 1]``.
    """

    hue: float
    saturation: float
    lightness: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", self.hue % 360)
        object.__setattr__(self, "saturation", _clamp(self.saturation))
        object.__setattr__(self, "lightness", _clamp(self.lightness))

    def with_hue(self, hue: float) -> HSLColor:
        return replace(self, hue=hue)

    def shift_hue(self, degrees: float) -> HSLColor:
        return replace(self, hue=self.hue + degrees)

    def with_saturation(self, saturation: float) -> HSLColor:
        return replace(self, saturation=saturation)

    def with_lightness(self, lightness: float) -> HSLColor:
        return replace(self, lightness=lightness)

    def to_rgb(self) -> RGBColor:
        r, g, b = colorsys.hls_to_rgb(self.hue / 360, self.lightness, self.saturation)
        return RGBColor(_channel(r), _channel(g), _channel(b))

    def to_hex(self) -> str:
        return self.to_rgb().to_hex()

    def __str__(self) -> str:
        return self.to_hex()
