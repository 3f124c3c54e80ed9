"""Bauhaus-style geometric composition.

A bar, a circle, a diagonal line and a square are laid over a tinted
background; ``num_shapes`` above four adds triangles, hexagons, small
circles and small rectangles in that order.  Shape ``k`` reads the hash at
indices ``6k .. 6k + 5`` for its centre, extent, rotation and translation.
"""

from __future__ import annotations

import math
from typing import Callable

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.options import EngineOptions
from avatarsmith.support import svg
from avatarsmith.support.hashing import hex_stream, hex_value, value_from_hash
from avatarsmith.support.name import Name

DEFAULT_NUM_SHAPES = 4
DEFAULT_NUM_COLORS = 5

# Indices consumed per shape.
_BLOCK = 6
# Hash digits available to value_from_hash; keeps 26 shape blocks apart.
_DIGEST_LENGTH = 160

PALETTES: tuple[tuple[str, ...], ...] = (
    ("#d62828", "#f77f00", "#fcbf49", "#003049", "#eae2b7"),
    ("#264653", "#2a9d8f", "#e9c46a", "#f4a261", "#e76f51"),
    ("#0d3b66", "#faf0ca", "#f4d35e", "#ee964b", "#f95738"),
    ("#1d3557", "#457b9d", "#a8dadc", "#e63946", "#f1faee"),
)

BASE_SHAPES = ("bar", "circle", "line", "square")
EXTRA_SHAPES = ("triangle", "hexagon", "small-circle", "small-rectangle")

# (extent range, rotation range) as fractions of size / degrees.
_GEOMETRY: dict[str, tuple[tuple[float, float], tuple[float, float]]] = {
    "bar": ((0.6, 1.0), (0.0, 180.0)),
    "circle": ((0.15, 0.32), (0.0, 0.0)),
    "line": ((0.8, 1.3), (-25.0, 25.0)),
    "square": ((0.22, 0.4), (0.0, 90.0)),
    "triangle": ((0.18, 0.32), (0.0, 360.0)),
    "hexagon": ((0.1, 0.2), (0.0, 60.0)),
    "small-circle": ((0.04, 0.1), (0.0, 0.0)),
    "small-rectangle": ((0.1, 0.2), (0.0, 90.0)),
}


def shape_kind(index: int) -> str:
    if index < len(BASE_SHAPES):
        return BASE_SHAPES[index]
    return EXTRA_SHAPES[(index - len(BASE_SHAPES)) % len(EXTRA_SHAPES)]


def select_palette(digest: str, num_colors: int) -> tuple[str, ...]:
    palette = PALETTES[hex_value(digest, 0, 2) % len(PALETTES)]
    return palette[:num_colors] if num_colors < len(palette) else palette


class BauhausEngine(BaseEngine):
    name = "bauhaus"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        opts = resolve_options(options)
        identity = Name.make(seed)
        num_shapes = opts.get("num_shapes", DEFAULT_NUM_SHAPES)
        palette = select_palette(identity.hash, opts.get("num_colors", DEFAULT_NUM_COLORS))

        base = identity.base_color().to_hsl()
        background = base.with_saturation(min(base.saturation, 0.35)).with_lightness(0.94)

        group = svg.Element("g")
        group.add(svg.rect(0, 0, size, size, fill=background.to_hex()))

        digest = hex_stream(identity.hash, _DIGEST_LENGTH)
        for k in range(num_shapes):
            group.add(self._shape(digest, k, size, palette[k % len(palette)]))

        doc = svg.SVGDocument(size, size)
        doc.add(group)
        return doc.to_string()

    def _shape(self, digest: str, k: int, size: int, color: str) -> svg.Element:
        kind = shape_kind(k)
        (extent_lo, extent_hi), (rot_lo, rot_hi) = _GEOMETRY[kind]

        def value(offset: int, lo: float, hi: float) -> float:
            return value_from_hash(digest, k * _BLOCK + offset, lo, hi)

        cx = value(0, size * 0.2, size * 0.8)
        cy = value(1, size * 0.2, size * 0.8)
        extent = value(2, size * extent_lo, size * extent_hi)
        rotation = value(3, rot_lo, rot_hi)
        tx = value(4, -size * 0.08, size * 0.08)
        ty = value(5, -size * 0.08, size * 0.08)

        builder: Callable[[float, float, float, str], svg.Element] = getattr(
            self, "_" + kind.replace("-", "_")
        )
        element = builder(cx, cy, extent, color)

        opacity = round(0.7 + (k % 3) * 0.1, 1)
        if kind == "line":
            element.set("stroke-opacity", opacity)
        else:
            element.set("fill-opacity", opacity)

        transform = f"translate({svg.fmt(tx)} {svg.fmt(ty)})"
        if rot_hi > rot_lo:
            transform += f" rotate({svg.fmt(rotation)} {svg.fmt(cx)} {svg.fmt(cy)})"
        element.set("transform", transform)
        return element

    @staticmethod
    def _bar(cx: float, cy: float, width: float, color: str) -> svg.Element:
        height = width * 0.22
        return svg.rect(cx - width / 2, cy - height / 2, width, height, fill=color)

    @staticmethod
    def _circle(cx: float, cy: float, r: float, color: str) -> svg.Element:
        return svg.circle(cx, cy, r, fill=color)

    @staticmethod
    def _line(cx: float, cy: float, length: float, color: str) -> svg.Element:
        half = length / 2 * math.cos(math.pi / 4)
        return svg.line(
            cx - half,
            cy - half,
            cx + half,
            cy + half,
            stroke=color,
            stroke_width=length * 0.04,
            stroke_linecap="round",
        )

    @staticmethod
    def _square(cx: float, cy: float, side: float, color: str) -> svg.Element:
        return svg.rect(cx - side / 2, cy - side / 2, side, side, fill=color)

    @staticmethod
    def _triangle(cx: float, cy: float, side: float, color: str) -> svg.Element:
        height = side * math.sqrt(3) / 2
        return svg.polygon(
            [
                (cx, cy - height * 2 / 3),
                (cx - side / 2, cy + height / 3),
                (cx + side / 2, cy + height / 3),
            ],
            fill=color,
        )

    @staticmethod
    def _hexagon(cx: float, cy: float, radius: float, color: str) -> svg.Element:
        return svg.polygon(
            [
                (cx + radius * math.cos(math.pi / 3 * i), cy + radius * math.sin(math.pi / 3 * i))
                for i in range(6)
            ],
            fill=color,
        )

    @staticmethod
    def _small_circle(cx: float, cy: float, r: float, color: str) -> svg.Element:
        return svg.circle(cx, cy, r, fill=color)

    @staticmethod
    def _small_rectangle(cx: float, cy: float, width: float, color: str) -> svg.Element:
        height = width * 0.5
        return svg.rect(cx - width / 2, cy - height / 2, width, height, fill=color)
