"""Avatar silhouettes (circle, square, hexagon) filling the whole canvas."""

from __future__ import annotations

import math

from avatarsmith.support import svg

SHAPES = ("circle", "square", "hexagon")
DEFAULT_SHAPE = "circle"


def normalize_shape(shape: str | None) -> str:
    """Lower-case *shape*; anything unknown falls back to a circle."""
    shape = (shape or DEFAULT_SHAPE).lower()
    return shape if shape in SHAPES else DEFAULT_SHAPE


def hexagon_points(size: int, rotation: int = 0) -> list[tuple[float, float]]:
    half = size / 2
    offset = math.radians(rotation)
    return [
        (half * math.cos(math.pi / 3 * i + offset) + half, half * math.sin(math.pi / 3 * i + offset) + half)
        for i in range(6)
    ]


def silhouette(shape: str | None, size: int, fill: str, rotation: int = 0) -> svg.Element:
    shape = normalize_shape(shape)
    if shape == "square":
        return svg.rect(0, 0, size, size, fill=fill)
    if shape == "hexagon":
        return svg.polygon(hexagon_points(size, rotation), fill=fill)
    radius = size / 2
    return svg.circle(radius, radius, radius, fill=fill)
