"""Pixel grid painted from an analogous multi-color palette."""

from __future__ import annotations

import hashlib
import math

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.engines.matrix import build_matrix
from avatarsmith.options import EngineOptions
from avatarsmith.support import svg
from avatarsmith.support.color import HSLColor
from avatarsmith.support.name import Name

DEFAULT_PIXELS = 5
DEFAULT_NUM_COLORS = 5


def color_palette(identity: Name, num_colors: int) -> list[HSLColor]:
    """Spread *num_colors* hues over +/-30 degrees around the base hue.

    Lightness ramps from 0.35 to 0.70 across the palette and saturation
    peaks in the middle.
    """
    base = identity.base_color().to_hsl()
    colors = []
    for i in range(num_colors):
        factor = i / max(1, num_colors - 1)
        colors.append(
            HSLColor(
                hue=int(base.hue + factor * 60 - 30),
                saturation=0.6 + math.sin(factor * math.pi) * 0.2,
                lightness=0.35 + factor * 0.35,
            )
        )
    return colors


def color_index(x: int, y: int, digest: str, num_colors: int) -> int:
    position = x * 100 + y
    value = int(hashlib.md5(f"{digest}{position}".encode("ascii")).hexdigest()[:8], 16)
    return value % num_colors


class MultiColorPixelEngine(BaseEngine):
    name = "multicolor-pixel"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        opts = resolve_options(options)
        identity = Name.make(seed)

        pixels = opts.get("pixels", DEFAULT_PIXELS)
        palette = [c.to_hex() for c in color_palette(identity, opts.get("num_colors", DEFAULT_NUM_COLORS))]

        if opts.get("fill_all", True):
            matrix = [[True] * pixels for _ in range(pixels)]
        else:
            matrix = build_matrix(identity, pixels, opts.get("symmetry", True))

        doc = svg.SVGDocument(size, size)
        pixel_size = size / pixels
        for y, row in enumerate(matrix):
            for x, filled in enumerate(row):
                if not filled:
                    continue
                fill = palette[color_index(x, y, identity.hash, len(palette))]
                doc.add(svg.rect(int(x * pixel_size), int(y * pixel_size), pixel_size, pixel_size, fill=fill))

        return doc.to_string()
