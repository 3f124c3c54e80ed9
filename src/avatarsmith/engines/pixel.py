"""Identicon-style pixel grid in a single color."""

from __future__ import annotations

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.engines.matrix import build_matrix
from avatarsmith.options import EngineOptions
from avatarsmith.support import svg
from avatarsmith.support.color import HSLColor
from avatarsmith.support.name import Name

DEFAULT_PIXELS = 5
DEFAULT_FOREGROUND_LIGHTNESS = 0.5
DEFAULT_BACKGROUND_LIGHTNESS = 0.9


class PixelEngine(BaseEngine):
    name = "pixel"

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
        symmetry = opts.get("symmetry", True)
        foreground = self.color(identity, opts.get("foreground_lightness", DEFAULT_FOREGROUND_LIGHTNESS))

        doc = svg.SVGDocument(size, size)
        if opts.get("background", False):
            background = self.color(identity, opts.get("background_lightness", DEFAULT_BACKGROUND_LIGHTNESS))
            doc.add(svg.rect(0, 0, size, size, fill=background.to_hex()))

        pixel_size = size / pixels
        matrix = build_matrix(identity, pixels, symmetry)
        fill = foreground.to_hex()
        for y, row in enumerate(matrix):
            for x, filled in enumerate(row):
                if filled:
                    doc.add(svg.rect(int(x * pixel_size), int(y * pixel_size), pixel_size, pixel_size, fill=fill))

        return doc.to_string()

    @staticmethod
    def color(identity: Name, lightness: float) -> HSLColor:
        return identity.base_color().to_hsl().with_lightness(lightness)
