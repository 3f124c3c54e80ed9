"""Initials centred over a filled silhouette."""

from __future__ import annotations

import math

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.engines.shapes import silhouette
from avatarsmith.options import EngineOptions
from avatarsmith.support import svg
from avatarsmith.support.name import Name

DEFAULT_FOREGROUND_LIGHTNESS = 0.35
DEFAULT_BACKGROUND_LIGHTNESS = 0.8
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_FONT_FAMILY = "Segoe UI, Helvetica, sans-serif"


def font_size_for(size: int, initials: str) -> int:
    """Shrink the font as the number of initials grows."""
    return int(size * (0.5 - math.sin(0.5 * len(initials) - 1) / 5))


class InitialsEngine(BaseEngine):
    name = "initials"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        identity = Name.make(name if name is not None else seed)
        initials = identity.initials()
        if initials == "":
            return None

        opts = resolve_options(options)
        base = identity.base_color().to_hsl()
        foreground = base.with_lightness(opts.get("foreground_lightness", DEFAULT_FOREGROUND_LIGHTNESS))
        background = base.with_lightness(opts.get("background_lightness", DEFAULT_BACKGROUND_LIGHTNESS))
        font_size = opts.get("font_size", None) or font_size_for(size, initials)

        doc = svg.SVGDocument(size, size)
        doc.add(silhouette(opts.shape, size, background.to_hex(), opts.get("rotation", 0)))
        doc.add(
            svg.Element(
                "text",
                {
                    "x": "50%",
                    "y": "55%",
                    "fill": foreground.to_hex(),
                    "text-anchor": "middle",
                    "dominant-baseline": "middle",
                    "font-weight": opts.get("font_weight", DEFAULT_FONT_WEIGHT),
                    "font-family": opts.get("font_family", DEFAULT_FONT_FAMILY),
                    "font-size": f"{font_size}px",
                },
                text=initials,
            )
        )
        return doc.to_string()
