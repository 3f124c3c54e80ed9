"""Gradient-filled silhouettes and the blurred "marble" variant."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.engines.shapes import normalize_shape, silhouette
from avatarsmith.options import EngineOptions
from avatarsmith.support import svg
from avatarsmith.support.hashing import hex_value
from avatarsmith.support.name import Name

DEFAULT_GRADIENT_TYPE = "horizontal"
DEFAULT_COLOR_STOPS = 3
DEFAULT_MARBLE_BLUR = 7

GRADIENT_TYPES = ("horizontal", "vertical", "diagonal", "radial", "wavy", "marble")

# x1, y1, x2, y2 in percent
_LINEAR_VECTORS = {
    "horizontal": (0, 0, 100, 0),
    "vertical": (0, 0, 0, 100),
    "diagonal": (0, 0, 100, 100),
}

_MARBLE_VIEWBOX = 80
_MARBLE_SHAPE_1 = "M32.414 59.35L50.376 70.5H72.5v-71H33.728L26.5 13.381l19.057 27.08L32.414 59.35z"
_MARBLE_SHAPE_2 = (
    "M22.216 24L0 46.75l14.108 38.129L78 86l-3.081-59.276-22.378 4.005 "
    "12.972 20.186-23.35 27.395L22.215 24z"
)
_MARBLE_MASK_RX = {"circle": 160, "square": 0, "hexagon": 8}


@dataclass(frozen=True)
class Stop:
    offset: float
    color: str


def _short_hash(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest()[:8]


def gradient_stops(identity: Name, count: int) -> list[Stop]:
    base = identity.base_color().to_hsl()
    stops = []
    for i in range(count):
        factor = i / max(1, count - 1)
        color = base.with_hue(int(base.hue + (factor * 60 - 30)))
        color = color.with_lightness(0.3 + factor * 0.5).with_saturation(0.6 + factor * 0.3)
        stops.append(Stop(factor * 100, color.to_hex()))
    return stops


def wavy_stops(stops: list[Stop]) -> list[Stop]:
    """Insert a stop half-way between each pair, carrying the later color."""
    result: list[Stop] = []
    for i, stop in enumerate(stops):
        if i > 0:
            result.append(Stop((stops[i - 1].offset + stop.offset) / 2, stop.color))
        result.append(stop)
    return result


def _stop_elements(stops: list[Stop]) -> list[svg.Element]:
    return [
        svg.Element("stop", {"offset": f"{svg.fmt(s.offset)}%", "stop-color": s.color})
        for s in stops
    ]


def linear_gradient(gradient_id: str, stops: list[Stop], x1: int, y1: int, x2: int, y2: int) -> svg.Element:
    element = svg.Element(
        "linearGradient",
        {"id": gradient_id, "x1": f"{x1}%", "y1": f"{y1}%", "x2": f"{x2}%", "y2": f"{y2}%"},
    )
    return element.add(*_stop_elements(stops))


def radial_gradient(gradient_id: str, stops: list[Stop]) -> svg.Element:
    element = svg.Element("radialGradient", {"id": gradient_id, "cx": "50%", "cy": "50%", "r": "50%"})
    return element.add(*_stop_elements(stops))


class GradientEngine(BaseEngine):
    name = "gradient"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        opts = resolve_options(options)
        identity = Name.make(seed)
        gradient_type = opts.get("gradient_type", DEFAULT_GRADIENT_TYPE)

        if gradient_type.lower() == "marble":
            return self.marble(seed, identity, size, opts)

        gradient_id = f"gradient-{_short_hash(seed + gradient_type)}"
        stops = gradient_stops(identity, opts.get("color_stops", DEFAULT_COLOR_STOPS))

        doc = svg.SVGDocument(size, size)
        doc.add(svg.Element("defs").add(self.gradient(gradient_type, gradient_id, stops)))
        doc.add(silhouette(opts.shape, size, f"url(#{gradient_id})", opts.get("rotation", 0)))
        return doc.to_string()

    @staticmethod
    def gradient(gradient_type: str, gradient_id: str, stops: list[Stop]) -> svg.Element:
        kind = gradient_type.lower()
        if kind == "radial":
            return radial_gradient(gradient_id, stops)
        if kind == "wavy":
            return linear_gradient(gradient_id, wavy_stops(stops), *_LINEAR_VECTORS["diagonal"])
        return linear_gradient(gradient_id, stops, *_LINEAR_VECTORS.get(kind, _LINEAR_VECTORS["horizontal"]))

    def marble(self, seed: str, identity: Name, size: int, opts: EngineOptions) -> str:
        """Two blurred abstract paths over the base color, masked to the silhouette.

        Transforms read raw digits of ``md5(seed)`` directly.
        """
        digest = hashlib.md5(seed.encode("utf-8")).hexdigest()
        short = digest[:8]
        mask_id = f"mask-{short}"
        filter_id = f"filter-{short}"

        base = identity.base_color().to_hsl()
        colors = (
            base.to_hex(),
            base.shift_hue(90).with_saturation(0.7).with_lightness(0.5).to_hex(),
            base.shift_hue(180).with_saturation(0.75).with_lightness(0.6).to_hex(),
        )

        v = _MARBLE_VIEWBOX
        doc = svg.SVGDocument(size, size, view_box=f"0 0 {v} {v}", fill="none", role="img")

        mask = svg.Element(
            "mask",
            {"id": mask_id, "maskUnits": "userSpaceOnUse", "x": 0, "y": 0, "width": v, "height": v},
        )
        rx = _MARBLE_MASK_RX[normalize_shape(opts.shape)]
        mask.add(svg.Element("rect", {"width": v, "height": v, "rx": rx, "fill": "#FFFFFF"}))
        doc.add(mask)

        group = svg.Element("g", {"mask": f"url(#{mask_id})"})
        group.add(svg.Element("rect", {"width": v, "height": v, "fill": colors[0]}))
        group.add(
            svg.Element(
                "path",
                {
                    "filter": f"url(#{filter_id})",
                    "d": _MARBLE_SHAPE_1,
                    "fill": colors[1],
                    "transform": self._marble_transform(digest, 0),
                },
            )
        )
        group.add(
            svg.Element(
                "path",
                {
                    "filter": f"url(#{filter_id})",
                    "style": "mix-blend-mode: overlay;",
                    "d": _MARBLE_SHAPE_2,
                    "fill": colors[2],
                    "transform": self._marble_transform(digest, 9),
                },
            )
        )
        doc.add(group)

        blur = opts.get("marble_blur", DEFAULT_MARBLE_BLUR)
        flt = svg.Element(
            "filter",
            {"id": filter_id, "filterUnits": "userSpaceOnUse", "color-interpolation-filters": "sRGB"},
        )
        flt.add(
            svg.Element("feFlood", {"flood-opacity": 0, "result": "BackgroundImageFix"}),
            svg.Element("feBlend", {"in": "SourceGraphic", "in2": "BackgroundImageFix", "result": "shape"}),
            svg.Element("feGaussianBlur", {"stdDeviation": blur, "result": "effect1_foregroundBlur"}),
        )
        doc.add(svg.Element("defs").add(flt))
        return doc.to_string()

    @staticmethod
    def _marble_transform(digest: str, start: int) -> str:
        """Translate/rotate/scale from digits ``start .. start + 8`` of *digest*."""
        tx = hex_value(digest, start, 2) % 15 - 7
        ty = hex_value(digest, start + 2, 2) % 15 - 7
        rotate = hex_value(digest, start + 4, 3) % 360
        scale = 1.2 + (hex_value(digest, start + 7, 2) % 30) / 100
        return f"translate({tx} {ty}) rotate({rotate} 40 40) scale({scale:.1f})"
