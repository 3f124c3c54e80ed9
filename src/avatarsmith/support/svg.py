"""Minimal SVG writer.

Elements keep attributes in insertion order and numbers are formatted the
same way every time, so identical input renders byte-identical markup.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Union

Number = Union[int, float]
AttrValue = Union[str, int, float]

SVG_NS = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def fmt(value: AttrValue) -> str:
    """Format an attribute value; floats get at most four decimals."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        text = f"{value:.4f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text
    return str(value)


def points(coords: Iterable[tuple[Number, Number]]) -> str:
    """Render a polygon ``points`` attribute."""
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in coords)


class Element:
    """An SVG element with ordered attributes, children and optional text."""

    def __init__(self, tag: str, attrs: dict[str, AttrValue] | None = None, text: str | None = None) -> None:
        self.tag = tag
        self.attrs: dict[str, AttrValue] = dict(attrs or {})
        self.children: list[Element] = []
        self.text = text

    def set(self, name: str, value: AttrValue) -> Element:
        self.attrs[name] = value
        return self

    def add(self, *children: Element) -> Element:
        self.children.extend(children)
        return self

    def render(self) -> str:
        attrs = "".join(
            f' {name}="{escape(fmt(value), quote=True)}"' for name, value in self.attrs.items()
        )
        if not self.children and self.text is None:
            return f"<{self.tag}{attrs}/>"
        inner = escape(self.text, quote=False) if self.text is not None else ""
        inner += "".join(child.render() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()


class SVGDocument(Element):
    """Root ``<svg>`` element sized ``width`` x ``height``."""

    def __init__(self, width: Number, height: Number, view_box: str | None = None, **attrs: AttrValue) -> None:
        base: dict[str, AttrValue] = {"xmlns": SVG_NS, "width": width, "height": height}
        base["viewBox"] = view_box if view_box is not None else f"0 0 {fmt(width)} {fmt(height)}"
        base.update(attrs)
        super().__init__("svg", base)

    def to_string(self) -> str:
        return XML_DECLARATION + self.render()

    def __str__(self) -> str:
        return self.to_string()


def rect(x: Number, y: Number, width: Number, height: Number, **attrs: AttrValue) -> Element:
    return Element("rect", {"x": x, "y": y, "width": width, "height": height, **_attrs(attrs)})


def circle(cx: Number, cy: Number, r: Number, **attrs: AttrValue) -> Element:
    return Element("circle", {"cx": cx, "cy": cy, "r": r, **_attrs(attrs)})


def line(x1: Number, y1: Number, x2: Number, y2: Number, **attrs: AttrValue) -> Element:
    return Element("line", {"x1": x1, "y1": y1, "x2": x2, "y2": y2, **_attrs(attrs)})


def polygon(coords: Iterable[tuple[Number, Number]], **attrs: AttrValue) -> Element:
    return Element("polygon", {"points": points(coords), **_attrs(attrs)})


def _attrs(attrs: dict[str, AttrValue]) -> dict[str, AttrValue]:
    """Turn python keyword names into SVG attribute names (``fill_opacity`` -> ``fill-opacity``)."""
    return {name.replace("_", "-"): value for name, value in attrs.items()}
