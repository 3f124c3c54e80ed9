"""Hashing, color and SVG helpers shared by the engines."""

from avatarsmith.support.color import HSLColor, RGBColor
from avatarsmith.support.hashing import (
    hex_digit_to_bool,
    hex_stream,
    hex_value,
    value_from_hash,
)
from avatarsmith.support.name import Name

__all__ = [
    "HSLColor",
    "RGBColor",
    "Name",
    "hex_digit_to_bool",
    "hex_stream",
    "hex_value",
    "value_from_hash",
]
