"""Typed engine options.

:class:`EngineOptions` replaces a free-form option dict.  Every field is
``None`` until set, meaning "use the engine default".  Values are checked
in ``__post_init__`` so out-of-range input fails where it is configured.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Any, Mapping, Optional, Union

from avatarsmith.errors import ValidationError

_LIGHTNESS_FIELDS = ("foreground_lightness", "background_lightness")
_POSITIVE_FIELDS = ("pixels", "num_colors", "num_shapes", "color_stops", "font_size")
_NON_NEGATIVE_FIELDS = ("radius", "marble_blur")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class EngineOptions:
    # dicebear
    style: Optional[str] = None
    background_color: Optional[Union[str, tuple[str, ...]]] = None
    radius: Optional[int] = None
    # gravatar
    default_image: Optional[str] = None
    rating: Optional[str] = None
    # initials
    font_size: Optional[int] = None
    font_weight: Optional[str] = None
    font_family: Optional[str] = None
    # silhouettes (initials, gradient)
    shape: Optional[str] = None
    rotation: Optional[int] = None
    # pixel engines
    pixels: Optional[int] = None
    symmetry: Optional[bool] = None
    foreground_lightness: Optional[float] = None
    background_lightness: Optional[float] = None
    background: Optional[bool] = None
    fill_all: Optional[bool] = None
    # palettes and shapes
    gradient_type: Optional[str] = None
    num_colors: Optional[int] = None
    num_shapes: Optional[int] = None
    color_stops: Optional[int] = None
    marble_blur: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.background_color, list):
            object.__setattr__(self, "background_color", tuple(self.background_color))

        for name in _LIGHTNESS_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not _is_real(value) or not 0.0 <= value <= 1.0:
                raise ValidationError.invalid_lightness(value, name)
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not _is_int(value) or value <= 0:
                raise ValidationError.invalid_positive_integer(value, name)
        for name in _NON_NEGATIVE_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not _is_int(value) or value < 0:
                raise ValidationError.invalid_non_negative_integer(value, name)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EngineOptions:
        """Build options from a dict with snake_case or camelCase keys.

        Raises:
            ValidationError: On unknown keys or out-of-range values.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_RE.sub("_", key).lower()
            if name == "default":
                name = "default_image"
            if name not in known:
                raise ValidationError(f"Unknown option '{key}'.", field=key)
            kwargs[name] = value
        return cls(**kwargs)

    def merge(self, **changes: Any) -> EngineOptions:
        """Return a copy with *changes* applied (validated)."""
        known = {f.name for f in fields(self)}
        for key in changes:
            if key not in known:
                raise ValidationError(f"Unknown option '{key}'.", field=key)
        return replace(self, **changes)

    def get(self, name: str, default: Any) -> Any:
        """Return the option value, or *default* when it was never set."""
        value = getattr(self, name)
        return default if value is None else value
