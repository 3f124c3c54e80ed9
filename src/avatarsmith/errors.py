"""avatarsmith exception hierarchy.

All library exceptions inherit from :class:`AvatarError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from avatarsmith.attempts import Failed, Skipped


class AvatarError(Exception):
    """Base exception for all avatarsmith errors."""


class ValidationError(AvatarError, ValueError):
    """Raised when a configuration value is out of range.

    Raised at the setter call site, never deferred to generation.
    """

    def __init__(self, message: str = "", field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def invalid_size(cls, size: int, minimum: int = 8, maximum: int = 2048) -> ValidationError:
        return cls(
            f"Invalid size '{size}'. Size must be between {minimum} and {maximum} pixels.",
            field="size",
        )

    @classmethod
    def invalid_lightness(cls, value: float, field: str = "lightness") -> ValidationError:
        return cls(
            f"Invalid {field} value '{value}'. Must be between 0.0 and 1.0.",
            field=field,
        )

    @classmethod
    def invalid_positive_integer(cls, value: int, field: str) -> ValidationError:
        return cls(
            f"Invalid {field} value '{value}'. Must be an integer greater than 0.",
            field=field,
        )

    @classmethod
    def invalid_non_negative_integer(cls, value: int, field: str) -> ValidationError:
        return cls(
            f"Invalid {field} value '{value}'. Must be an integer greater than or equal to 0.",
            field=field,
        )


class UnknownEngineError(ValidationError):
    """Raised when an engine name is not in the registry."""

    def __init__(self, engine: str) -> None:
        super().__init__(f"Unknown engine: {engine}", field="engine")
        self.engine = engine


class NoEngineError(AvatarError):
    """Raised when ``generate()`` is called before any engine was selected."""


class EngineFailedError(AvatarError):
    """Raised in debug mode when an engine raises during generation."""

    def __init__(self, engine_name: str, message: str = "") -> None:
        if not message:
            message = f"Engine '{engine_name}' failed to generate avatar."
        super().__init__(message)
        self.engine_name = engine_name


class AllEnginesFailedError(AvatarError):
    """Raised when every engine in the chain declined or failed.

    ``failures`` holds the attempts in the order the engines were tried.
    """

    def __init__(self, failures: Sequence[Skipped | Failed], message: str = "") -> None:
        self.failures: tuple[Skipped | Failed, ...] = tuple(failures)
        if not message:
            tried = ", ".join(f.engine for f in self.failures)
            message = f"All avatar engines failed to generate an avatar. Tried: {tried}"
        super().__init__(message)

    def failure_summary(self) -> str:
        """Return one line per failed engine."""
        lines = ["Avatar generation failed for all engines:"]
        for failure in self.failures:
            lines.append(f"  - {failure.engine}: {failure.message}")
        return "\n".join(lines) + "\n"


class ConversionError(AvatarError):
    """Raised when an avatar cannot be converted to a raster format."""
