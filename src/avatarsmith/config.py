"""Library settings via dataclass, read from environment variables with defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

from avatarsmith.errors import ValidationError

MIN_SIZE = 8
MAX_SIZE = 2048

_DEFAULT_SIZE = 200
_DEFAULT_FETCH_TIMEOUT = 5.0
_DEFAULT_USER_AGENT = "AvatarSmith/1.0"
_DEFAULT_LOG_LEVEL = "WARNING"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def _env_number(name: str, cast, default, field: str):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid {name} value '{raw}'.", field=field) from exc


@dataclass
class AvatarSettings:
    """Settings shared by builders, engines and the CLI.

    Fields left as ``None`` are filled from ``AVATARSMITH_*`` environment
    variables, then from built-in defaults.

    Priority (highest wins): constructor arg > env var > default.
    """

    default_size: int | None = None
    debug: bool | None = None
    fetch_timeout: float | None = None
    user_agent: str | None = None
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.default_size is None:
            self.default_size = _env_number("AVATARSMITH_DEFAULT_SIZE", int, _DEFAULT_SIZE, "default_size")
        if self.debug is None:
            self.debug = _env_flag("AVATARSMITH_DEBUG")
        if self.fetch_timeout is None:
            self.fetch_timeout = _env_number(
                "AVATARSMITH_FETCH_TIMEOUT", float, _DEFAULT_FETCH_TIMEOUT, "fetch_timeout"
            )
        if self.user_agent is None:
            self.user_agent = os.getenv("AVATARSMITH_USER_AGENT", _DEFAULT_USER_AGENT)
        if self.log_level is None:
            self.log_level = os.getenv("AVATARSMITH_LOG_LEVEL", _DEFAULT_LOG_LEVEL)
        self.log_level = self.log_level.upper()

        if not MIN_SIZE <= self.default_size <= MAX_SIZE:
            raise ValidationError.invalid_size(self.default_size, MIN_SIZE, MAX_SIZE)
        if self.fetch_timeout <= 0:
            raise ValidationError(
                f"Invalid fetch_timeout value '{self.fetch_timeout}'. Must be greater than 0.",
                field="fetch_timeout",
            )
