"""Outcome of a single engine attempt inside the fallback chain.

An attempt either succeeds, is skipped because the engine declined the
input, or fails because the engine raised.  The builder keeps the skipped
and failed attempts for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Success:
    """The engine produced content."""

    engine: str
    content: str
    content_type: str


@dataclass(frozen=True)
class Skipped:
    """The engine declined the input (returned ``None``)."""

    engine: str
    reason: str = "Engine declined to generate an avatar for this input."

    @property
    def message(self) -> str:
        return self.reason

    @property
    def cause(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    """The engine raised while generating."""

    engine: str
    error: str
    cause: Optional[BaseException] = None

    @property
    def message(self) -> str:
        return self.error


EngineAttempt = Union[Success, Skipped, Failed]
