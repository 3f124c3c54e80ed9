"""Fluent avatar builder with an ordered engine fallback chain.

Configuration is immutable: every setter returns a new builder, so a
half-configured builder can be shared and specialised safely.  Engine names
and option values are validated when they are set; ``generate()`` only
deals with engine outcomes.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional, Sequence, Union

from starlette.responses import Response

from avatarsmith.attempts import EngineAttempt, Failed, Skipped, Success
from avatarsmith.config import MAX_SIZE, MIN_SIZE, AvatarSettings
from avatarsmith.engines import BaseEngine, create_engine
from avatarsmith.errors import (
    AllEnginesFailedError,
    EngineFailedError,
    NoEngineError,
    ValidationError,
)
from avatarsmith.generated import GeneratedAvatar
from avatarsmith.options import EngineOptions


class AvatarBuilder:
    """Collects seed, size and options, then tries engines in order.

    The first engine is the primary; later ``try_engine`` / ``fallback_to``
    calls append fallbacks.  ``generate()`` returns the first successful
    result and records every skipped or failed attempt in ``last_errors``.
    """

    def __init__(
        self,
        engine: Optional[str] = None,
        *,
        settings: Optional[AvatarSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings if settings is not None else AvatarSettings()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._primary: Optional[BaseEngine] = None
        self._fallbacks: tuple[BaseEngine, ...] = ()
        self._options = EngineOptions()
        self._seed: Optional[str] = None
        self._name: Optional[str] = None
        self._size: int = self._settings.default_size
        self._debug: bool = bool(self._settings.debug)
        self._last_errors: tuple[Union[Skipped, Failed], ...] = ()

        if engine is not None:
            self._primary = create_engine(engine, self._settings)

    def _evolve(self, **changes: Any) -> AvatarBuilder:
        clone = copy.copy(self)
        for key, value in changes.items():
            setattr(clone, f"_{key}", value)
        clone._last_errors = ()
        return clone

    def _option(self, **changes: Any) -> AvatarBuilder:
        return self._evolve(options=self._options.merge(**changes))

    # ------------------------------------------------------------------
    # Engine chain
    # ------------------------------------------------------------------

    def try_engine(self, engine: str) -> AvatarBuilder:
        """Set the primary engine, or append a fallback if one is set."""
        created = create_engine(engine, self._settings)
        if self._primary is None:
            return self._evolve(primary=created)
        return self._evolve(fallbacks=self._fallbacks + (created,))

    def fallback_to(self, engine: str) -> AvatarBuilder:
        """Append a fallback engine."""
        return self._evolve(fallbacks=self._fallbacks + (create_engine(engine, self._settings),))

    @property
    def engines(self) -> tuple[BaseEngine, ...]:
        """Primary followed by fallbacks, in try order."""
        if self._primary is None:
            return self._fallbacks
        return (self._primary,) + self._fallbacks

    # ------------------------------------------------------------------
    # Request
    # ------------------------------------------------------------------

    def seed(self, seed: str) -> AvatarBuilder:
        return self._evolve(seed=seed)

    def name(self, name: str) -> AvatarBuilder:
        return self._evolve(name=name)

    def size(self, size: int) -> AvatarBuilder:
        if isinstance(size, bool) or not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
            raise ValidationError.invalid_size(size, MIN_SIZE, MAX_SIZE)
        return self._evolve(size=size)

    def debug(self, enabled: bool = True) -> AvatarBuilder:
        """In debug mode the first engine error is raised instead of falling back."""
        return self._evolve(debug=enabled)

    # ------------------------------------------------------------------
    # Engine options
    # ------------------------------------------------------------------

    def options(self, **fields: Any) -> AvatarBuilder:
        return self._option(**fields)

    def style(self, style: str) -> AvatarBuilder:
        return self._option(style=style)

    def background_color(self, color: Union[str, Sequence[str]]) -> AvatarBuilder:
        if not isinstance(color, str):
            color = tuple(color)
        return self._option(background_color=color)

    def radius(self, radius: int) -> AvatarBuilder:
        return self._option(radius=radius)

    def default_image(self, default: str) -> AvatarBuilder:
        return self._option(default_image=default)

    def rating(self, rating: str) -> AvatarBuilder:
        return self._option(rating=rating)

    def font_size(self, size: int) -> AvatarBuilder:
        return self._option(font_size=size)

    def font_weight(self, weight: str) -> AvatarBuilder:
        return self._option(font_weight=weight)

    def font_family(self, family: str) -> AvatarBuilder:
        return self._option(font_family=family)

    def shape(self, shape: str) -> AvatarBuilder:
        return self._option(shape=shape)

    def rotation(self, degrees: int) -> AvatarBuilder:
        return self._option(rotation=degrees)

    def pixels(self, pixels: int) -> AvatarBuilder:
        return self._option(pixels=pixels)

    def symmetry(self, symmetry: bool = True) -> AvatarBuilder:
        return self._option(symmetry=symmetry)

    def foreground_lightness(self, lightness: float) -> AvatarBuilder:
        return self._option(foreground_lightness=lightness)

    def background_lightness(self, lightness: float) -> AvatarBuilder:
        return self._option(background_lightness=lightness)

    def background(self, enabled: bool = True) -> AvatarBuilder:
        return self._option(background=enabled)

    def gradient_type(self, gradient_type: str) -> AvatarBuilder:
        return self._option(gradient_type=gradient_type)

    def num_colors(self, count: int) -> AvatarBuilder:
        return self._option(num_colors=count)

    def num_shapes(self, count: int) -> AvatarBuilder:
        return self._option(num_shapes=count)

    def color_stops(self, count: int) -> AvatarBuilder:
        return self._option(color_stops=count)

    def fill_all(self, fill_all: bool = True) -> AvatarBuilder:
        return self._option(fill_all=fill_all)

    def marble_blur(self, blur: int) -> AvatarBuilder:
        return self._option(marble_blur=blur)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @property
    def last_errors(self) -> tuple[Union[Skipped, Failed], ...]:
        """Skipped and failed attempts of the latest ``generate()`` call."""
        return self._last_errors

    def get_last_errors(self) -> tuple[Union[Skipped, Failed], ...]:
        return self._last_errors

    def generate(self) -> GeneratedAvatar:
        """Try each engine in order and return the first result.

        Raises:
            NoEngineError: If no engine was selected.
            EngineFailedError: In debug mode, on the first engine that raises.
            AllEnginesFailedError: If every engine declined or failed.
        """
        if self._primary is None:
            raise NoEngineError("No engine specified. Use Avatar.engine() or try_engine() to set an engine.")

        self._last_errors = ()
        seed = self._seed if self._seed is not None else (self._name or "")
        name = self._name if self._name is not None else seed
        failures: list[Union[Skipped, Failed]] = []

        for engine in self.engines:
            attempt = self._attempt(engine, seed, name)
            if isinstance(attempt, Success):
                return GeneratedAvatar(
                    content=attempt.content,
                    content_type=attempt.content_type,
                    name=self._name,
                    size=self._size,
                    engine=attempt.engine,
                )

            failures.append(attempt)
            self._last_errors = tuple(failures)
            if isinstance(attempt, Failed) and self._debug:
                raise EngineFailedError(
                    attempt.engine, f"Engine '{attempt.engine}' failed: {attempt.error}"
                ) from attempt.cause

        raise AllEnginesFailedError(failures)

    def _attempt(self, engine: BaseEngine, seed: str, name: str) -> EngineAttempt:
        self._logger.debug("Trying avatar engine %s", engine.name, extra={"engine": engine.name, "size": self._size})
        try:
            content = engine.generate(seed, name, self._size, self._options)
        except Exception as exc:
            self._logger.warning(
                "Avatar engine %s failed: %s",
                engine.name,
                exc,
                exc_info=True,
                extra={"engine": engine.name},
            )
            return Failed(engine.name, str(exc) or type(exc).__name__, exc)

        if content is None:
            self._logger.debug("Avatar engine %s declined", engine.name, extra={"engine": engine.name})
            return Skipped(engine.name)
        return Success(engine.name, content, engine.get_content_type())

    def to_response(self) -> Response:
        return self.generate().to_response()

    def __repr__(self) -> str:
        names = ", ".join(e.name for e in self.engines)
        return f"AvatarBuilder(engines=[{names}], seed={self._seed!r}, size={self._size!r})"
