"""Avatar engines and the name -> engine registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from avatarsmith.engines.base import BaseEngine, fetch_url
from avatarsmith.engines.bauhaus import BauhausEngine
from avatarsmith.engines.dicebear import DiceBearEngine
from avatarsmith.engines.gradient import GradientEngine
from avatarsmith.engines.gravatar import GravatarEngine
from avatarsmith.engines.initials import InitialsEngine
from avatarsmith.engines.multicolor_pixel import MultiColorPixelEngine
from avatarsmith.engines.pixel import PixelEngine
from avatarsmith.errors import UnknownEngineError

if TYPE_CHECKING:
    from avatarsmith.config import AvatarSettings

ENGINES: dict[str, type[BaseEngine]] = {
    engine.name: engine
    for engine in (
        BauhausEngine,
        DiceBearEngine,
        GradientEngine,
        GravatarEngine,
        InitialsEngine,
        MultiColorPixelEngine,
        PixelEngine,
    )
}


def create_engine(name: str, settings: AvatarSettings | None = None) -> BaseEngine:
    """Instantiate the engine registered under *name* (case-insensitive).

    Raises:
        UnknownEngineError: If *name* is not registered.
    """
    engine_cls = ENGINES.get(name.strip().lower())
    if engine_cls is None:
        raise UnknownEngineError(name)
    if engine_cls is DiceBearEngine and settings is not None:
        return DiceBearEngine(timeout=settings.fetch_timeout, user_agent=settings.user_agent)
    return engine_cls()


__all__ = [
    "ENGINES",
    "BaseEngine",
    "BauhausEngine",
    "DiceBearEngine",
    "GradientEngine",
    "GravatarEngine",
    "InitialsEngine",
    "MultiColorPixelEngine",
    "PixelEngine",
    "create_engine",
    "fetch_url",
]
