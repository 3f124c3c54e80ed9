"""Entry points for building avatars."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from avatarsmith.builder import AvatarBuilder
from avatarsmith.config import AvatarSettings


class Avatar:
    """Facade over :class:`AvatarBuilder`.

    ``Avatar.engine("pixel").seed("jane@example.com").generate()``
    """

    @staticmethod
    def engine(engine: str, settings: Optional[AvatarSettings] = None) -> AvatarBuilder:
        return AvatarBuilder(engine, settings=settings)

    @staticmethod
    def for_user(user: Any, settings: Optional[AvatarSettings] = None) -> AvatarBuilder:
        """Builder pre-seeded from a user mapping or object.

        Reads ``email`` (seed) and ``name`` from mapping keys or attributes;
        ``get_email()`` / ``get_name()`` methods take precedence.  Non-string
        values are ignored.  The returned builder has no engine yet.
        """
        builder = AvatarBuilder(settings=settings)

        if isinstance(user, Mapping):
            email = user.get("email")
            name = user.get("name")
        else:
            email = getattr(user, "email", None)
            name = getattr(user, "name", None)
            if callable(getattr(user, "get_email", None)):
                email = user.get_email()
            if callable(getattr(user, "get_name", None)):
                name = user.get_name()

        if isinstance(email, str):
            builder = builder.seed(email)
        if isinstance(name, str):
            builder = builder.name(name)
        return builder
