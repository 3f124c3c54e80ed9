"""avatarsmith -- deterministic placeholder avatars.

Top-level convenience re-exports::

    from avatarsmith import Avatar
    svg = Avatar.engine("pixel").seed("jane@example.com").size(128).generate()
"""

import logging

from avatarsmith.avatar import Avatar
from avatarsmith.builder import AvatarBuilder
from avatarsmith.config import AvatarSettings
from avatarsmith.errors import (
    AllEnginesFailedError,
    AvatarError,
    ConversionError,
    EngineFailedError,
    NoEngineError,
    UnknownEngineError,
    ValidationError,
)
from avatarsmith.generated import GeneratedAvatar
from avatarsmith.options import EngineOptions

__version__ = "0.1.0"

# Silent unless the host application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Avatar",
    "AvatarBuilder",
    "AvatarSettings",
    "EngineOptions",
    "GeneratedAvatar",
    # Errors
    "AvatarError",
    "ValidationError",
    "UnknownEngineError",
    "NoEngineError",
    "EngineFailedError",
    "AllEnginesFailedError",
    "ConversionError",
]
