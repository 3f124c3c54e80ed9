"""Gravatar URL builder.

The avatar is hosted by Gravatar; the engine only builds the URL, keyed by
the MD5 of the normalised email.  The display name never influences it.
"""

from __future__ import annotations

import hashlib
from urllib.parse import urlencode

from avatarsmith.engines.base import BaseEngine, resolve_options
from avatarsmith.options import EngineOptions

GRAVATAR_URL = "https://www.gravatar.com/avatar"
DEFAULT_IMAGE = "mp"
DEFAULT_RATING = "g"


class GravatarEngine(BaseEngine):
    name = "gravatar"
    content_type = "text/uri-list"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        opts = resolve_options(options)
        email_hash = hashlib.md5(seed.strip().lower().encode("utf-8")).hexdigest()
        params = {
            "d": opts.get("default_image", DEFAULT_IMAGE),
            "r": opts.get("rating", DEFAULT_RATING),
            "s": str(size),
            "f": "y",
        }
        return f"{GRAVATAR_URL}/{email_hash}?{urlencode(params)}"
