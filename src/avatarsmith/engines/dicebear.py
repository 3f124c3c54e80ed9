"""DiceBear avatar fetching.

Uses the DiceBear HTTP API (https://www.dicebear.com/) to render avatars
remotely.  The seed is passed as DiceBear's own seed parameter, so the
same seed always produces the same avatar.

Supported styles include: avataaars, bottts-neutral, identicon, shapes,
thumbs, fun-emoji, etc.  See https://www.dicebear.com/styles/ for the full
list.
"""

from __future__ import annotations

from urllib.parse import urlencode

from avatarsmith.engines.base import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_USER_AGENT,
    BaseEngine,
    fetch_url,
    resolve_options,
)
from avatarsmith.options import EngineOptions

DICEBEAR_URL = "https://api.dicebear.com/9.x"
DEFAULT_STYLE = "avataaars"


class DiceBearEngine(BaseEngine):
    name = "dicebear"

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    def build_url(self, seed: str, size: int, options: EngineOptions | None = None) -> str:
        opts = resolve_options(options)
        params = {"seed": seed, "size": str(size)}

        if opts.background_color is not None:
            colors = opts.background_color
            if isinstance(colors, str):
                colors = (colors,)
            params["backgroundColor"] = ",".join(c.lstrip("#") for c in colors)
        if opts.radius is not None:
            params["radius"] = str(opts.radius)

        style = opts.get("style", DEFAULT_STYLE)
        return f"{DICEBEAR_URL}/{style}/svg?{urlencode(params)}"

    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        """Fetch the SVG markup; ``None`` when DiceBear is unreachable."""
        return fetch_url(self.build_url(seed, size, options), self.timeout, self.user_agent)
