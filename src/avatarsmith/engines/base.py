"""Engine interface and the remote fetch collaborator."""

from __future__ import annotations

import abc
import logging

import httpx

from avatarsmith.options import EngineOptions

logger = logging.getLogger(__name__)

SVG_CONTENT_TYPE = "image/svg+xml"

DEFAULT_FETCH_TIMEOUT = 5.0
DEFAULT_USER_AGENT = "AvatarSmith/1.0"


def fetch_url(
    url: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str | None:
    """Fetch *url* and return the response body as text.

    Returns:
        The body on success, or None on HTTP error, timeout, connection failure
        or an invalid URL so the caller can decline and let the next engine run.
    """
    try:
        resp = httpx.get(url, timeout=timeout, headers={"User-Agent": user_agent})
        resp.raise_for_status()
        return resp.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Avatar fetch failed for %s: %s", url, exc)
        return None


class BaseEngine(abc.ABC):
    """A single avatar generation strategy.

    ``generate`` returns markup (or a URL) on success and ``None`` to decline
    the input.  Raising marks the engine as failed; both make the builder
    move on to the next engine in the chain.
    """

    #: Registry identifier, e.g. ``"pixel"``.
    name: str = ""
    content_type: str = SVG_CONTENT_TYPE

    @abc.abstractmethod
    def generate(
        self,
        seed: str,
        name: str | None,
        size: int,
        options: EngineOptions | None = None,
    ) -> str | None:
        """Render an avatar of *size* x *size* for *seed*."""

    def get_content_type(self) -> str:
        return self.content_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def resolve_options(options: EngineOptions | None) -> EngineOptions:
    return options if options is not None else EngineOptions()
