"""GeneratedAvatar -- frozen result of a successful generation.

Holds the markup, URL or raster bytes produced by an engine together with
its content type.  Format conversions return new instances.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, replace
from html import escape
from pathlib import Path
from typing import Optional, Union

from starlette.responses import Response

from avatarsmith.converter import ImageConverter, mime_type

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/svg+xml": "svg",
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "text/uri-list": "txt",
}


@dataclass(frozen=True)
class GeneratedAvatar:
    content: Union[str, bytes]
    content_type: str = "image/svg+xml"
    name: Optional[str] = None
    size: int = 200
    engine: Optional[str] = None

    # -- predicates ---------------------------------------------------------

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)

    def is_data_uri(self) -> bool:
        return not self.is_binary and self.content.startswith("data:")

    def is_url(self) -> bool:
        return not self.is_binary and self.content.startswith(("http://", "https://"))

    # -- text representations ----------------------------------------------

    def to_string(self) -> str:
        """Text content; raster content is returned as a data URI."""
        if isinstance(self.content, bytes):
            return self.to_base64()
        return self.content

    def __str__(self) -> str:
        return self.to_string()

    def to_html(self, alt: str = "Avatar") -> str:
        """Inline SVG, or an ``<img>`` tag for URLs and binary content."""
        if self.is_binary or self.is_data_uri() or self.is_url():
            src = self.to_url()
            return f'<img src="{escape(src, quote=True)}" alt="{escape(alt, quote=True)}" />'
        return self.content

    def to_base64(self) -> str:
        if self.is_data_uri():
            return self.content
        raw = self.content if isinstance(self.content, bytes) else self.content.encode("utf-8")
        return f"data:{self.content_type};base64,{base64.b64encode(raw).decode('ascii')}"

    def to_url(self) -> str:
        if self.is_url():
            return self.content
        return self.to_base64()

    # -- raster conversions -------------------------------------------------

    def to_png(self, quality: int = 9) -> GeneratedAvatar:
        return self._convert("png", quality)

    def to_jpg(self, quality: int = 90) -> GeneratedAvatar:
        return self._convert("jpg", quality)

    def to_webp(self, quality: int = 90) -> GeneratedAvatar:
        return self._convert("webp", quality)

    def _convert(self, fmt: str, quality: int) -> GeneratedAvatar:
        data = ImageConverter.convert(self.content, fmt, self.size, self.size, quality)
        return replace(self, content=data, content_type=mime_type(fmt))

    # -- output adapters ----------------------------------------------------

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self.content_type, "bin")

    def to_bytes(self) -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode("utf-8")

    def save(self, path: Union[str, Path]) -> bool:
        """Write the content to *path*, creating parent directories.

        Returns:
            True on success, False if the file could not be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.to_bytes())
        except OSError:
            logger.warning("Failed to save avatar to %s", path, exc_info=True)
            return False
        return True

    def to_response(self, status_code: int = 200) -> Response:
        return Response(content=self.to_bytes(), status_code=status_code, media_type=self.content_type)

    def download(self, filename: str = "avatar") -> Response:
        """Response that makes browsers save the avatar as *filename*."""
        if "." not in filename:
            filename = f"{filename}.{self.extension}"
        quoted = filename.replace("\\", "\\\\").replace('"', '\\"')
        return Response(
            content=self.to_bytes(),
            media_type=self.content_type,
            headers={"Content-Disposition": f'attachment; filename="{quoted}"'},
        )

    def __repr__(self) -> str:
        return (
            f"GeneratedAvatar(content_type={self.content_type!r}, "
            f"engine={self.engine!r}, size={self.size!r}, "
            f"length={len(self.content)!r})"
        )
