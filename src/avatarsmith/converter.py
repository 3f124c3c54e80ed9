"""Raster conversion for generated avatars.

SVG markup is rasterized with cairosvg, then re-encoded with Pillow to the
requested format.  JPEG has no alpha channel, so transparent pixels are
flattened onto white first.
"""

from __future__ import annotations

import base64
import io
import logging
from urllib.parse import unquote

from PIL import Image

from avatarsmith.errors import ConversionError, ValidationError

logger = logging.getLogger(__name__)

FORMATS = ("png", "jpg", "webp")

_MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}

# (min, max) quality per format; PNG quality is the zlib compression level.
_QUALITY_RANGE = {"png": (0, 9), "jpg": (0, 100), "webp": (0, 100)}


def mime_type(fmt: str) -> str:
    """Return the MIME type for *fmt*, ``application/octet-stream`` if unknown."""
    return _MIME_TYPES.get(fmt.lower(), "application/octet-stream")


def extract_svg_content(content: str) -> str:
    """Return raw SVG from a ``data:`` URI, or *content* unchanged."""
    if not content.startswith("data:"):
        return content
    header, sep, data = content.partition(",")
    if not sep:
        return content
    if "base64" in header:
        try:
            return base64.b64decode(data, validate=True).decode("utf-8")
        except (ValueError, UnicodeDecodeError):
            return data
    return unquote(data)


def rasterize_svg(markup: str, width: int, height: int) -> bytes:
    """Render SVG *markup* to PNG bytes with cairosvg.

    cairosvg is imported here because it loads the native cairo library on
    import; only raster output needs it.
    """
    try:
        import cairosvg

        return cairosvg.svg2png(
            bytestring=markup.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as exc:
        raise ConversionError(f"Failed to rasterize SVG: {exc}") from exc


class ImageConverter:
    """Convert SVG markup (or raster bytes) to PNG, JPEG or WebP."""

    @classmethod
    def to_png(cls, content: str | bytes, width: int, height: int, quality: int = 9) -> bytes:
        return cls.convert(content, "png", width, height, quality)

    @classmethod
    def to_jpg(cls, content: str | bytes, width: int, height: int, quality: int = 90) -> bytes:
        return cls.convert(content, "jpg", width, height, quality)

    @classmethod
    def to_webp(cls, content: str | bytes, width: int, height: int, quality: int = 90) -> bytes:
        return cls.convert(content, "webp", width, height, quality)

    @classmethod
    def convert(cls, content: str | bytes, fmt: str, width: int, height: int, quality: int) -> bytes:
        """Render *content* to *fmt* at *width* x *height*.

        Raises:
            ValidationError: On an unsupported format, bad dimensions or an
                out-of-range quality.
            ConversionError: If the content cannot be rendered or encoded.
        """
        fmt = "jpg" if fmt.lower() == "jpeg" else fmt.lower()
        if fmt not in FORMATS:
            raise ValidationError(f"Unsupported format: {fmt}", field="format")
        if width < 1 or height < 1:
            raise ValidationError("Image dimensions must be at least 1x1 pixels", field="size")
        low, high = _QUALITY_RANGE[fmt]
        if not low <= quality <= high:
            raise ValidationError(
                f"Invalid quality value '{quality}'. Must be between {low} and {high} for {fmt}.",
                field="quality",
            )

        image = cls._load(content, width, height)
        try:
            return cls._encode(image, fmt, quality)
        except (OSError, ValueError, KeyError) as exc:
            raise ConversionError(f"Failed to encode {fmt} image: {exc}") from exc

    @staticmethod
    def _load(content: str | bytes, width: int, height: int) -> Image.Image:
        if isinstance(content, bytes):
            raster = content
        else:
            if content.startswith(("http://", "https://")):
                raise ConversionError("Cannot rasterize a remote avatar URL")
            raster = rasterize_svg(extract_svg_content(content), width, height)

        try:
            image = Image.open(io.BytesIO(raster))
            image.load()
        except OSError as exc:
            raise ConversionError(f"Failed to read image data: {exc}") from exc

        if image.size != (width, height):
            logger.debug("Resizing avatar from %s to %sx%s", image.size, width, height)
            image = image.resize((width, height), Image.LANCZOS)
        return image

    @staticmethod
    def _encode(image: Image.Image, fmt: str, quality: int) -> bytes:
        buf = io.BytesIO()
        if fmt == "png":
            image.save(buf, format="PNG", compress_level=quality)
        elif fmt == "jpg":
            canvas = Image.new("RGB", image.size, "#ffffff")
            rgba = image.convert("RGBA")
            canvas.paste(rgba, (0, 0), rgba)
            canvas.save(buf, format="JPEG", quality=quality)
        else:
            image.save(buf, format="WEBP", quality=quality)
        return buf.getvalue()
