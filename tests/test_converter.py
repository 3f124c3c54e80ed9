"""Tests for avatarsmith.converter."""

from __future__ import annotations

import base64
import io
import sys
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from avatarsmith.converter import ImageConverter, extract_svg_content, mime_type, rasterize_svg
from avatarsmith.errors import ConversionError, ValidationError

SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64"><rect width="64" height="64"/></svg>'


class TestHelpers:
    @pytest.mark.parametrize(
        "fmt, expected",
        [("png", "image/png"), ("JPG", "image/jpeg"), ("jpeg", "image/jpeg"), ("webp", "image/webp"), ("tiff", "application/octet-stream")],
    )
    def test_mime_type(self, fmt, expected):
        assert mime_type(fmt) == expected

    def test_plain_svg_unchanged(self):
        assert extract_svg_content(SVG) == SVG

    def test_base64_data_uri(self):
        uri = "data:image/svg+xml;base64," + base64.b64encode(SVG.encode()).decode()
        assert extract_svg_content(uri) == SVG

    def test_percent_encoded_data_uri(self):
        assert extract_svg_content("data:image/svg+xml,%3Csvg%2F%3E") == "<svg/>"


class TestRasterize:
    def test_calls_cairosvg(self):
        fake = MagicMock()
        fake.svg2png.return_value = b"png"
        with patch.dict(sys.modules, {"cairosvg": fake}):
            assert rasterize_svg(SVG, 32, 48) == b"png"
        fake.svg2png.assert_called_once_with(bytestring=SVG.encode(), output_width=32, output_height=48)

    def test_wraps_errors(self):
        fake = MagicMock()
        fake.svg2png.side_effect = ValueError("bad svg")
        with patch.dict(sys.modules, {"cairosvg": fake}):
            with pytest.raises(ConversionError, match="bad svg"):
                rasterize_svg("<nope", 32, 32)


class TestConvert:
    def test_png(self, png_bytes):
        with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes) as mock_raster:
            data = ImageConverter.to_png(SVG, 64, 64)
        assert data.startswith(b"\x89PNG\r\n\x1a\n")
        mock_raster.assert_called_once_with(SVG, 64, 64)

    def test_resizes_to_requested_size(self, png_bytes):
        with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes):
            data = ImageConverter.to_png(SVG, 32, 32)
        assert Image.open(io.BytesIO(data)).size == (32, 32)

    def test_jpg_flattens_transparency_onto_white(self):
        buf = io.BytesIO()
        Image.new("RGBA", (16, 16), (0, 0, 0, 0)).save(buf, format="PNG")
        transparent = buf.getvalue()
        with patch("avatarsmith.converter.rasterize_svg", return_value=transparent):
            data = ImageConverter.to_jpg(SVG, 16, 16)
        assert data[:2] == b"\xff\xd8"
        image = Image.open(io.BytesIO(data))
        assert image.mode == "RGB"
        assert all(channel >= 250 for channel in image.getpixel((8, 8)))

    def test_jpeg_alias(self, png_bytes):
        with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes):
            assert ImageConverter.convert(SVG, "jpeg", 64, 64, 80)[:2] == b"\xff\xd8"

    def test_webp(self, png_bytes):
        with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes):
            data = ImageConverter.to_webp(SVG, 64, 64)
        assert data[:4] == b"RIFF"
        assert data[8:12] == b"WEBP"

    def test_raster_bytes_skip_rasterizer(self, png_bytes):
        with patch("avatarsmith.converter.rasterize_svg") as mock_raster:
            data = ImageConverter.to_webp(png_bytes, 64, 64)
        mock_raster.assert_not_called()
        assert data[8:12] == b"WEBP"

    def test_data_uri_is_decoded_before_rasterizing(self, png_bytes):
        uri = "data:image/svg+xml;base64," + base64.b64encode(SVG.encode()).decode()
        with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes) as mock_raster:
            ImageConverter.to_png(uri, 64, 64)
        mock_raster.assert_called_once_with(SVG, 64, 64)


class TestConvertErrors:
    def test_unsupported_format(self):
        with pytest.raises(ValidationError, match="Unsupported format"):
            ImageConverter.convert(SVG, "gif", 64, 64, 90)

    @pytest.mark.parametrize("width, height", [(0, 64), (64, 0)])
    def test_bad_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            ImageConverter.to_png(SVG, width, height)

    @pytest.mark.parametrize(
        "fmt, quality",
        [("png", 10), ("png", -1), ("jpg", 101), ("webp", -1)],
    )
    def test_quality_range(self, fmt, quality):
        with pytest.raises(ValidationError) as exc_info:
            ImageConverter.convert(SVG, fmt, 64, 64, quality)
        assert exc_info.value.field == "quality"

    def test_remote_url(self):
        with pytest.raises(ConversionError):
            ImageConverter.to_png("https://www.gravatar.com/avatar/abc", 64, 64)

    def test_unreadable_raster(self):
        with patch("avatarsmith.converter.rasterize_svg", return_value=b"not an image"):
            with pytest.raises(ConversionError):
                ImageConverter.to_png(SVG, 64, 64)
