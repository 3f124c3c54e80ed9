"""Tests for the Gravatar engine."""

from __future__ import annotations

import hashlib

from avatarsmith.engines.gravatar import GravatarEngine
from avatarsmith.options import EngineOptions


class TestGravatarEngine:
    def test_url(self):
        digest = hashlib.md5(b"test@example.com").hexdigest()
        url = GravatarEngine().generate("test@example.com", None, 80)
        assert url == f"https://www.gravatar.com/avatar/{digest}?d=mp&r=g&s=80&f=y"

    def test_email_is_normalised(self):
        engine = GravatarEngine()
        assert engine.generate("  Test@Example.COM ", None, 80) == engine.generate("test@example.com", None, 80)

    def test_options(self):
        url = GravatarEngine().generate("a@b.c", None, 64, EngineOptions(default_image="identicon", rating="pg"))
        assert url.endswith("?d=identicon&r=pg&s=64&f=y")

    def test_name_does_not_matter(self):
        engine = GravatarEngine()
        assert engine.generate("a@b.c", "Alice", 64) == engine.generate("a@b.c", "Bob", 64)

    def test_content_type(self):
        assert GravatarEngine().get_content_type() == "text/uri-list"
