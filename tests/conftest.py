"""Shared test fixtures for avatarsmith tests."""

from __future__ import annotations

import io
import os

import pytest
from PIL import Image

from avatarsmith.engines import BaseEngine


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep AVATARSMITH_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("AVATARSMITH_"):
            monkeypatch.delenv(key, raising=False)


def make_png(size: int = 64, color: tuple[int, int, int, int] = (100, 150, 200, 255)) -> bytes:
    """Create a minimal valid RGBA PNG."""
    img = Image.new("RGBA", (size, size), color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class DecliningEngine(BaseEngine):
    name = "declines"

    def generate(self, seed, name, size, options=None):
        return None


class ExplodingEngine(BaseEngine):
    name = "explodes"

    def generate(self, seed, name, size, options=None):
        raise RuntimeError("boom")


class SecondExplodingEngine(BaseEngine):
    name = "explodes-too"

    def generate(self, seed, name, size, options=None):
        raise ValueError("kaboom")


class EchoEngine(BaseEngine):
    """Returns the request as text so tests can inspect what was passed."""

    name = "echo"
    content_type = "text/plain"

    def generate(self, seed, name, size, options=None):
        return f"seed={seed};name={name};size={size}"


@pytest.fixture()
def stub_engines(monkeypatch):
    """Register the stub engines above in the engine registry."""
    from avatarsmith.engines import ENGINES

    for engine in (DecliningEngine, ExplodingEngine, SecondExplodingEngine, EchoEngine):
        monkeypatch.setitem(ENGINES, engine.name, engine)
    return ENGINES


@pytest.fixture()
def png_bytes():
    """A 64x64 RGBA PNG, standing in for cairosvg output."""
    return make_png(64)
