"""CLI tests using click.testing.CliRunner."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from avatarsmith.cli.main import cli


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


# ---------------------------------------------------------------------------
# test_cli_help
# ---------------------------------------------------------------------------


def test_cli_help(runner: CliRunner):
    """--help lists both commands."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("engines", "generate"):
        assert cmd in result.output


def test_cli_version(runner: CliRunner):
    """--version prints version string."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# test_engines
# ---------------------------------------------------------------------------


def test_engines_lists_registry(runner: CliRunner):
    result = runner.invoke(cli, ["engines"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "bauhaus",
        "dicebear",
        "gradient",
        "gravatar",
        "initials",
        "multicolor-pixel",
        "pixel",
    ]


# ---------------------------------------------------------------------------
# test_generate
# ---------------------------------------------------------------------------


def test_generate_svg_to_stdout(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "--seed", "jane@example.com", "--size", "64"])
    assert result.exit_code == 0
    assert result.output.startswith('<?xml version="1.0" encoding="utf-8"?><svg ')
    assert 'width="64" height="64"' in result.output


def test_generate_is_deterministic(runner: CliRunner):
    first = runner.invoke(cli, ["generate", "-e", "bauhaus", "-s", "same"])
    second = runner.invoke(cli, ["generate", "-e", "bauhaus", "-s", "same"])
    assert first.output == second.output


def test_generate_requires_seed_or_name(runner: CliRunner):
    result = runner.invoke(cli, ["generate"])
    assert result.exit_code == 1
    assert "Provide --seed or --name." in result.output


def test_generate_initials_with_shape(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-e", "initials", "-n", "Jane Doe", "--shape", "square"])
    assert result.exit_code == 0
    assert ">JD</text>" in result.output


def test_generate_falls_back(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-e", "initials", "-f", "pixel", "-n", "   "])
    assert result.exit_code == 0
    assert result.output.startswith("<?xml")


def test_generate_all_engines_fail(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-e", "initials", "-n", "   "])
    assert result.exit_code == 1
    assert "Avatar generation failed for all engines:" in result.output
    assert "  - initials:" in result.output


def test_generate_invalid_size(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-s", "x", "--size", "7"])
    assert result.exit_code == 1
    assert "Error: Invalid size '7'" in result.output


def test_generate_unknown_engine_rejected(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-e", "nope", "-s", "x"])
    assert result.exit_code != 0


def test_generate_gradient_type(runner: CliRunner):
    result = runner.invoke(cli, ["generate", "-e", "gradient", "-s", "x", "--gradient-type", "radial"])
    assert result.exit_code == 0
    assert "<radialGradient" in result.output


def test_generate_writes_file(runner: CliRunner, tmp_path: Path):
    target = tmp_path / "out" / "avatar.svg"
    result = runner.invoke(cli, ["generate", "-s", "x", "--pixels", "8", "-o", str(target)])
    assert result.exit_code == 0
    assert f"Wrote pixel avatar to {target}" in result.output
    assert target.read_text().startswith("<?xml")


def test_generate_png_to_stdout(runner: CliRunner, png_bytes: bytes):
    with patch("avatarsmith.converter.rasterize_svg", return_value=png_bytes):
        result = runner.invoke(cli, ["generate", "-s", "x", "--size", "64", "--format", "png"])
    assert result.exit_code == 0
    assert result.stdout_bytes.startswith(b"\x89PNG")


def test_generate_env_default_size(runner: CliRunner, monkeypatch):
    monkeypatch.setenv("AVATARSMITH_DEFAULT_SIZE", "48")
    result = runner.invoke(cli, ["generate", "-s", "x"])
    assert result.exit_code == 0
    assert 'width="48" height="48"' in result.output


def test_invalid_configuration(runner: CliRunner, monkeypatch):
    monkeypatch.setenv("AVATARSMITH_DEFAULT_SIZE", "4")
    result = runner.invoke(cli, ["engines"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_malformed_timeout_configuration(runner: CliRunner, monkeypatch):
    monkeypatch.setenv("AVATARSMITH_FETCH_TIMEOUT", "abc")
    result = runner.invoke(cli, ["engines"])
    assert result.exit_code == 1
    assert "Invalid AVATARSMITH_FETCH_TIMEOUT value 'abc'" in result.output
