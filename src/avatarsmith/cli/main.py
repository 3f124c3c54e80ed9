"""avatarsmith CLI -- generate avatars from the command line.

Thin wrapper around :class:`avatarsmith.AvatarBuilder` using click.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from avatarsmith.avatar import Avatar
from avatarsmith.builder import AvatarBuilder
from avatarsmith.config import AvatarSettings
from avatarsmith.converter import FORMATS
from avatarsmith.engines import ENGINES
from avatarsmith.engines.gradient import GRADIENT_TYPES
from avatarsmith.engines.shapes import SHAPES
from avatarsmith.errors import AllEnginesFailedError, AvatarError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


class _EchoHandler(logging.Handler):
    """Send log records through ``click.echo`` on stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("avatarsmith")
    if not any(isinstance(h, _EchoHandler) for h in logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="avatarsmith")
@click.option("--verbose", "-v", is_flag=True, help="Log engine attempts to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """avatarsmith -- deterministic placeholder avatars."""
    ctx.ensure_object(dict)
    try:
        settings = AvatarSettings()
    except AvatarError as exc:
        _error(f"Invalid configuration: {exc}")
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# avatarsmith engines
# ---------------------------------------------------------------------------


@cli.command()
def engines() -> None:
    """List available engines."""
    for name in sorted(ENGINES):
        click.echo(name)


# ---------------------------------------------------------------------------
# avatarsmith generate
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--engine", "-e", default="pixel", show_default=True, type=click.Choice(sorted(ENGINES)), help="Primary engine.")
@click.option("--fallback", "-f", multiple=True, type=click.Choice(sorted(ENGINES)), help="Fallback engine (repeatable).")
@click.option("--seed", "-s", default=None, help="Seed string, e.g. an email address.")
@click.option("--name", "-n", default=None, help="Display name (used for initials).")
@click.option("--size", default=None, type=int, help="Image side length in pixels (8-2048).")
@click.option("--shape", type=click.Choice(SHAPES), default=None, help="Silhouette for initials/gradient.")
@click.option("--gradient-type", type=click.Choice(GRADIENT_TYPES), default=None, help="Gradient style.")
@click.option("--pixels", type=int, default=None, help="Grid size for pixel engines.")
@click.option("--format", "fmt", type=click.Choice(("svg",) + FORMATS), default="svg", show_default=True, help="Output format.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write to file instead of stdout.")
@click.option("--debug", is_flag=True, help="Stop at the first engine error.")
@click.pass_context
def generate(
    ctx: click.Context,
    engine: str,
    fallback: tuple[str, ...],
    seed: str | None,
    name: str | None,
    size: int | None,
    shape: str | None,
    gradient_type: str | None,
    pixels: int | None,
    fmt: str,
    output: Path | None,
    debug: bool,
) -> None:
    """Generate an avatar and print it or write it to a file."""
    if seed is None and name is None:
        _error("Provide --seed or --name.")

    try:
        builder: AvatarBuilder = Avatar.engine(engine, settings=ctx.obj["settings"])
        for fb in fallback:
            builder = builder.fallback_to(fb)
        if seed is not None:
            builder = builder.seed(seed)
        if name is not None:
            builder = builder.name(name)
        if size is not None:
            builder = builder.size(size)
        if shape is not None:
            builder = builder.shape(shape)
        if gradient_type is not None:
            builder = builder.gradient_type(gradient_type)
        if pixels is not None:
            builder = builder.pixels(pixels)
        if debug:
            builder = builder.debug()

        avatar = builder.generate()
        if fmt != "svg":
            avatar = getattr(avatar, f"to_{fmt}")()
    except AllEnginesFailedError as exc:
        _error(exc.failure_summary().rstrip())
    except AvatarError as exc:
        _error(f"Error: {exc}")

    if output is not None:
        if not avatar.save(output):
            _error(f"Could not write {output}")
        click.echo(f"Wrote {avatar.engine} avatar to {output}")
        return

    if avatar.is_binary:
        click.get_binary_stream("stdout").write(avatar.to_bytes())
    else:
        click.echo(avatar.to_string())
