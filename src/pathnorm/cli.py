"""CLI interface for pathnorm using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from pathnorm import __description__, __version__
from pathnorm.config import LogLevel, PlatformConfig, Separator, load_config
from pathnorm.logging_config import setup_logging
from pathnorm.normalizer import PathError, PathNormalizer
from pathnorm.platform import platform_from_config

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pathnorm",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print input and result as a JSON object")
]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"pathnorm version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _emit(result: Any, as_json: bool, **inputs: Any) -> None:
    """Print a command result, raw or as JSON."""
    if as_json:
        text = jsonlib.dumps({"input": inputs, "result": result})
    else:
        text = str(result)
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _normalizer(ctx: typer.Context) -> PathNormalizer:
    return ctx.obj["normalizer"]


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .pathnorm.json)")
    ] = None,
    cwd: Annotated[
        Optional[str],
        typer.Option("--cwd", help="Resolve relative paths against this directory instead of the process cwd")
    ] = None,
    separator: Annotated[
        Optional[Separator],
        typer.Option("--separator", "-s", help="Native separator used by 'translate'")
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--lenient", help="Fail when '..' climbs above the root")
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", "-l", help="Override the configured log level")
    ] = None,
) -> None:
    """pathnorm - Path normalization for build-file generators."""
    try:
        settings = load_config(config)
    except ValueError as e:
        _fail(str(e))

    setup_logging(log_level or settings.logging.level)

    try:
        if cwd is not None or separator is not None:
            settings.platform = PlatformConfig(
                separator=separator if separator is not None else settings.platform.separator,
                cwd=cwd if cwd is not None else settings.platform.cwd,
            )
        platform = platform_from_config(settings)
    except (ValidationError, ValueError) as e:
        _fail(f"Invalid platform settings: {e}")

    strict_parent = settings.resolution.strict_parent if strict is None else strict
    ctx.obj = {
        "config": settings,
        "normalizer": PathNormalizer(platform, strict_parent=strict_parent),
    }
    logger.debug(f"Normalizer ready: {platform!r}, strict_parent={strict_parent}")


@app.command()
def absolute(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to resolve against the current directory")],
    json: JsonOption = False,
) -> None:
    """Resolve PATH to an absolute, '/'-separated path."""
    try:
        result = _normalizer(ctx).absolute(path)
    except PathError as e:
        _fail(str(e))
    _emit(result, json, path=path)


@app.command()
def join(
    ctx: typer.Context,
    leading: Annotated[str, typer.Argument(help="Base path")],
    trailing: Annotated[Optional[str], typer.Argument(help="Path to append; wins outright if absolute")] = None,
    json: JsonOption = False,
) -> None:
    """Join TRAILING onto LEADING."""
    try:
        result = _normalizer(ctx).join(leading, trailing)
    except PathError as e:
        _fail(str(e))
    _emit(result, json, leading=leading, trailing=trailing)


@app.command("dir")
def directory(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to split")],
    json: JsonOption = False,
) -> None:
    """Print the directory portion of PATH (empty for a bare file name)."""
    try:
        result = _normalizer(ctx).split_directory(path)
    except PathError as e:
        _fail(str(e))
    _emit(result, json, path=path)


@app.command()
def translate(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to rewrite")],
    to: Annotated[
        Optional[Separator],
        typer.Option("--to", "-t", help="Target separator (default: native separator)")
    ] = None,
    json: JsonOption = False,
) -> None:
    """Rewrite every separator in PATH."""
    target = to.value if to is not None else None
    try:
        result = _normalizer(ctx).translate(path, target)
    except PathError as e:
        _fail(str(e))
    _emit(result, json, path=path, separator=target)


@app.command("is-absolute")
def is_absolute(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to check")],
    json: JsonOption = False,
) -> None:
    """Check whether PATH is absolute. Exits 0 when it is, 1 otherwise."""
    try:
        result = _normalizer(ctx).is_absolute(path)
    except PathError as e:
        _fail(str(e))
    _emit(result if json else str(result).lower(), json, path=path)
    if not result:
        raise typer.Exit(1)


@app.command()
def assemble(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory portion")],
    name: Annotated[str, typer.Argument(help="File name portion")],
    ext: Annotated[
        Optional[str],
        typer.Option("--ext", "-e", help="Extension appended verbatim, e.g. '.sln'")
    ] = None,
    json: JsonOption = False,
) -> None:
    """Assemble DIRECTORY, NAME and an optional extension into a file path."""
    try:
        result = _normalizer(ctx).assemble(directory, name, ext)
    except PathError as e:
        _fail(str(e))
    _emit(result, json, directory=directory, name=name, extension=ext)


if __name__ == "__main__":
    app()
