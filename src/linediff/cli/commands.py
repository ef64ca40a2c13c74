"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from linediff.config import Settings, load_config
from linediff.core.format import summary
from linediff.core.models import DiffResult
from linediff.core.pipeline import render, run_diff


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the configured log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.getLogger("linediff").setLevel(settings.log_level)
    return settings


def _diff(settings: Settings, original: Path, modified: Path) -> DiffResult:
    try:
        return run_diff(original, modified, settings.max_lines, settings.encoding)
    except (RuntimeError, ValueError) as e:
        _fail("Diff failed", e)


def diff_cmd(
    original: Annotated[Path, typer.Argument(help="Original (left) text file")],
    modified: Annotated[Path, typer.Argument(help="Modified (right) text file")],
    fmt: Annotated[Optional[str], typer.Option("--format", "-f", help="unified, numbered, side-by-side or json")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per input; 0 = unlimited")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Column width for side-by-side output")] = None,
    check: Annotated[bool, typer.Option("--check", help="Exit 1 when the files differ")] = False,
    ):
    """Print a line-by-line diff of two text files."""
    settings = _settings(overrides={"output_format": fmt, "max_lines": max_lines, "column_width": width})
    result = _diff(settings, original, modified)

    text = render(result, settings.output_format, settings.column_width)
    if text:
        typer.echo(text)
    logger.info("Diff complete - %s", summary(result.stats))

    if check and result.stats.has_changes:
        raise typer.Exit(1)


def stats_cmd(
    original: Annotated[Path, typer.Argument(help="Original (left) text file")],
    modified: Annotated[Path, typer.Argument(help="Modified (right) text file")],
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per input; 0 = unlimited")] = None,
    ):
    """Print added/removed/unchanged line counts."""
    settings = _settings(overrides={"max_lines": max_lines})
    result = _diff(settings, original, modified)
    typer.echo(summary(result.stats))


def config_cmd():
    """Show effective settings (config.yaml + LINEDIFF_* env vars) as YAML."""
    settings = _settings()
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())
