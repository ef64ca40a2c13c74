"""File-level diff orchestration: read, size-check, diff, and render"""

import logging
from pathlib import Path

from linediff.core.diff import compute_diff
from linediff.core.format import render_numbered, render_side_by_side, to_json, to_unified_string
from linediff.core.models import DiffResult
from linediff.core.split import split_lines


logger = logging.getLogger(__name__)


def _read(path: Path, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def _check_size(text: str, path: Path, max_lines: int) -> None:
    """Raise ValueError when text has more than max_lines lines. No-op if max_lines=0."""
    if max_lines == 0:
        return
    count = len(split_lines(text))
    if count > max_lines:
        raise ValueError(f"{path} has {count} lines, exceeding max_lines={max_lines}")


def run_diff(original: Path, modified: Path, max_lines: int = 5000, encoding: str = "utf-8") -> DiffResult:
    """Diff two text files line by line.

    Raises RuntimeError if either file can't be read and ValueError if either
    exceeds max_lines (the LCS table is quadratic in the input sizes).
    """
    old_text, new_text = _read(original, encoding), _read(modified, encoding)
    logger.info("Read %s (%d chars) and %s (%d chars)", original, len(old_text), modified, len(new_text))
    _check_size(old_text, original, max_lines)
    _check_size(new_text, modified, max_lines)
    return compute_diff(old_text, new_text)


def render(result: DiffResult, fmt: str = "unified", width: int = 40) -> str:
    """Render result in one of the supported output formats."""
    if fmt == "unified":
        return to_unified_string(result)
    if fmt == "numbered":
        return render_numbered(result)
    if fmt == "side-by-side":
        return render_side_by_side(result, width)
    if fmt == "json":
        return to_json(result)
    raise ValueError(f"Unknown output format: {fmt}")
