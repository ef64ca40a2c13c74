"""Plain-text renderers for a DiffResult: unified, numbered, side-by-side, JSON"""

from linediff.core.models import DiffLine, DiffLineType, DiffResult, DiffStats


NO_DIFFERENCES = "No differences found - texts are identical."

UNIFIED_PREFIX = {
    DiffLineType.added: "+ ",
    DiffLineType.removed: "- ",
    DiffLineType.unchanged: "  ",
}
SIDE_MARKER = {
    DiffLineType.added: ">",
    DiffLineType.removed: "<",
    DiffLineType.unchanged: "|",
}


def _line_number(num: int | None, width: int) -> str:
    """Right-aligned line number, or blanks if None."""
    if num is None:
        return " " * width
    return str(num).rjust(width)


def _gutter_width(lines: tuple[DiffLine, ...]) -> int:
    nums = [n for dl in lines for n in (dl.left_line_num, dl.right_line_num) if n is not None]
    return len(str(max(nums))) if nums else 1


def to_unified_string(result: DiffResult) -> str:
    """Prefix each line with '+ ', '- ' or two spaces and join with newlines.

    No file headers or hunk ranges. An empty result renders as ''.
    """
    return "\n".join(UNIFIED_PREFIX[dl.type] + dl.text for dl in result.lines)


def render_numbered(result: DiffResult) -> str:
    """Unified view with a line-number gutter (modified side for added lines, original otherwise)."""
    if not result.stats.has_changes:
        return NO_DIFFERENCES
    width = _gutter_width(result.lines)
    rows = []
    for dl in result.lines:
        num = dl.right_line_num if dl.type == DiffLineType.added else dl.left_line_num
        rows.append(f"{_line_number(num, width)} {UNIFIED_PREFIX[dl.type]}{dl.text}".rstrip())
    return "\n".join(rows)


def render_side_by_side(result: DiffResult, width: int = 40) -> str:
    """Two columns, original on the left and modified on the right, each with its own gutter.

    Removed lines leave the right column blank, added lines the left. Text wider
    than `width` is truncated.
    """
    if not result.stats.has_changes:
        return NO_DIFFERENCES
    gutter = _gutter_width(result.lines)
    header = f"{' ' * gutter} {'Original':<{width}}   {' ' * gutter} Modified"
    rows = [header]
    for dl in result.lines:
        left = dl.text if dl.left_line_num is not None else ""
        right = dl.text if dl.right_line_num is not None else ""
        rows.append(
            f"{_line_number(dl.left_line_num, gutter)} {left[:width]:<{width}} {SIDE_MARKER[dl.type]} "
            f"{_line_number(dl.right_line_num, gutter)} {right[:width]}".rstrip()
        )
    return "\n".join(rows)


def summary(stats: DiffStats) -> str:
    return f"{stats.added} added, {stats.removed} removed, {stats.unchanged} unchanged"


def to_json(result: DiffResult) -> str:
    return result.model_dump_json(indent=2)
