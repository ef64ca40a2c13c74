"""Reconstruct the ordered edit script by walking the LCS table back to its origin"""

from collections.abc import Sequence

from linediff.core.models import DiffLine, DiffLineType


def _walk(table: list[list[int]], a: Sequence[str], b: Sequence[str]) -> list[tuple[DiffLineType, str]]:
    """Decide each step from (len(a), len(b)) down to (0, 0). Returned in document order."""
    i, j = len(a), len(b)
    steps: list[tuple[DiffLineType, str]] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            steps.append((DiffLineType.unchanged, a[i - 1]))
            i, j = i - 1, j - 1
        # Ties go to insertion; this picks which of several minimal diffs is produced.
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            steps.append((DiffLineType.added, b[j - 1]))
            j -= 1
        else:
            steps.append((DiffLineType.removed, a[i - 1]))
            i -= 1

    steps.reverse()
    return steps


def assemble(table: list[list[int]], a: Sequence[str], b: Sequence[str]) -> list[DiffLine]:
    """Return diff lines in document order with 1-based left/right line numbers.

    Left numbers advance on removed and unchanged lines, right numbers on added
    and unchanged lines.
    """
    lines = []
    left = right = 1
    for kind, text in _walk(table, a, b):
        if kind == DiffLineType.unchanged:
            lines.append(DiffLine(type=kind, text=text, left_line_num=left, right_line_num=right))
            left += 1
            right += 1
        elif kind == DiffLineType.added:
            lines.append(DiffLine(type=kind, text=text, right_line_num=right))
            right += 1
        else:
            lines.append(DiffLine(type=kind, text=text, left_line_num=left))
            left += 1
    return lines
