"""Line-by-line diff of two strings: split, LCS table, backtrack, tally"""

import logging
from collections import Counter
from collections.abc import Iterable

from linediff.core.backtrack import assemble
from linediff.core.lcs import build_table
from linediff.core.models import DiffLine, DiffLineType, DiffResult, DiffStats
from linediff.core.split import split_lines


logger = logging.getLogger(__name__)


def tally(lines: Iterable[DiffLine]) -> DiffStats:
    """Count lines per DiffLineType."""
    counts = Counter(line.type for line in lines)
    return DiffStats(
        added=counts[DiffLineType.added],
        removed=counts[DiffLineType.removed],
        unchanged=counts[DiffLineType.unchanged],
    )


def compute_diff(original: str, modified: str) -> DiffResult:
    """Compute a line-level diff from original to modified.

    Every line is classified as added, removed or unchanged and carries its
    line number on each side it belongs to. Pure and deterministic.

    The LCS table costs O(m * n) memory; callers diffing large documents
    should bound input size before calling.
    """
    a, b = split_lines(original), split_lines(modified)
    logger.debug("Building %dx%d LCS table", len(a) + 1, len(b) + 1)

    table = build_table(a, b)
    lines = assemble(table, a, b)
    stats = tally(lines)

    logger.debug("Diff stats: added=%d removed=%d unchanged=%d", stats.added, stats.removed, stats.unchanged)
    return DiffResult(lines=tuple(lines), stats=stats)
