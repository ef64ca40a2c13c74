"""Longest-common-subsequence length table over two line sequences"""

from collections.abc import Sequence


def build_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return the (len(a)+1) x (len(b)+1) LCS length table.

    table[i][j] is the LCS length of a[:i] and b[:j]; row 0 and column 0 are zero.
    Lines compare by exact string equality. O(len(a) * len(b)) time and space.
    """
    width = len(b) + 1
    table = [[0] * width]
    for i, line in enumerate(a, 1):
        prev = table[i - 1]
        row = [0] * width
        for j, other in enumerate(b, 1):
            if line == other:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
        table.append(row)
    return table
