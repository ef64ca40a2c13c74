"""Diff result models: line types, annotated lines, and summary stats"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiffLineType(str, Enum):
    """Classification of a single line in a diff"""
    added = "added"
    removed = "removed"
    unchanged = "unchanged"


class DiffLine(BaseModel):
    """One line of a diff, annotated with its line number on each side."""
    model_config = ConfigDict(frozen=True)

    type: DiffLineType
    text: str
    left_line_num:  Optional[int] = Field(default=None, ge=1, description="1-based line in the original; None for added")
    right_line_num: Optional[int] = Field(default=None, ge=1, description="1-based line in the modified; None for removed")

    @model_validator(mode="after")
    def _check_sides(self) -> "DiffLine":
        has_left = self.left_line_num is not None
        has_right = self.right_line_num is not None
        expected = {
            DiffLineType.added: (False, True),
            DiffLineType.removed: (True, False),
            DiffLineType.unchanged: (True, True),
        }[self.type]
        if (has_left, has_right) != expected:
            raise ValueError(
                f"{self.type.value} line has left_line_num={self.left_line_num}, "
                f"right_line_num={self.right_line_num}"
            )
        return self


class DiffStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    added:     int = Field(default=0, ge=0)
    removed:   int = Field(default=0, ge=0)
    unchanged: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.added + self.removed + self.unchanged

    @property
    def has_changes(self) -> bool:
        """False when the two texts are identical line-for-line."""
        return bool(self.added or self.removed)


class DiffResult(BaseModel):
    """Ordered diff lines plus per-type counts. Built fresh by each compute_diff call."""
    model_config = ConfigDict(frozen=True)

    lines: tuple[DiffLine, ...] = ()
    stats: DiffStats = DiffStats()

    @model_validator(mode="after")
    def _check_counts(self) -> "DiffResult":
        if self.stats.total != len(self.lines):
            raise ValueError(f"stats count {self.stats.total} does not match {len(self.lines)} lines")
        return self
