"""Caret / range selections expressed as absolute buffer offsets."""

from __future__ import annotations

from dataclasses import dataclass

from .lines import LineIndex


@dataclass(frozen=True, slots=True)
class Selection:
    """Host selection; ``start`` may be greater than ``end``."""

    start: int
    end: int

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def ordered(self) -> "Selection":
        if self.start <= self.end:
            return self
        return Selection(self.end, self.start)


@dataclass(frozen=True, slots=True)
class ResolvedSelection:
    """Line coordinates of an ordered selection."""

    start_line: int
    end_line: int
    start_column: int
    end_column: int

    @property
    def is_multi_line(self) -> bool:
        return self.start_line != self.end_line

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


def resolve(index: LineIndex | str, selection: Selection) -> ResolvedSelection:
    if isinstance(index, str):
        index = LineIndex.from_text(index)
    ordered = selection.ordered()
    start_line, start_column = index.locate(ordered.start)
    end_line, end_column = index.locate(ordered.end)
    return ResolvedSelection(
        start_line=start_line,
        end_line=end_line,
        start_column=start_column,
        end_column=end_column,
    )


__all__ = ["Selection", "ResolvedSelection", "resolve"]
