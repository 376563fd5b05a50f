"""Line index over a flat text buffer.

Text is split on ``"\\n"`` only and re-joined with the same separator, so
``join_lines(to_lines(text)) == text`` for every input: a trailing newline
yields a trailing empty line and the empty buffer is one empty line.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Sequence

Lines = tuple[str, ...]
Offsets = tuple[int, ...]


def to_lines(text: str) -> Lines:
    return tuple(text.split("\n"))


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def line_offsets(lines: Sequence[str]) -> Offsets:
    """Absolute offset of the first character of every line."""

    offsets: list[int] = []
    running = 0
    for line in lines:
        offsets.append(running)
        running += len(line) + 1  # newline
    return tuple(offsets)


def line_of_offset(offsets: Sequence[int], offset: int) -> int:
    """Greatest line index whose start offset is ``<= offset``.

    A caret sitting exactly on a line start belongs to that line, not to the
    end of the previous one.
    """

    return max(0, bisect_right(offsets, offset) - 1)


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Lines of a buffer paired with their offset table."""

    lines: Lines
    offsets: Offsets

    @classmethod
    def from_text(cls, text: str) -> "LineIndex":
        return cls.from_lines(to_lines(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineIndex":
        materialized = tuple(lines) or ("",)
        return cls(lines=materialized, offsets=line_offsets(materialized))

    @property
    def text(self) -> str:
        return join_lines(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def last_line(self) -> int:
        return len(self.lines) - 1

    def line_start(self, line: int) -> int:
        return self.offsets[line]

    def line_end(self, line: int) -> int:
        return self.offsets[line] + len(self.lines[line])

    def locate(self, offset: int) -> tuple[int, int]:
        line = line_of_offset(self.offsets, offset)
        return line, offset - self.offsets[line]

    def offset_of(self, line: int, column: int) -> int:
        """Absolute offset of ``column`` on ``line``, clamped to the line end."""

        return self.offsets[line] + min(max(column, 0), len(self.lines[line]))


__all__ = [
    "LineIndex",
    "Lines",
    "Offsets",
    "join_lines",
    "line_of_offset",
    "line_offsets",
    "to_lines",
]
