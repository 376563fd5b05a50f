"""Recompute the selection against a freshly transposed buffer."""

from __future__ import annotations

from prompt_lines.buffer import LineIndex, Selection

from .engine import TranspositionMetadata
from .operations import Direction


def target_start_line(meta: TranspositionMetadata) -> int:
    """First line of the block that keeps focus after the edit.

    Moves follow the relocated block. Copy-down focuses the inserted
    duplicate below the original; copy-up keeps the focus on line
    ``start_line``, where the duplicate now sits above the original.
    """

    up = meta.operation.direction is Direction.UP
    if meta.operation.is_copy:
        return meta.start_line if up else meta.end_line + 1
    return meta.start_line - 1 if up else meta.start_line + 1


def remap(meta: TranspositionMetadata, index: LineIndex) -> Selection:
    start_line = target_start_line(meta)
    end_line = start_line + (meta.end_line - meta.start_line)

    start = index.offset_of(start_line, meta.start_column)
    if meta.is_multi_line:
        end = index.offset_of(end_line, meta.end_column)
    elif meta.start_column == meta.end_column:
        end = start
    else:
        end = index.offset_of(start_line, meta.end_column)
    return Selection(start, end)


__all__ = ["remap", "target_start_line"]
