"""Move and copy contiguous line blocks."""

from __future__ import annotations

from dataclasses import dataclass

from prompt_lines.buffer import LineIndex, ResolvedSelection

from .operations import Direction, Operation


@dataclass(frozen=True, slots=True)
class TranspositionMetadata:
    """What the remapper needs to know about the block that was touched."""

    operation: Operation
    start_line: int
    end_line: int
    start_column: int
    end_column: int

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    @property
    def is_multi_line(self) -> bool:
        return self.start_line != self.end_line


@dataclass(frozen=True, slots=True)
class Transposition:
    """New line list plus the metadata needed to remap the selection."""

    lines: tuple[str, ...]
    changed: bool
    metadata: TranspositionMetadata


def is_boundary_move(
    index: LineIndex, resolved: ResolvedSelection, operation: Operation
) -> bool:
    if operation.is_copy:
        return False
    if operation.direction is Direction.UP:
        return resolved.start_line == 0
    return resolved.end_line == index.last_line


def apply(
    index: LineIndex, resolved: ResolvedSelection, operation: Operation
) -> Transposition:
    """Return the line sequence after applying ``operation`` to the block.

    Moves past the first or last line leave the lines untouched and report
    ``changed=False``.
    """

    metadata = TranspositionMetadata(
        operation=operation,
        start_line=resolved.start_line,
        end_line=resolved.end_line,
        start_column=resolved.start_column,
        end_column=resolved.end_column,
    )
    if is_boundary_move(index, resolved, operation):
        return Transposition(lines=index.lines, changed=False, metadata=metadata)

    lines = list(index.lines)
    if operation.is_copy:
        _copy_block(lines, metadata)
    else:
        _move_block(lines, metadata)
    return Transposition(lines=tuple(lines), changed=True, metadata=metadata)


def _move_block(lines: list[str], meta: TranspositionMetadata) -> None:
    start, end = meta.start_line, meta.end_line
    up = meta.operation.direction is Direction.UP

    if not meta.is_multi_line:
        other = start - 1 if up else start + 1
        lines[start], lines[other] = lines[other], lines[start]
        return

    block = lines[start : end + 1]
    del lines[start : end + 1]
    target = start - 1 if up else start + 1
    lines[target:target] = block


def _copy_block(lines: list[str], meta: TranspositionMetadata) -> None:
    start, end = meta.start_line, meta.end_line
    block = lines[start : end + 1]
    target = start if meta.operation.direction is Direction.UP else end + 1
    lines[target:target] = block


__all__ = ["Transposition", "TranspositionMetadata", "apply", "is_boundary_move"]
