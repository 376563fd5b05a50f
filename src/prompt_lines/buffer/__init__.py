"""Buffer primitives: line index, selections, validation, undo groups."""

from .lines import LineIndex, join_lines, line_of_offset, line_offsets, to_lines
from .selection import ResolvedSelection, Selection, resolve
from .undo import UndoGroup, next_undo_group
from .validation import SelectionValidationError, ensure_selection

__all__ = [
    "LineIndex",
    "to_lines",
    "join_lines",
    "line_offsets",
    "line_of_offset",
    "Selection",
    "ResolvedSelection",
    "resolve",
    "UndoGroup",
    "next_undo_group",
    "SelectionValidationError",
    "ensure_selection",
]
