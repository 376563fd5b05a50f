"""Validation helpers for host-supplied selections."""

from __future__ import annotations

from .selection import Selection


class SelectionValidationError(ValueError):
    """Raised when a host hands over offsets outside the buffer."""

    def __init__(self, message: str, *, selection: Selection | None = None) -> None:
        super().__init__(message)
        self.selection = selection


def ensure_selection(text: str, selection: Selection) -> Selection:
    limit = len(text)
    for offset in (selection.start, selection.end):
        if offset < 0 or offset > limit:
            raise SelectionValidationError(
                f"Offset {offset} outside buffer of length {limit}",
                selection=selection,
            )
    return selection


__all__ = ["SelectionValidationError", "ensure_selection"]
