"""Editing verbs exposed to keymaps."""

from .lines import (
    LineRequest,
    copy_lines_down,
    copy_lines_up,
    move_lines_down,
    move_lines_up,
)

__all__ = [
    "LineRequest",
    "move_lines_up",
    "move_lines_down",
    "copy_lines_up",
    "copy_lines_down",
]
