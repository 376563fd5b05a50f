"""Line move/copy engine for prompt textareas."""

from prompt_lines.buffer import Selection
from prompt_lines.transpose import (
    Direction,
    ScrollHint,
    ScrollState,
    TransposeResult,
    transpose,
)

__all__ = [
    "Direction",
    "ScrollHint",
    "ScrollState",
    "Selection",
    "TransposeResult",
    "transpose",
    "actions",
    "adapters",
    "buffer",
    "host",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
