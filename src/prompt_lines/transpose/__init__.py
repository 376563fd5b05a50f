"""Line transposition: move/copy blocks, remap the selection, plan scrolling."""

from .core import TransposeResult, transpose
from .engine import Transposition, TranspositionMetadata, apply
from .operations import Direction, Operation, TransposeMode
from .remap import remap, target_start_line
from .scroll import ScrollHint, ScrollState, plan_scroll

__all__ = [
    "Direction",
    "Operation",
    "TransposeMode",
    "Transposition",
    "TranspositionMetadata",
    "apply",
    "remap",
    "target_start_line",
    "ScrollState",
    "ScrollHint",
    "plan_scroll",
    "TransposeResult",
    "transpose",
]
