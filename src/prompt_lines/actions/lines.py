"""Line commands bound to keys by the default keymap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prompt_lines.buffer import Selection
from prompt_lines.runtime.settings import EngineSettings
from prompt_lines.transpose import Direction, ScrollState, TransposeResult, transpose


@dataclass(frozen=True, slots=True)
class LineRequest:
    """Host state handed to a line command."""

    text: str
    selection: Selection
    scroll: Optional[ScrollState] = None
    settings: Optional[EngineSettings] = None


def _run(request: LineRequest, direction: Direction, copy: bool) -> TransposeResult:
    return transpose(
        request.text,
        request.selection,
        direction,
        copy,
        scroll=request.scroll,
        settings=request.settings,
    )


def move_lines_up(request: LineRequest) -> TransposeResult:
    return _run(request, Direction.UP, copy=False)


def move_lines_down(request: LineRequest) -> TransposeResult:
    return _run(request, Direction.DOWN, copy=False)


def copy_lines_up(request: LineRequest) -> TransposeResult:
    return _run(request, Direction.UP, copy=True)


def copy_lines_down(request: LineRequest) -> TransposeResult:
    return _run(request, Direction.DOWN, copy=True)


__all__ = [
    "LineRequest",
    "move_lines_up",
    "move_lines_down",
    "copy_lines_up",
    "copy_lines_down",
]
