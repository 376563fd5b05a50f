"""Viewport scroll policy for the line that was just moved or copied."""

from __future__ import annotations

from dataclasses import dataclass

from .operations import Direction


@dataclass(frozen=True, slots=True)
class ScrollState:
    """Host-owned scroll geometry, in pixels (or any uniform unit)."""

    scroll_top: float
    viewport_height: float
    content_height: float

    def __post_init__(self) -> None:
        if min(self.scroll_top, self.viewport_height, self.content_height) < 0:
            raise ValueError("scroll geometry cannot be negative")

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.content_height - self.viewport_height)


@dataclass(frozen=True, slots=True)
class ScrollHint:
    """Where to scroll, and whether to animate getting there."""

    target_top: float
    should_animate: bool


def plan_scroll(
    state: ScrollState,
    *,
    line_count: int,
    target_line: int,
    direction: Direction,
    margin_lines: int = 2,
    smooth: bool = True,
) -> ScrollHint:
    """Scroll just enough to keep ``target_line`` inside the margin band.

    Lines are assumed to share one height, ``content_height / line_count``.
    Wrapped lines make that an approximation.
    """

    line_height = state.content_height / max(line_count, 1)
    margin = line_height * margin_lines
    top = line_height * target_line
    current = state.scroll_top

    target = current
    if direction is Direction.UP and top - margin < current:
        target = max(0.0, top - margin)
    elif (
        direction is Direction.DOWN
        and top + line_height + margin > current + state.viewport_height
    ):
        target = min(
            state.max_scroll,
            top - state.viewport_height + line_height + margin,
        )

    return ScrollHint(target_top=target, should_animate=smooth and target != current)


__all__ = ["ScrollState", "ScrollHint", "plan_scroll"]
