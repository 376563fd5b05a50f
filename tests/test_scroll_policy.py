from __future__ import annotations

import pytest

from prompt_lines.transpose import Direction, ScrollState, plan_scroll


def make_state(scroll_top: float = 0) -> ScrollState:
    # 50 lines of height 10 behind a 100-high viewport
    return ScrollState(scroll_top=scroll_top, viewport_height=100, content_height=500)


def test_up_scrolls_to_keep_margin_above_target() -> None:
    hint = plan_scroll(
        make_state(100), line_count=50, target_line=10, direction=Direction.UP
    )

    assert hint.target_top == 80
    assert hint.should_animate is True


def test_up_never_scrolls_above_zero() -> None:
    hint = plan_scroll(
        make_state(30), line_count=50, target_line=1, direction=Direction.UP
    )

    assert hint.target_top == 0


def test_up_inside_margin_band_does_not_scroll() -> None:
    hint = plan_scroll(
        make_state(0), line_count=50, target_line=5, direction=Direction.UP
    )

    assert hint.target_top == 0
    assert hint.should_animate is False


def test_down_scrolls_to_keep_margin_below_target() -> None:
    hint = plan_scroll(
        make_state(0), line_count=50, target_line=9, direction=Direction.DOWN
    )

    assert hint.target_top == 20


def test_down_is_capped_at_max_scroll() -> None:
    hint = plan_scroll(
        make_state(0), line_count=50, target_line=49, direction=Direction.DOWN
    )

    assert hint.target_top == 400


def test_down_inside_margin_band_does_not_scroll() -> None:
    hint = plan_scroll(
        make_state(0), line_count=50, target_line=5, direction=Direction.DOWN
    )

    assert hint.target_top == 0
    assert hint.should_animate is False


def test_smooth_flag_only_controls_animation() -> None:
    hint = plan_scroll(
        make_state(100),
        line_count=50,
        target_line=10,
        direction=Direction.UP,
        smooth=False,
    )

    assert hint.target_top == 80
    assert hint.should_animate is False


def test_negative_geometry_is_rejected() -> None:
    with pytest.raises(ValueError):
        ScrollState(scroll_top=-1, viewport_height=10, content_height=10)


def test_short_content_has_zero_max_scroll() -> None:
    assert ScrollState(0, viewport_height=100, content_height=40).max_scroll == 0
