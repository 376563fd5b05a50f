from __future__ import annotations

import pytest

from prompt_lines.buffer import LineIndex, Selection, resolve
from prompt_lines.transpose import (
    Direction,
    Operation,
    TransposeMode,
    TranspositionMetadata,
    apply,
    remap,
    target_start_line,
)


def run(text: str, selection: Selection, direction: str, *, copy: bool = False):
    index = LineIndex.from_text(text)
    return apply(index, resolve(index, selection), Operation.of(direction, copy=copy))


def make_meta(
    direction: Direction,
    *,
    copy: bool = False,
    lines: tuple[int, int] = (0, 0),
    columns: tuple[int, int] = (0, 0),
) -> TranspositionMetadata:
    return TranspositionMetadata(
        operation=Operation(
            direction, TransposeMode.COPY if copy else TransposeMode.MOVE
        ),
        start_line=lines[0],
        end_line=lines[1],
        start_column=columns[0],
        end_column=columns[1],
    )


def test_operation_coerces_direction_names() -> None:
    assert Operation.of("UP").direction is Direction.UP
    assert Operation.of(Direction.DOWN, copy=True).label == "copy_down"
    with pytest.raises(ValueError):
        Operation.of("left")


def test_single_line_move_swaps_with_neighbour_only() -> None:
    outcome = run("a\nb\nc\nd", Selection.caret(4), "up")

    assert outcome.changed
    assert outcome.lines == ("a", "c", "b", "d")


def test_multi_line_move_up_exchanges_with_line_above() -> None:
    outcome = run("a\nb\nc\nd", Selection(4, 7), "up")

    assert outcome.lines == ("a", "c", "d", "b")
    assert outcome.metadata.is_multi_line
    assert outcome.metadata.line_count == 2


def test_multi_line_move_down_lands_after_former_successor() -> None:
    outcome = run("a\nbb\nccc", Selection(0, 4), "down")

    assert outcome.lines == ("ccc", "a", "bb")


@pytest.mark.parametrize(
    ("text", "selection", "direction"),
    [
        ("alpha\nbeta", Selection.caret(0), "up"),
        ("alpha\nbeta", Selection(2, 8), "up"),
        ("alpha\nbeta", Selection.caret(8), "down"),
        ("x", Selection.caret(0), "down"),
        ("", Selection.caret(0), "up"),
    ],
)
def test_moves_past_the_edges_are_noops(
    text: str, selection: Selection, direction: str
) -> None:
    outcome = run(text, selection, direction)

    assert outcome.changed is False
    assert outcome.lines == tuple(text.split("\n"))


def test_copy_single_line_up_duplicates_first_line_in_place() -> None:
    outcome = run("a\nb", Selection.caret(0), "up", copy=True)

    assert outcome.changed
    assert outcome.lines == ("a", "a", "b")


def test_copy_single_line_down_appends_after_last_line() -> None:
    outcome = run("a\nb", Selection.caret(3), "down", copy=True)

    assert outcome.lines == ("a", "b", "b")


@pytest.mark.parametrize("direction", ["up", "down"])
def test_copy_grows_by_block_size_and_original_survives(direction: str) -> None:
    text = "one\ntwo\nthree\nfour"
    selection = Selection(5, 10)  # "two" .. "three"
    outcome = run(text, selection, direction, copy=True)
    meta = outcome.metadata
    lines = list(outcome.lines)

    assert len(lines) == 4 + meta.line_count
    inserted_at = meta.start_line if direction == "up" else meta.end_line + 1
    del lines[inserted_at : inserted_at + meta.line_count]
    assert lines == text.split("\n")


@pytest.mark.parametrize(
    ("direction", "copy", "expected"),
    [
        (Direction.UP, False, 2),
        (Direction.DOWN, False, 4),
        (Direction.UP, True, 3),
        (Direction.DOWN, True, 6),
    ],
)
def test_target_start_line(direction: Direction, copy: bool, expected: int) -> None:
    meta = make_meta(direction, copy=copy, lines=(3, 5))

    assert target_start_line(meta) == expected


def test_remap_clamps_columns_to_shorter_lines() -> None:
    index = LineIndex.from_text("ab\nc\nlonger")
    meta = make_meta(Direction.DOWN, lines=(0, 1), columns=(9, 9))

    selection = remap(meta, index)

    # block now occupies lines 1-2; both ends clamp to their line end
    assert selection == Selection(index.line_end(1), index.line_end(2))


def test_remap_keeps_single_line_range() -> None:
    index = LineIndex.from_text("world\nhello")
    meta = make_meta(Direction.UP, lines=(1, 1), columns=(1, 3))

    assert remap(meta, index) == Selection(1, 3)


def test_remap_single_line_range_clamps_ends_independently() -> None:
    index = LineIndex.from_text("abc\nxy")
    meta = make_meta(Direction.UP, lines=(1, 1), columns=(2, 7))

    assert remap(meta, index) == Selection(2, 3)


def test_remap_caret_stays_caret() -> None:
    index = LineIndex.from_text("b\na")
    meta = make_meta(Direction.UP, lines=(1, 1), columns=(1, 1))

    selection = remap(meta, index)

    assert selection.is_caret
    assert selection == Selection(1, 1)
