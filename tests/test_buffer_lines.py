from __future__ import annotations

import pytest

from prompt_lines.buffer import (
    LineIndex,
    ResolvedSelection,
    Selection,
    SelectionValidationError,
    ensure_selection,
    join_lines,
    line_of_offset,
    line_offsets,
    resolve,
    to_lines,
)


@pytest.mark.parametrize("text", ["", "a", "a\n", "\n\n", "alpha\nbeta\ngamma\n"])
def test_split_and_join_preserve_text(text: str) -> None:
    lines = to_lines(text)

    assert len(lines) == text.count("\n") + 1
    assert join_lines(lines) == text


def test_empty_buffer_is_one_empty_line() -> None:
    index = LineIndex.from_text("")

    assert index.lines == ("",)
    assert index.offsets == (0,)
    assert index.last_line == 0


def test_line_offsets_account_for_newlines() -> None:
    assert line_offsets(("ab", "", "c")) == (0, 3, 4)


def test_caret_at_line_start_belongs_to_that_line() -> None:
    offsets = line_offsets(("ab", "cd"))

    assert line_of_offset(offsets, 2) == 0
    assert line_of_offset(offsets, 3) == 1
    assert line_of_offset(offsets, 5) == 1


def test_locate_and_offset_of() -> None:
    index = LineIndex.from_text("alpha\nbeta\ngamma")

    assert index.locate(6) == (1, 0)
    assert index.locate(10) == (1, 4)
    assert index.offset_of(2, 3) == 14
    assert index.offset_of(1, 99) == index.line_end(1) == 10


def test_resolve_single_line_range() -> None:
    resolved = resolve("hello\nworld", Selection(7, 9))

    assert resolved == ResolvedSelection(
        start_line=1, end_line=1, start_column=1, end_column=3
    )
    assert resolved.is_multi_line is False
    assert resolved.line_count == 1


def test_resolve_normalizes_reversed_selection() -> None:
    forward = resolve("one\ntwo\nthree", Selection(1, 9))
    backward = resolve("one\ntwo\nthree", Selection(9, 1))

    assert forward == backward
    assert (forward.start_line, forward.end_line) == (0, 2)
    assert forward.is_multi_line is True
    assert forward.line_count == 3


@pytest.mark.parametrize("text", ["", "x"])
def test_resolve_tiny_buffers_stay_on_line_zero(text: str) -> None:
    resolved = resolve(text, Selection(0, len(text)))

    assert resolved.start_line == resolved.end_line == 0


def test_selection_helpers() -> None:
    caret = Selection.caret(3)

    assert caret.is_caret
    assert Selection(5, 2).ordered() == Selection(2, 5)
    assert Selection(2, 5).ordered() == Selection(2, 5)


@pytest.mark.parametrize("selection", [Selection(-1, 0), Selection(0, 4)])
def test_ensure_selection_rejects_out_of_range_offsets(selection: Selection) -> None:
    with pytest.raises(SelectionValidationError) as excinfo:
        ensure_selection("abc", selection)

    assert excinfo.value.selection == selection


def test_ensure_selection_accepts_end_of_buffer() -> None:
    assert ensure_selection("abc", Selection(3, 0)) == Selection(3, 0)
