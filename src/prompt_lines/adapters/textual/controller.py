"""Bridges Textual key names and cursor locations to the ``PromptArea`` model."""

from __future__ import annotations

from typing import Optional, Tuple

from prompt_lines.buffer import LineIndex, Selection
from prompt_lines.host import KeyOutcome, PromptArea
from prompt_lines.keymaps import KeyStroke

Location = Tuple[int, int]  # (row, column)


def stroke_from_textual(key: str) -> KeyStroke:
    """Translate Textual key names such as ``"shift+alt+up"``."""

    return KeyStroke.parse(key)


def selection_from_locations(text: str, start: Location, end: Location) -> Selection:
    index = LineIndex.from_text(text)
    return Selection(index.offset_of(*start), index.offset_of(*end))


def locations_from_selection(text: str, selection: Selection) -> tuple[Location, Location]:
    index = LineIndex.from_text(text)
    return index.locate(selection.start), index.locate(selection.end)


class TextualPromptAdapter:
    """Feeds Textual state into a ``PromptArea`` and relays its key outcomes."""

    def __init__(self, area: PromptArea) -> None:
        self.area = area

    def sync(self, text: str, start: Location, end: Location) -> None:
        """Adopt the widget's text and cursor before handling a key.

        While a committed command still waits for ``after_render`` the widget
        shows the old cursor, so an unchanged text keeps the model's selection.
        """

        selection = selection_from_locations(text, start, end)
        if text != self.area.text:
            self.area.set_text(text, selection=selection)
        elif self.area.pending is None:
            self.area.set_selection(selection)

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        cursor: Optional[tuple[Location, Location]] = None,
    ) -> KeyOutcome:
        if text is not None and cursor is not None:
            self.sync(text, *cursor)
        stroke = stroke_from_textual(key)
        return self.area.handle_key(stroke.key, modifiers=stroke.modifiers)


__all__ = [
    "Location",
    "TextualPromptAdapter",
    "locations_from_selection",
    "selection_from_locations",
    "stroke_from_textual",
]
