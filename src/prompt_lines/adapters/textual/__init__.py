"""Textual integration for the prompt textarea."""

from .controller import (
    TextualPromptAdapter,
    locations_from_selection,
    selection_from_locations,
    stroke_from_textual,
)

__all__ = [
    "TextualPromptAdapter",
    "locations_from_selection",
    "selection_from_locations",
    "stroke_from_textual",
]
