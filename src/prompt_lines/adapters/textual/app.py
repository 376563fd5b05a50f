"""Executable Textual app hosting a prompt textarea with line commands."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use prompt_lines.adapters.textual.app"
    ) from exc

from prompt_lines.buffer import Selection, UndoGroup
from prompt_lines.host import HostHooks, PromptArea
from prompt_lines.keymaps import shortcut_legend
from prompt_lines.runtime.settings import EngineSettings
from prompt_lines.transpose import ScrollHint, ScrollState

from .controller import TextualPromptAdapter, locations_from_selection


class PromptTextArea(TextArea):
    """TextArea that offers every key to the line-command adapter first."""

    def __init__(self, adapter: TextualPromptAdapter, text: str, **kwargs) -> None:
        super().__init__(text, **kwargs)
        self.adapter = adapter

    async def _on_key(self, event: events.Key) -> None:  # pragma: no cover - UI
        selection = self.selection
        outcome = self.adapter.handle_textual_key(
            event.key, text=self.text, cursor=(selection.start, selection.end)
        )
        if outcome.handled:
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)


class PromptLinesApp(App[None]):  # pragma: no cover - manual demo
    CSS = """
    Screen {
        layout: vertical;
    }

    #prompt {
        height: 1fr;
        border: round $accent;
    }

    #legend, #status-line {
        height: 1;
        padding: 0 1;
        background: $surface-darken-1;
    }
    """

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, text: str = "", *, settings: Optional[EngineSettings] = None) -> None:
        super().__init__()
        self.settings = settings or EngineSettings.from_env()
        hooks = HostHooks(
            update_text=self._update_text,
            set_selection=self._set_selection,
            scroll_to=self._scroll_to,
            log=self._log_line,
        )
        self.area = PromptArea(text, settings=self.settings, hooks=hooks)
        self.adapter = TextualPromptAdapter(self.area)
        self._text_area = PromptTextArea(self.adapter, text, id="prompt")
        self._status = Static("", id="status-line")

    def compose(self) -> ComposeResult:
        yield Header()
        yield self._text_area
        yield Static(self._legend_text(), id="legend")
        yield self._status
        yield Footer()

    def _legend_text(self) -> str:
        rows = shortcut_legend(primary_modifier_alt=self.settings.primary_modifier_alt)
        return "   ".join(
            f"{'(or ' if row.alternative else ''}{'+'.join(row.keys)} {row.description}"
            f"{')' if row.alternative else ''}"
            for row in rows
        )

    def _update_text(self, text: str, group: Optional[UndoGroup]) -> None:
        document = self._text_area.document
        self._text_area.replace(text, (0, 0), document.end)
        if group is not None:
            self._status.update(f"undo group #{group.serial}")
        self.call_after_refresh(self._after_render)

    def _after_render(self) -> None:
        geometry = ScrollState(
            scroll_top=float(self._text_area.scroll_offset.y),
            viewport_height=float(self._text_area.scrollable_content_region.height),
            content_height=float(self._text_area.virtual_size.height),
        )
        self.area.after_render(geometry)

    def _set_selection(self, selection: Selection) -> None:
        start, end = locations_from_selection(self.area.text, selection)
        self._text_area.selection = TextSelection(start, end)

    def _scroll_to(self, hint: ScrollHint) -> None:
        self._text_area.scroll_to(y=hint.target_top, animate=hint.should_animate)

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the prompt-lines Textual demo.")
    parser.add_argument("path", nargs="?", help="Optional file whose text seeds the prompt")
    parser.add_argument(
        "--meta-primary",
        action="store_true",
        help="Treat Meta/Cmd as the primary modifier (Mac-style bindings)",
    )
    parser.add_argument(
        "--scroll-margin",
        type=int,
        default=None,
        help="Lines kept between the active line and the viewport edge",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:  # pragma: no cover - manual demo
    args = _parse_args(argv)
    overrides: dict[str, object] = {}
    if args.meta_primary:
        overrides["primary_modifier_alt"] = False
    if args.scroll_margin is not None:
        overrides["scroll_margin_lines"] = args.scroll_margin
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    PromptLinesApp(text, settings=EngineSettings.from_env(**overrides)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
