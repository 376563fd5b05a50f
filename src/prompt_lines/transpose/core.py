"""Single entry point tying the line index, engine, remapper and scroll policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prompt_lines.buffer import (
    LineIndex,
    Selection,
    UndoGroup,
    ensure_selection,
    next_undo_group,
    resolve,
)
from prompt_lines.runtime import telemetry
from prompt_lines.runtime.settings import DEFAULT_SETTINGS, EngineSettings

from . import engine
from .operations import Direction, Operation
from .remap import remap, target_start_line
from .scroll import ScrollHint, ScrollState, plan_scroll


@dataclass(frozen=True, slots=True)
class TransposeResult:
    """Outcome of one line command.

    ``text`` is canonical. ``selection`` and ``scroll_hint`` are advisory:
    the host applies them after it has rendered ``text``. A boundary no-op
    returns the input text and selection untouched, with ``changed=False``,
    no scroll hint and no undo group.
    """

    text: str
    selection: Selection
    changed: bool
    operation: Operation
    active_line: int
    line_count: int
    scroll_hint: Optional[ScrollHint] = None
    undo_group: Optional[UndoGroup] = None


def transpose(
    text: str,
    selection: Selection,
    direction: Direction | str,
    copy: bool = False,
    *,
    scroll: Optional[ScrollState] = None,
    settings: Optional[EngineSettings] = None,
) -> TransposeResult:
    """Move (or with ``copy=True`` duplicate) the lines touched by ``selection``."""

    settings = settings or DEFAULT_SETTINGS
    operation = Operation.of(direction, copy=copy)
    ensure_selection(text, selection)

    with telemetry.span(
        f"lines::{operation.label}",
        component="lines",
        metadata={"chars": len(text), "selection": (selection.start, selection.end)},
    ) as handle:
        index = LineIndex.from_text(text)
        resolved = resolve(index, selection)
        outcome = engine.apply(index, resolved, operation)

        if not outcome.changed:
            handle.add_metadata("status", "boundary")
            telemetry.record_event(
                "lines.noop",
                data={"operation": operation.label, "line": resolved.start_line},
            )
            return TransposeResult(
                text=text,
                selection=selection,
                changed=False,
                operation=operation,
                active_line=resolved.start_line,
                line_count=index.line_count,
            )

        new_index = LineIndex.from_lines(outcome.lines)
        new_selection = remap(outcome.metadata, new_index)
        active_line = target_start_line(outcome.metadata)

        hint = None
        if scroll is not None:
            hint = plan_scroll(
                scroll,
                line_count=new_index.line_count,
                target_line=active_line,
                direction=operation.direction,
                margin_lines=settings.scroll_margin_lines,
                smooth=settings.smooth_scroll,
            )

        handle.add_metadata("status", "applied")
        telemetry.record_event(
            "lines.transpose",
            data={
                "operation": operation.label,
                "from_line": resolved.start_line,
                "to_line": active_line,
                "block": resolved.line_count,
            },
        )
        return TransposeResult(
            text=new_index.text,
            selection=new_selection,
            changed=True,
            operation=operation,
            active_line=active_line,
            line_count=new_index.line_count,
            scroll_hint=hint,
            undo_group=next_undo_group(),
        )


__all__ = ["TransposeResult", "transpose"]
