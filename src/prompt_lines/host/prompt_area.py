"""Host-side prompt textarea state driving the line commands.

Every handled command runs in two phases. ``handle_key`` commits the new
text and selection to this model right away, pushes the text through
``HostHooks.update_text`` and parks the visual selection and scroll
update. ``after_render`` applies that parked update once the host has
re-rendered at the new content height. A command that arrives before
``after_render`` replaces the parked update instead of queueing behind it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from prompt_lines.actions import LineRequest
from prompt_lines.buffer import Selection, UndoGroup, ensure_selection
from prompt_lines.keymaps import (
    DEFAULT_MODE,
    PRIMARY_MODIFIER_ALT,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)
from prompt_lines.runtime import telemetry
from prompt_lines.runtime.settings import DEFAULT_SETTINGS, EngineSettings
from prompt_lines.transpose import (
    Direction,
    ScrollHint,
    ScrollState,
    TransposeResult,
    plan_scroll,
)


def _noop(*_args, **_kwargs) -> None:
    return None


@dataclass(slots=True)
class HostHooks:
    """Callbacks the host UI provides to reflect engine output."""

    update_text: Callable[[str, Optional[UndoGroup]], None] = _noop
    set_selection: Callable[[Selection], None] = _noop
    scroll_to: Callable[[ScrollHint], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(frozen=True, slots=True)
class PendingVisual:
    """Selection and scroll update parked until the host re-renders."""

    selection: Selection
    active_line: int
    line_count: int
    direction: Direction


@dataclass(frozen=True, slots=True)
class KeyOutcome:
    """What ``handle_key`` did: ``empty``, ``miss``, ``noop`` or ``applied``."""

    handled: bool
    status: str
    result: Optional[TransposeResult] = None


class PromptArea:
    """Text, caret and undo-group state of one prompt textarea."""

    def __init__(
        self,
        text: str = "",
        *,
        selection: Optional[Selection] = None,
        settings: Optional[EngineSettings] = None,
        hooks: Optional[HostHooks] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        keymap_resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.text = text
        self.selection = selection or Selection.caret(len(text))
        ensure_selection(self.text, self.selection)
        self.settings = settings or DEFAULT_SETTINGS
        self.hooks = hooks or HostHooks()
        self.undo_group: Optional[UndoGroup] = None
        self.pending: Optional[PendingVisual] = None
        self.scroll_top: float = 0.0
        self.logger = telemetry.get_logger("prompt_lines.host")
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="prompt_lines.keymaps")
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            keymap_registry, logger_name="prompt_lines.keymaps"
        )

    @property
    def flags(self) -> Dict[str, bool]:
        return {PRIMARY_MODIFIER_ALT: self.settings.primary_modifier_alt}

    def set_text(self, text: str, *, selection: Optional[Selection] = None) -> None:
        """Record an edit made directly in the host widget (typing, paste)."""

        selection = selection or Selection.caret(len(text))
        ensure_selection(text, selection)
        self.text = text
        self.selection = selection
        self.pending = None

    def set_selection(self, selection: Selection) -> None:
        self.selection = ensure_selection(self.text, selection)

    def handle_key(self, key: str, *, modifiers: Iterable[str] = ()) -> KeyOutcome:
        """Run the line command bound to ``key`` + ``modifiers``, if any.

        Whitespace-only content disables line commands entirely. A bound
        command that hits the first or last line is still reported as
        handled so the host suppresses the key's default behaviour.
        """

        stroke = KeyStroke(key=key, modifiers=tuple(modifiers))
        self._log_state("key ->", key=stroke.token)
        if self.text.strip() == "":
            return self._finish(KeyOutcome(handled=False, status="empty"))

        resolution = self.keymap_resolver.resolve(
            DEFAULT_MODE, stroke, context=self.flags
        )
        if resolution.status != "match" or resolution.match is None:
            return self._finish(KeyOutcome(handled=False, status=resolution.status))

        match = resolution.match
        request = LineRequest(
            text=self.text, selection=self.selection, settings=self.settings
        )
        with telemetry.span(
            "host::line_command",
            logger_name="prompt_lines.host",
            component="host",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            result = match.action(request)

        if not isinstance(result, TransposeResult):
            raise TypeError(
                f"Action '{match.action.id}' returned {type(result).__name__}"
            )
        if not result.changed:
            return self._finish(KeyOutcome(handled=True, status="noop", result=result))

        self._commit(result)
        return self._finish(KeyOutcome(handled=True, status="applied", result=result))

    def after_render(self, geometry: Optional[ScrollState] = None) -> Optional[ScrollHint]:
        """Apply the parked selection and scroll once the host has re-rendered.

        ``geometry`` is read by the host after its render pass; without it
        only the selection is applied.
        """

        pending = self.pending
        if pending is None:
            return None
        self.pending = None
        self.hooks.set_selection(pending.selection)

        if geometry is None:
            return None
        hint = plan_scroll(
            geometry,
            line_count=pending.line_count,
            target_line=pending.active_line,
            direction=pending.direction,
            margin_lines=self.settings.scroll_margin_lines,
            smooth=self.settings.smooth_scroll,
        )
        if hint.target_top != geometry.scroll_top:
            self.scroll_top = hint.target_top
            self.hooks.scroll_to(hint)
            self._log_state("scroll ->", target=hint.target_top)
        return hint

    def _commit(self, result: TransposeResult) -> None:
        self.undo_group = result.undo_group
        self.text = result.text
        self.selection = result.selection
        self.hooks.update_text(result.text, result.undo_group)
        if self.pending is not None:
            telemetry.record_event(
                "host.visual_superseded", logger_name="prompt_lines.host"
            )
        self.pending = PendingVisual(
            selection=result.selection,
            active_line=result.active_line,
            line_count=result.line_count,
            direction=result.operation.direction,
        )

    def _finish(self, outcome: KeyOutcome) -> KeyOutcome:
        self._log_state("result <-", handled=outcome.handled, status=outcome.status)
        return outcome

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "selection": (self.selection.start, self.selection.end),
            "lines": self.text.count("\n") + 1,
            "undo_group": self.undo_group.serial if self.undo_group else None,
            "pending": self.pending is not None,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{key}={value!r}" for key, value in snapshot.items())])
        self.hooks.log(line)


__all__ = ["HostHooks", "KeyOutcome", "PendingVisual", "PromptArea"]
