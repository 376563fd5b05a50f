"""Keystroke to action lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from prompt_lines.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Binding that fired, paired with the action it names."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of resolving one keystroke; ``match`` is set only on a hit."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Finds the binding a keystroke triggers under the host's current flags.

    The registry refuses bindings that could fire together, so at most one
    binding per stroke passes its ``when`` clauses for a given context.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def resolve(
        self,
        mode: str,
        key: str | KeyStroke,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        stroke = key if isinstance(key, KeyStroke) else KeyStroke.parse(key)
        flags = context or {}
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "stroke": stroke.token},
        ) as handle:
            for binding in self._registry.bindings_for(mode, stroke.token):
                if binding.allows(flags):
                    handle.add_metadata("binding_id", binding.id)
                    action = self._registry.get_action(binding.action_id)
                    return ResolutionResult(
                        status="match",
                        match=ResolutionMatch(binding=binding, action=action),
                    )
            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
