"""Action and binding tables for the prompt keymap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Sequence

from prompt_lines.runtime.telemetry import span

from .models import ActionRef, Binding

ChordKey = tuple[str, str]  # (mode, stroke token)


@dataclass(slots=True)
class RegistryStats:
    """Snapshot of registry size, for diagnostics."""

    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when two bindings would fire for the same stroke and context."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        clashing = ", ".join(other.id for other in self.conflicts)
        super().__init__(
            f"'{binding.token}' in mode '{binding.mode}' is taken by {clashing}"
        )


class KeymapRegistry:
    """Actions by id, and bindings grouped by ``(mode, stroke token)``."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._chords: Dict[ChordKey, list[str]] = {}

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def get_binding(self, binding_id: str) -> Binding:
        binding = self._bindings.get(binding_id)
        if binding is None:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return binding

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever it clashes with."""

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.token},
        ) as handle:
            if binding.action_id not in self._actions:
                raise KeyError(
                    f"Binding '{binding.id}' targets unknown action '{binding.action_id}'"
                )

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._remove(self._bindings[binding.id])

            conflicts = self.detect_conflicts(binding)
            if conflicts:
                if not replace:
                    raise KeymapConflictError(binding, conflicts)
                handle.add_metadata("evicted", ",".join(other.id for other in conflicts))
                for other in conflicts:
                    self._remove(other)

            self._bindings[binding.id] = binding
            self._chords.setdefault((binding.mode, binding.token), []).append(binding.id)
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is not None:
            self._remove(binding)
        return binding

    def bindings_for(self, mode: str, token: str) -> list[Binding]:
        """Bindings registered for one stroke, in registration order."""

        ids = self._chords.get((mode, token), ())
        return [self._bindings[binding_id] for binding_id in ids]

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if mode is None or binding.mode == mode:
                yield binding

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted({mode for mode, _ in self._chords})),
        )

    def detect_conflicts(
        self, binding: Binding, *, ignore: Sequence[str] = ()
    ) -> list[Binding]:
        return [
            other
            for other in self.bindings_for(binding.mode, binding.token)
            if other.id != binding.id
            and other.id not in ignore
            and _can_fire_together(binding, other)
        ]

    def _remove(self, binding: Binding) -> None:
        del self._bindings[binding.id]
        key = (binding.mode, binding.token)
        remaining = [bid for bid in self._chords.get(key, ()) if bid != binding.id]
        if remaining:
            self._chords[key] = remaining
        else:
            self._chords.pop(key, None)


def _can_fire_together(left: Binding, right: Binding) -> bool:
    # Some host context satisfies both unless a shared flag is required
    # with opposite values.
    right_map = right.when_map
    return all(
        right_map.get(flag, expected) == expected
        for flag, expected in left.when_map.items()
    )


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
