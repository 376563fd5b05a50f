"""Built-in line-command actions and the key combinations that trigger them."""

from __future__ import annotations

from typing import Iterable, Sequence

from prompt_lines.actions import lines as line_actions

from .models import ActionRef, Binding, KeyStroke, WhenClause
from .registry import KeymapRegistry

DEFAULT_MODE = "prompt"
PRIMARY_MODIFIER_ALT = "primary_modifier_alt"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="lines.move_up",
        handler=line_actions.move_lines_up,
        description="Move line up",
        metadata={"direction": "up", "copy": False},
    ),
    ActionRef(
        id="lines.move_down",
        handler=line_actions.move_lines_down,
        description="Move line down",
        metadata={"direction": "down", "copy": False},
    ),
    ActionRef(
        id="lines.copy_up",
        handler=line_actions.copy_lines_up,
        description="Copy line up",
        metadata={"direction": "up", "copy": True},
    ),
    ActionRef(
        id="lines.copy_down",
        handler=line_actions.copy_lines_down,
        description="Copy line down",
        metadata={"direction": "down", "copy": True},
    ),
)


def _line_bindings(modifier: str, when: tuple[WhenClause, ...] = ()) -> tuple[Binding, ...]:
    bindings = []
    for verb, extra in (("move", ""), ("copy", "+shift")):
        for direction, key in (("up", "ArrowUp"), ("down", "ArrowDown")):
            bindings.append(
                Binding(
                    id=f"{DEFAULT_MODE}.{verb}_{direction}.{modifier}",
                    mode=DEFAULT_MODE,
                    stroke=KeyStroke.parse(f"{modifier}{extra}+{key}"),
                    action_id=f"lines.{verb}_{direction}",
                    description=f"{verb.capitalize()} line {direction}",
                    when=when,
                )
            )
    return tuple(bindings)


# Alt always triggers line commands; Meta only where it is the primary
# modifier (the host reports primary_modifier_alt=False there).
DEFAULT_BINDINGS: tuple[Binding, ...] = _line_bindings("alt") + _line_bindings(
    "meta", when=(WhenClause(PRIMARY_MODIFIER_ALT, expected=False),)
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the line actions and their default bindings."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "DEFAULT_MODE",
    "PRIMARY_MODIFIER_ALT",
    "load_default_keymaps",
]
