from __future__ import annotations

import pytest

from prompt_lines.keymaps import (
    DEFAULT_MODE,
    PRIMARY_MODIFIER_ALT,
    ActionRef,
    Binding,
    KeyStroke,
    KeymapRegistry,
    KeymapResolver,
    WhenClause,
    load_default_keymaps,
    shortcut_legend,
)


def default_resolver() -> KeymapResolver:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return KeymapResolver(registry)


@pytest.mark.parametrize(
    ("token", "action_id"),
    [
        ("alt+ArrowUp", "lines.move_up"),
        ("alt+down", "lines.move_down"),
        ("shift+alt+up", "lines.copy_up"),
        ("alt+shift+ArrowDown", "lines.copy_down"),
    ],
)
def test_alt_combinations_resolve_everywhere(token: str, action_id: str) -> None:
    resolver = default_resolver()

    for primary_alt in (True, False):
        result = resolver.resolve(
            DEFAULT_MODE, token, context={PRIMARY_MODIFIER_ALT: primary_alt}
        )
        assert result.status == "match"
        assert result.match is not None
        assert result.match.action.id == action_id


def test_meta_combinations_need_meta_primary_platform() -> None:
    resolver = default_resolver()
    stroke = KeyStroke("ArrowUp", ("meta", "shift"))

    miss = resolver.resolve(
        DEFAULT_MODE, stroke, context={PRIMARY_MODIFIER_ALT: True}
    )
    hit = resolver.resolve(
        DEFAULT_MODE, stroke, context={PRIMARY_MODIFIER_ALT: False}
    )

    assert miss.status == "miss"
    assert hit.status == "match"
    assert hit.match is not None
    assert hit.match.action.id == "lines.copy_up"


@pytest.mark.parametrize("token", ["ArrowUp", "ctrl+ArrowUp", "alt+ArrowLeft", "shift+up"])
def test_other_keys_miss(token: str) -> None:
    result = default_resolver().resolve(DEFAULT_MODE, token)

    assert result.status == "miss"


def test_resolver_picks_binding_whose_flags_hold() -> None:
    registry = KeymapRegistry()
    registry.register_action(ActionRef(id="lines.pc", handler=lambda request: None))
    registry.register_action(ActionRef(id="lines.mac", handler=lambda request: None))
    for binding_id, action_id, clause in (
        ("prompt.pc", "lines.pc", PRIMARY_MODIFIER_ALT),
        ("prompt.mac", "lines.mac", f"!{PRIMARY_MODIFIER_ALT}"),
    ):
        registry.register_binding(
            Binding(
                id=binding_id,
                mode=DEFAULT_MODE,
                stroke=KeyStroke.parse("ctrl+ArrowUp"),
                action_id=action_id,
                when=(WhenClause.parse(clause),),
            )
        )
    resolver = KeymapResolver(registry)

    pc = resolver.resolve(DEFAULT_MODE, "ctrl+up", context={PRIMARY_MODIFIER_ALT: True})
    mac = resolver.resolve(DEFAULT_MODE, "ctrl+up", context={PRIMARY_MODIFIER_ALT: False})

    assert pc.match is not None and pc.match.action.id == "lines.pc"
    assert mac.match is not None and mac.match.action.id == "lines.mac"


def test_resolver_sees_bindings_registered_later() -> None:
    registry = KeymapRegistry()
    resolver = KeymapResolver(registry)

    assert resolver.resolve(DEFAULT_MODE, "alt+up").status == "miss"

    load_default_keymaps(registry)

    assert resolver.resolve(DEFAULT_MODE, "alt+up").status == "match"


def test_shortcut_legend_uses_platform_labels() -> None:
    pc = shortcut_legend(primary_modifier_alt=True)
    mac = shortcut_legend(primary_modifier_alt=False)

    assert [row.description for row in pc] == [
        "Send message",
        "New line",
        "Move line",
        "Copy line",
    ]
    assert pc[3].keys == ("Alt", "Shift", "↑/↓")
    assert mac[3].keys == ("⌥", "⇧", "↑/↓")
    assert mac[-1].alternative is True
    assert mac[-1].keys == ("⌘", "↑/↓")
