"""Platform-specific shortcut labels for a host's shortcut legend."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShortcutItem:
    """One row of the shortcut guide."""

    keys: tuple[str, ...]
    description: str
    alternative: bool = False


def shortcut_legend(*, primary_modifier_alt: bool) -> tuple[ShortcutItem, ...]:
    """Rows to display, labelled for the host platform.

    ``primary_modifier_alt=False`` means a Mac-style keyboard: glyph labels
    and an extra Cmd row for the alternative move shortcut.
    """

    mac = not primary_modifier_alt
    alt = "⌥" if mac else "Alt"
    shift = "⇧" if mac else "Shift"
    items = [
        ShortcutItem(("Enter",), "Send message"),
        ShortcutItem((shift, "Enter"), "New line"),
        ShortcutItem((alt, "↑/↓"), "Move line"),
        ShortcutItem((alt, shift, "↑/↓"), "Copy line"),
    ]
    if mac:
        items.append(ShortcutItem(("⌘", "↑/↓"), "Move line", alternative=True))
    return tuple(items)


__all__ = ["ShortcutItem", "shortcut_legend"]
