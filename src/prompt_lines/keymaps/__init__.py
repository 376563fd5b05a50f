"""Declarative keymap registry and default line-command bindings."""

from .models import ActionRef, Binding, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_MODE, PRIMARY_MODIFIER_ALT, load_default_keymaps
from .legend import ShortcutItem, shortcut_legend

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_MODE",
    "PRIMARY_MODIFIER_ALT",
    "load_default_keymaps",
    "ShortcutItem",
    "shortcut_legend",
]
