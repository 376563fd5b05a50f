"""Host-side textarea model."""

from .prompt_area import HostHooks, KeyOutcome, PendingVisual, PromptArea

__all__ = ["HostHooks", "KeyOutcome", "PendingVisual", "PromptArea"]
