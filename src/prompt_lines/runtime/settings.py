"""Engine settings resolved from keyword arguments or the environment."""

from __future__ import annotations

from dataclasses import dataclass

from .telemetry import env_flag, env_value


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Knobs shared by the transposition core and the host model.

    ``scroll_margin_lines`` is the band, in line heights, kept between the
    active line and the viewport edge. ``primary_modifier_alt`` is the
    host's platform capability: ``False`` on platforms whose primary
    modifier is Meta/Cmd, which then also triggers line commands.
    """

    scroll_margin_lines: int = 2
    smooth_scroll: bool = True
    primary_modifier_alt: bool = True

    def __post_init__(self) -> None:
        if self.scroll_margin_lines < 0:
            raise ValueError("scroll_margin_lines cannot be negative")

    @classmethod
    def from_env(cls, **overrides: object) -> "EngineSettings":
        values: dict[str, object] = {
            "scroll_margin_lines": int(env_value("SCROLL_MARGIN_LINES") or "2"),
            "smooth_scroll": env_flag("SMOOTH_SCROLL", True),
            "primary_modifier_alt": env_flag("PRIMARY_MODIFIER_ALT", True),
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


DEFAULT_SETTINGS = EngineSettings()

__all__ = ["EngineSettings", "DEFAULT_SETTINGS"]
