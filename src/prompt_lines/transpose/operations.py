"""Directional line commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Which neighbour the selected block trades places with."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def coerce(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown direction '{value}'") from exc


class TransposeMode(str, Enum):
    """Whether the block is moved or duplicated."""

    MOVE = "move"
    COPY = "copy"


@dataclass(frozen=True, slots=True)
class Operation:
    """Direction and mode of one line command."""

    direction: Direction
    mode: TransposeMode = TransposeMode.MOVE

    @classmethod
    def of(cls, direction: Direction | str, *, copy: bool = False) -> "Operation":
        mode = TransposeMode.COPY if copy else TransposeMode.MOVE
        return cls(direction=Direction.coerce(direction), mode=mode)

    @property
    def is_copy(self) -> bool:
        return self.mode is TransposeMode.COPY

    @property
    def label(self) -> str:
        return f"{self.mode.value}_{self.direction.value}"


__all__ = ["Direction", "TransposeMode", "Operation"]
