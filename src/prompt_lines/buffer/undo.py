"""Undo-group tokens handed to the host's undo system."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True, order=True)
class UndoGroup:
    """Opaque token tagging one user-initiated mutation.

    Tokens order by ``serial``; ``issued_at`` is wall-clock seconds and only
    lets a host merge key repeats that land close together.
    """

    serial: int
    issued_at: float = field(compare=False)


_SERIALS: Iterator[int] = itertools.count(1)


def next_undo_group() -> UndoGroup:
    return UndoGroup(serial=next(_SERIALS), issued_at=time.time())


__all__ = ["UndoGroup", "next_undo_group"]
