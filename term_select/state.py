"""Per-level selection state for the display loop."""
from __future__ import annotations

from dataclasses import dataclass


def move_index(index: int, count: int, step: int) -> int:
    """Move a highlighted index by ``step`` rows, wrapping at both ends."""
    if count <= 0:
        return 0
    return (index + step) % count


@dataclass
class LevelState:
    """Highlighted row of one displayed menu.

    Lives only as long as the loop for its menu level; returning from a
    sub-menu resumes the parent with its index intact.
    """

    count: int
    index: int = 0

    def move_down(self) -> int:
        self.index = move_index(self.index, self.count, 1)
        return self.index

    def move_up(self) -> int:
        self.index = move_index(self.index, self.count, -1)
        return self.index
