"""Jump list: cursor positions recorded before large jumps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class JumpPosition:
    """A recorded cursor position."""

    line: int
    col: int


class JumpList:
    """Positions recorded before jumps, walked with back (Ctrl+O) and forward (Ctrl+I).

    The cursor points just past the entry that going back would return.
    Pushing a new position drops any forward history.
    """

    def __init__(self) -> None:
        self._entries: List[JumpPosition] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, line: int, col: int) -> None:
        """Record a position before a jump, discarding forward history."""
        del self._entries[self._cursor :]
        self._entries.append(JumpPosition(line, col))
        self._cursor = len(self._entries)

    def go_back(self) -> Optional[JumpPosition]:
        """Step back and return that position, or ``None`` at the start."""
        if self._cursor == 0:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def go_forward(self) -> Optional[JumpPosition]:
        """Return the position at the cursor and step forward, or ``None`` at the end."""
        if self._cursor >= len(self._entries):
            return None
        position = self._entries[self._cursor]
        self._cursor += 1
        return position