"""Undo/redo history with support for grouped edits."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

DEFAULT_MAX_ENTRIES = 10_000


class EditKind(enum.Enum):
    """The kind of a primitive buffer edit."""

    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class EditAction:
    """A primitive edit: ``text`` inserted at or deleted from ``offset``."""

    kind: EditKind
    offset: int
    text: str

    @classmethod
    def insert(cls, offset: int, text: str) -> "EditAction":
        return cls(EditKind.INSERT, offset, text)

    @classmethod
    def delete(cls, offset: int, text: str) -> "EditAction":
        return cls(EditKind.DELETE, offset, text)


@dataclass(frozen=True)
class UndoEntry:
    """One unit of undo: a single edit or a group undone atomically."""

    actions: Tuple[EditAction, ...]
    grouped: bool = False

    @classmethod
    def single(cls, action: EditAction) -> "UndoEntry":
        return cls((action,), grouped=False)

    @classmethod
    def group(cls, actions: List[EditAction]) -> "UndoEntry":
        return cls(tuple(actions), grouped=True)


class History:
    """Undo and redo stacks of :class:`UndoEntry` items.

    While a group is open (e.g. an Insert-mode session) pushed edits are
    collected and stored as one entry when the group closes. Setting
    ``recording`` to ``False`` makes :meth:`push` ignore edits.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self.max_entries = max_entries
        self.recording = True
        self._undo: Deque[UndoEntry] = deque()
        self._redo: List[UndoEntry] = []
        self._group: Optional[List[EditAction]] = None

    @property
    def group_open(self) -> bool:
        return self._group is not None

    def begin_group(self) -> None:
        """Open an undo group; does nothing if one is already open."""
        if self._group is None:
            self._group = []

    def end_group(self) -> bool:
        """Close the open group, storing it if non-empty.

        Returns ``True`` if a group was open.
        """
        actions = self._group
        if actions is None:
            return False
        self._group = None
        if actions:
            self._push_entry(UndoEntry.group(actions))
        return True

    def push(self, action: EditAction) -> None:
        """Record an edit, into the open group if there is one."""
        if not self.recording:
            return
        if self._group is not None:
            self._group.append(action)
            self._redo.clear()
        else:
            self._push_entry(UndoEntry.single(action))

    def _push_entry(self, entry: UndoEntry) -> None:
        self._undo.append(entry)
        self._redo.clear()
        if len(self._undo) > self.max_entries:
            self._undo.popleft()

    def undo(self) -> Optional[UndoEntry]:
        """Pop the latest entry onto the redo stack and return it."""
        if not self._undo:
            return None
        entry = self._undo.pop()
        self._redo.append(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        """Pop the latest undone entry back onto the undo stack and return it."""
        if not self._redo:
            return None
        entry = self._redo.pop()
        self._undo.append(entry)
        return entry