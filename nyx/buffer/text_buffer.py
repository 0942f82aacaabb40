"""A text buffer with a cursor and undo/redo history."""

from __future__ import annotations

from bisect import bisect_right
from typing import List

from nyx.buffer.history import EditAction, EditKind, History


class TextBuffer:
    """Editable text addressed by character offsets, with a cursor.

    Lines are separated by ``"\\n"``; a trailing newline starts a final,
    empty line. The cursor is kept as a (line, column) pair in characters.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._line_starts: List[int] = []
        self._reindex()
        self._cursor_line = 0
        self._cursor_col = 0
        self.history = History()

    # ----- internal helpers -------------------------------------------------

    def _reindex(self) -> None:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self._text) if ch == "\n")
        self._line_starts = starts

    def _char_to_line(self, offset: int) -> int:
        return bisect_right(self._line_starts, offset) - 1

    def _check_line(self, idx: int) -> None:
        if not 0 <= idx < len(self._line_starts):
            raise IndexError(
                f"line index {idx} out of range (line count {len(self._line_starts)})"
            )

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise IndexError(
                f"char range {start}..{end} out of bounds (length {len(self._text)})"
            )

    def _raw_insert(self, offset: int, text: str) -> None:
        self._text = self._text[:offset] + text + self._text[offset:]
        self._reindex()

    def _raw_remove(self, start: int, end: int) -> None:
        self._text = self._text[:start] + self._text[end:]
        self._reindex()

    # ----- read access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._text)

    @property
    def cursor_line(self) -> int:
        return self._cursor_line

    @property
    def cursor_col(self) -> int:
        return self._cursor_col

    @property
    def cursor_offset(self) -> int:
        """Character offset of the cursor from the start of the buffer."""
        return self._line_starts[self._cursor_line] + self._cursor_col

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    @property
    def len_bytes(self) -> int:
        return len(self._text.encode("utf-8"))

    def slice(self, start: int, end: int) -> str:
        """Return the characters in ``[start, end)``."""
        self._check_range(start, end)
        return self._text[start:end]

    def line(self, idx: int) -> str:
        """Return line ``idx`` including its trailing newline, if any."""
        self._check_line(idx)
        start = self._line_starts[idx]
        if idx + 1 < len(self._line_starts):
            return self._text[start : self._line_starts[idx + 1]]
        return self._text[start:]

    def line_content_len(self, idx: int) -> int:
        """Length of line ``idx`` in characters, not counting its newline."""
        line = self.line(idx)
        return len(line) - 1 if line.endswith("\n") else len(line)

    def line_len_chars(self, idx: int) -> int:
        """Length of line ``idx`` in characters, newline included."""
        return len(self.line(idx))

    def line_to_char(self, idx: int) -> int:
        """Character offset where line ``idx`` starts.

        ``idx`` may equal the line count, which maps to the buffer's end.
        """
        if idx == len(self._line_starts):
            return len(self._text)
        self._check_line(idx)
        return self._line_starts[idx]

    def line_to_byte(self, idx: int) -> int:
        """UTF-8 byte offset where line ``idx`` starts."""
        return len(self._text[: self.line_to_char(idx)].encode("utf-8"))

    def byte_to_char(self, byte_idx: int) -> int:
        """Index of the character that contains UTF-8 byte ``byte_idx``."""
        encoded = self._text.encode("utf-8")
        if not 0 <= byte_idx <= len(encoded):
            raise IndexError(
                f"byte index {byte_idx} out of bounds (length {len(encoded)})"
            )
        if byte_idx == len(encoded):
            return len(self._text)
        leads = sum(1 for b in encoded[: byte_idx + 1] if b & 0xC0 != 0x80)
        return leads - 1

    # ----- cursor ------------------------------------------------------------

    def set_cursor(self, line: int, col: int, allow_past_end: bool = False) -> None:
        """Move the cursor, clamping it into the buffer.

        In Normal mode the column stops on the last character; with
        ``allow_past_end`` (Insert mode) it may sit just after it.
        """
        self._cursor_line = min(line, self.line_count - 1)
        content_len = self.line_content_len(self._cursor_line)
        max_col = content_len if allow_past_end else max(content_len - 1, 0)
        self._cursor_col = min(col, max_col)

    def clamp_cursor_normal(self) -> None:
        """Pull the cursor back onto the last character of its line."""
        max_col = max(self.line_content_len(self._cursor_line) - 1, 0)
        self._cursor_col = min(self._cursor_col, max_col)

    def update_cursor_from_offset(self, offset: int) -> None:
        """Place the cursor at a character offset, clamped to the buffer end."""
        offset = min(offset, len(self._text))
        self._cursor_line = self._char_to_line(offset)
        self._cursor_col = offset - self._line_starts[self._cursor_line]

    # ----- editing -------------------------------------------------------------

    def insert_char(self, ch: str) -> None:
        """Insert one character at the cursor and move past it."""
        offset = self.cursor_offset
        self.history.push(EditAction.insert(offset, ch))
        self._raw_insert(offset, ch)
        if ch == "\n":
            self._cursor_line += 1
            self._cursor_col = 0
        else:
            self._cursor_col += 1

    def delete_char_before_cursor(self) -> None:
        """Delete the character before the cursor (backspace)."""
        offset = self.cursor_offset
        if offset == 0:
            return
        ch = self._text[offset - 1]
        self.history.push(EditAction.delete(offset - 1, ch))
        self._raw_remove(offset - 1, offset)
        if ch == "\n":
            self._cursor_line -= 1
            self._cursor_col = self.line_content_len(self._cursor_line)
        else:
            self._cursor_col -= 1

    def delete_char_at_cursor(self) -> None:
        """Delete the character under the cursor; the cursor stays put."""
        offset = self.cursor_offset
        if offset >= len(self._text):
            return
        self.history.push(EditAction.delete(offset, self._text[offset]))
        self._raw_remove(offset, offset + 1)

    def delete_range(self, start: int, end: int) -> None:
        """Delete the characters in ``[start, end)``."""
        self._check_range(start, end)
        self.history.push(EditAction.delete(start, self._text[start:end]))
        self._raw_remove(start, end)

    def insert_text_at(self, offset: int, text: str) -> None:
        """Insert ``text`` at a character offset; the cursor is not moved."""
        self._check_range(offset, offset)
        self.history.push(EditAction.insert(offset, text))
        self._raw_insert(offset, text)

    # ----- undo / redo -----------------------------------------------------------

    def begin_undo_group(self) -> None:
        """Start collecting edits into a single undo unit (Insert mode)."""
        self.history.begin_group()

    def end_undo_group(self) -> bool:
        """Close the undo group; returns ``True`` if one was open."""
        return self.history.end_group()

    def _apply(self, action: EditAction, reverse: bool) -> None:
        inserting = (action.kind is EditKind.INSERT) != reverse
        if inserting:
            self._raw_insert(action.offset, action.text)
            self.update_cursor_from_offset(action.offset + len(action.text))
        else:
            self._raw_remove(action.offset, action.offset + len(action.text))
            self.update_cursor_from_offset(action.offset)

    def undo(self) -> None:
        """Revert the latest undo entry, if any."""
        self.history.recording = False
        try:
            entry = self.history.undo()
            if entry is not None:
                for action in reversed(entry.actions):
                    self._apply(action, reverse=True)
        finally:
            self.history.recording = True

    def redo(self) -> None:
        """Re-apply the latest undone entry, if any."""
        self.history.recording = False
        try:
            entry = self.history.redo()
            if entry is not None:
                for action in entry.actions:
                    self._apply(action, reverse=False)
        finally:
            self.history.recording = True