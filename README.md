# nyx

Building blocks for a modal, vim-style text editor, usable as a library.

- `nyx.buffer.text_buffer.TextBuffer` is a text buffer indexed by
  characters. It tracks a cursor as a (line, column) pair and keeps an
  undo/redo history. Edits made between `begin_undo_group()` and
  `end_undo_group()` undo as one step, the way an insert session does.
- `nyx.buffer.history.History` is the undo/redo history itself. It stores
  `UndoEntry` items made of `EditAction`s (`EditKind.INSERT` or
  `EditKind.DELETE`). Its size is bounded by `max_entries` (10,000 by
  default), and the oldest entries are dropped first. While `recording` is
  `False`, `push()` ignores edits.
- `nyx.jump_list.JumpList` holds the cursor positions (`JumpPosition`)
  recorded before large jumps. You move through it with `go_back()` and
  `go_forward()`. Pushing a new position discards the forward history.
- `nyx.git_diff` turns `git diff --unified=0` output into per-line gutter
  markers (`GitLineStatus.ADDED`, `MODIFIED`, `REMOVED`), with
  `parse_git_diff_output`. `git_diff_for_file` runs `git` for a file: every
  line of an untracked file is marked as added. The result is an empty list
  when the file, its repository or git itself cannot be used.

## Installation

```
pip install .
```

Only the standard library is needed. `git_diff_for_file` needs `git` on
the `PATH`.

## Examples

Editing a buffer:

```python
from nyx.buffer.text_buffer import TextBuffer

buf = TextBuffer("hello world")
buf.delete_range(5, 11)
assert buf.text == "hello"
buf.undo()
assert buf.text == "hello world"

buf = TextBuffer()
buf.begin_undo_group()
for ch in "abc":
    buf.insert_char(ch)
buf.end_undo_group()
buf.undo()  # removes all three characters at once
assert buf.text == ""
```

Moving the cursor. In Normal mode the cursor stops on the last character of
a line. With `allow_past_end=True` (Insert mode) it can sit just after it:

```python
buf = TextBuffer("hi\nworld")
buf.set_cursor(0, 999)
assert buf.cursor_col == 1
buf.set_cursor(0, 999, allow_past_end=True)
assert buf.cursor_col == 2
```

Out-of-range arguments to `slice`, `line`, `delete_range`, `insert_text_at`
and `byte_to_char` raise `IndexError`.

Walking a jump list:

```python
from nyx.jump_list import JumpList

jumps = JumpList()
jumps.push(10, 2)
jumps.push(40, 0)
assert jumps.go_back().line == 40
assert jumps.go_back().line == 10
assert jumps.go_back() is None
```

Building gutter markers from a diff:

```python
from nyx.git_diff import GitLineStatus, parse_git_diff_output

statuses = parse_git_diff_output("@@ -20,0 +21,2 @@\n+a\n+b\n", 30)
assert statuses[20] is GitLineStatus.ADDED
```

## What this package does not do

The package is a library. It has no command to start, no editing window,
no key handling and no file opening or saving. It also stores no
configuration. The `nyx.config` package is present but holds no modules.

## Tests

```
pip install .[test]
pytest
```