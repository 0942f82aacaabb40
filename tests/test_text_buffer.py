import pytest

from nyx.buffer.text_buffer import TextBuffer


def test_new_empty_buffer():
    buf = TextBuffer()
    assert buf.text == ""
    assert buf.cursor_line == 0
    assert buf.cursor_col == 0


def test_new_from_string():
    buf = TextBuffer("hello\nworld")
    assert buf.text == "hello\nworld"
    assert buf.line_count == 2


def test_insert_char():
    buf = TextBuffer()
    buf.insert_char("a")
    assert buf.text == "a"
    assert buf.cursor_col == 1


def test_insert_unicode_char():
    buf = TextBuffer()
    for ch in "åäö":
        buf.insert_char(ch)
    assert buf.text == "åäö"
    assert buf.cursor_col == 3


def test_insert_newline():
    buf = TextBuffer("hello")
    buf.set_cursor(0, 5, allow_past_end=True)
    buf.insert_char("\n")
    assert buf.text == "hello\n"
    assert buf.cursor_line == 1
    assert buf.cursor_col == 0


def test_delete_char_before_cursor():
    buf = TextBuffer("hello")
    buf.set_cursor(0, 5, allow_past_end=True)
    buf.delete_char_before_cursor()
    assert buf.text == "hell"
    assert buf.cursor_col == 4


def test_delete_newline_before_cursor_joins_lines():
    buf = TextBuffer("ab\ncd")
    buf.set_cursor(1, 0)
    buf.delete_char_before_cursor()
    assert buf.text == "abcd"
    assert (buf.cursor_line, buf.cursor_col) == (0, 2)


def test_delete_char_at_cursor():
    buf = TextBuffer("hello")
    buf.set_cursor(0, 0)
    buf.delete_char_at_cursor()
    assert buf.text == "ello"
    assert buf.cursor_col == 0


def test_get_line():
    buf = TextBuffer("hello\nworld\nfoo")
    assert buf.line(0) == "hello\n"
    assert buf.line(1) == "world\n"
    assert buf.line(2) == "foo"


def test_line_out_of_range():
    buf = TextBuffer("a\nb")
    with pytest.raises(IndexError):
        buf.line(2)


def test_delete_range():
    buf = TextBuffer("hello world")
    buf.delete_range(5, 11)
    assert buf.text == "hello"


def test_delete_range_out_of_bounds():
    buf = TextBuffer("abc")
    with pytest.raises(IndexError):
        buf.delete_range(1, 10)


def test_insert_text_at():
    buf = TextBuffer("helo")
    buf.insert_text_at(3, "l")
    assert buf.text == "hello"


def test_slice_range():
    buf = TextBuffer("hello world")
    assert buf.slice(0, 5) == "hello"
    assert buf.slice(6, 11) == "world"


def test_slice_unicode():
    buf = TextBuffer("hej på dig")
    assert buf.slice(4, 6) == "på"


def test_line_content_len_excludes_newline():
    buf = TextBuffer("hello\nworld")
    assert buf.line_content_len(0) == 5
    assert buf.line_content_len(1) == 5
    assert buf.line_len_chars(0) == 6


def test_set_cursor_clamps_normal_mode():
    buf = TextBuffer("hi\nworld")
    buf.set_cursor(0, 999)
    assert buf.cursor_col == 1
    buf.set_cursor(999, 0)
    assert buf.cursor_line == 1


def test_set_cursor_insert_mode_allows_past_end():
    buf = TextBuffer("hi\nworld")
    buf.set_cursor(0, 999, allow_past_end=True)
    assert buf.cursor_col == 2


def test_clamp_cursor_normal_moves_back():
    buf = TextBuffer("hi")
    buf.set_cursor(0, 2, allow_past_end=True)
    assert buf.cursor_col == 2
    buf.clamp_cursor_normal()
    assert buf.cursor_col == 1


def test_empty_line_cursor_stays_at_zero():
    buf = TextBuffer("")
    buf.set_cursor(0, 999)
    assert buf.cursor_col == 0


def test_empty_buffer_operations():
    buf = TextBuffer()
    assert buf.line_count == 1
    buf.delete_char_before_cursor()
    buf.delete_char_at_cursor()
    assert buf.text == ""
    assert len(buf) == 0


def test_cursor_offset_and_update_from_offset():
    buf = TextBuffer("ab\ncde\n")
    buf.update_cursor_from_offset(5)
    assert (buf.cursor_line, buf.cursor_col) == (1, 2)
    assert buf.cursor_offset == 5
    buf.update_cursor_from_offset(100)
    assert (buf.cursor_line, buf.cursor_col) == (2, 0)


def test_trailing_newline_adds_line():
    buf = TextBuffer("a\n")
    assert buf.line_count == 2
    assert buf.line(1) == ""
    assert buf.line_to_char(2) == 2


def test_byte_and_char_conversions():
    buf = TextBuffer("å\nb")
    assert buf.len_bytes == 4
    assert len(buf) == 3
    assert buf.line_to_byte(1) == 3
    assert buf.byte_to_char(0) == 0
    assert buf.byte_to_char(1) == 0
    assert buf.byte_to_char(2) == 1
    assert buf.byte_to_char(4) == 3


def test_undo_insert():
    buf = TextBuffer()
    buf.insert_char("a")
    buf.insert_char("b")
    assert buf.text == "ab"
    buf.undo()
    assert buf.text == "a"
    assert buf.cursor_col == 1
    buf.undo()
    assert buf.text == ""
    assert buf.cursor_col == 0


def test_redo_after_undo():
    buf = TextBuffer()
    buf.insert_char("a")
    buf.undo()
    assert buf.text == ""
    buf.redo()
    assert buf.text == "a"


def test_undo_delete_range():
    buf = TextBuffer("hello world")
    buf.delete_range(5, 11)
    assert buf.text == "hello"
    buf.undo()
    assert buf.text == "hello world"


def test_undo_unicode():
    buf = TextBuffer()
    buf.insert_char("å")
    buf.insert_char("ä")
    assert buf.text == "åä"
    buf.undo()
    assert buf.text == "å"


def test_undo_group_undoes_entire_insert_session():
    buf = TextBuffer()
    buf.begin_undo_group()
    for ch in "abc":
        buf.insert_char(ch)
    assert buf.end_undo_group() is True

    assert buf.text == "abc"
    assert buf.cursor_col == 3
    buf.undo()
    assert buf.text == ""
    assert buf.cursor_col == 0
    buf.redo()
    assert buf.text == "abc"
    assert buf.cursor_col == 3


def test_end_undo_group_without_open_group():
    buf = TextBuffer("x")
    assert buf.end_undo_group() is False


def test_undo_group_then_single():
    buf = TextBuffer()
    buf.begin_undo_group()
    buf.insert_char("a")
    buf.insert_char("b")
    buf.end_undo_group()
    buf.delete_range(0, 2)

    assert buf.text == ""
    buf.undo()
    assert buf.text == "ab"
    buf.undo()
    assert buf.text == ""


def test_undo_does_not_record_new_history():
    buf = TextBuffer()
    buf.insert_char("a")
    buf.undo()
    buf.undo()
    assert buf.text == ""
    buf.redo()
    buf.redo()
    assert buf.text == "a"