import pytest

from kilotext.editor import QUIT_TIMES, Editor
from kilotext.keys import ENTER, ESCAPE, Key, ctrl_key


def make_editor(keys=(), rows=10, cols=40, lines=()):
    codes = []
    for key in keys:
        if isinstance(key, str):
            codes.extend(ord(ch) for ch in key)
        else:
            codes.append(int(key))
    stream = iter(codes)
    output = []

    def read_key():
        try:
            return next(stream)
        except StopIteration:
            raise AssertionError("ran out of keys") from None

    editor = Editor(rows, cols, read_key, output.append)
    for line in lines:
        editor.document.insert_row(len(editor.document), line)
    editor.document.dirty = 0
    return editor, output


def contents(editor):
    return [row.chars for row in editor.document]


def test_insert_char_into_empty_document_creates_row():
    editor, _ = make_editor()
    for ch in "hi":
        editor.insert_char(ch)
    assert contents(editor) == ["hi"]
    assert editor.cx == len("hi")
    assert editor.dirty > 0


def test_insert_newline_splits_line():
    editor, _ = make_editor(lines=["hello"])
    editor.cx = 2
    editor.insert_newline()
    assert contents(editor) == ["he", "llo"]
    assert (editor.cy, editor.cx) == (1, 0)


def test_insert_newline_at_start_inserts_empty_line_above():
    editor, _ = make_editor(lines=["hello"])
    editor.insert_newline()
    assert contents(editor) == ["", "hello"]


def test_delete_char_joins_with_previous_line():
    editor, _ = make_editor(lines=["ab", "cd"])
    editor.cy = 1
    editor.delete_char()
    assert contents(editor) == ["abcd"]
    assert (editor.cy, editor.cx) == (0, len("ab"))


def test_delete_char_at_origin_does_nothing():
    editor, _ = make_editor(lines=["ab"])
    editor.delete_char()
    assert contents(editor) == ["ab"]
    assert editor.dirty == 0


def test_move_cursor_wraps_between_lines():
    editor, _ = make_editor(lines=["abc", "de"])
    editor.cy = 1
    editor.move_cursor(Key.ARROW_LEFT)
    assert (editor.cy, editor.cx) == (0, len("abc"))
    editor.move_cursor(Key.ARROW_RIGHT)
    assert (editor.cy, editor.cx) == (1, 0)


def test_move_cursor_down_clamps_column():
    editor, _ = make_editor(lines=["abcdef", "x"])
    editor.cx = len("abcdef")
    editor.move_cursor(Key.ARROW_DOWN)
    assert (editor.cy, editor.cx) == (1, len("x"))
    editor.move_cursor(Key.ARROW_DOWN)
    editor.move_cursor(Key.ARROW_DOWN)
    assert editor.cy == len(editor.document)
    assert editor.cx == 0


def test_typing_through_process_keypress():
    editor, _ = make_editor(["ab", ENTER, "c"])
    for _ in range(4):
        assert editor.process_keypress() is True
    assert contents(editor) == ["ab", "c"]


def test_del_key_removes_char_under_cursor():
    editor, _ = make_editor([Key.DEL_KEY], lines=["xyz"])
    editor.process_keypress()
    assert contents(editor) == ["yz"]
    assert editor.cx == 0


def test_home_and_end_keys():
    editor, _ = make_editor([Key.END_KEY, Key.HOME_KEY], lines=["hello"])
    editor.process_keypress()
    assert editor.cx == len("hello")
    editor.process_keypress()
    assert editor.cx == 0


def test_page_down_then_page_up_returns_to_top():
    editor, _ = make_editor(
        [Key.PAGE_DOWN, Key.PAGE_UP], rows=5, lines=[str(i) for i in range(30)]
    )
    editor.process_keypress()
    assert editor.cy > editor.screen_rows
    editor.scroll()
    editor.process_keypress()
    assert editor.cy == 0


def test_quit_on_clean_document_clears_screen():
    editor, output = make_editor([ctrl_key("q")], lines=["a"])
    assert editor.process_keypress() is False
    assert output[-1] == "\x1b[2J\x1b[H"


def test_quit_with_unsaved_changes_needs_repeats():
    editor, _ = make_editor([ctrl_key("q")] * (QUIT_TIMES + 1), lines=["a"])
    editor.document.dirty = 1
    results = [editor.process_keypress() for _ in range(QUIT_TIMES + 1)]
    assert results == [True] * QUIT_TIMES + [False]


def test_quit_warning_resets_after_other_key():
    editor, _ = make_editor([ctrl_key("q"), Key.ARROW_UP, ctrl_key("q")], lines=["a"])
    editor.document.dirty = 1
    editor.process_keypress()
    assert f"{QUIT_TIMES} more times" in editor.status_message
    editor.process_keypress()
    editor.process_keypress()
    assert f"{QUIT_TIMES} more times" in editor.status_message


def test_save_prompts_for_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    editor, _ = make_editor([ctrl_key("s"), "out.txt", ENTER], lines=["one", "two"])
    editor.document.dirty = 1
    editor.process_keypress()
    assert editor.filename == "out.txt"
    assert (tmp_path / "out.txt").read_text() == "one\ntwo\n"
    assert editor.dirty == 0
    assert "bytes written to disk" in editor.status_message


def test_save_aborted_with_escape():
    editor, _ = make_editor([ctrl_key("s"), "abc", ESCAPE], lines=["x"])
    editor.process_keypress()
    assert editor.filename is None
    assert editor.status_message == "Save aborted"


def test_save_error_keeps_dirty(tmp_path):
    editor, _ = make_editor(lines=["x"])
    editor.document.dirty = 1
    editor.filename = str(tmp_path)
    editor.save()
    assert editor.status_message.startswith("Can't save! I/O error:")
    assert editor.dirty == 1


def test_open_loads_file_clean(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("alpha\r\nbeta\n")
    editor, _ = make_editor()
    editor.open(path)
    assert contents(editor) == ["alpha", "beta"]
    assert editor.filename == str(path)
    assert editor.dirty == 0


def test_open_missing_file_raises(tmp_path):
    editor, _ = make_editor()
    with pytest.raises(FileNotFoundError):
        editor.open(tmp_path / "missing.txt")


def test_prompt_edits_and_ignores_empty_enter():
    editor, output = make_editor([ENTER, "ab", Key.BACKSPACE, "c", ENTER])
    assert editor.prompt("Name: {}") == "ac"
    assert any("Name: ac" in frame for frame in output)
    assert editor.status_message == ""


def test_prompt_passes_keys_to_callback():
    seen = []
    editor, _ = make_editor(["x", ESCAPE])
    result = editor.prompt("> {}", lambda buf, key: seen.append((buf, key)))
    assert result is None
    assert seen == [("x", ord("x")), ("x", ESCAPE)]


def test_find_moves_to_matches_in_order():
    lines = ["abc", "xbz", "b"]
    editor, _ = make_editor(["b", Key.ARROW_DOWN, ENTER], lines=lines)
    editor.find()
    assert editor.cy == 1
    assert editor.cx == "xbz".index("b")


def test_find_backwards_wraps_around():
    lines = ["abc", "xbz", "b"]
    editor, _ = make_editor(["b", Key.ARROW_UP, ENTER], lines=lines)
    editor.find()
    assert editor.cy == len(lines) - 1
    assert editor.cx == 0


def test_find_escape_restores_cursor():
    lines = ["abc", "xbz", "b"]
    editor, _ = make_editor(["z", ESCAPE], lines=lines)
    editor.cy, editor.cx = 2, 1
    editor.find()
    assert (editor.cy, editor.cx) == (2, 1)


def test_find_match_after_tab_maps_to_char_index():
    editor, _ = make_editor(["q", ENTER], lines=["\tq"])
    editor.find()
    assert editor.cx == "\tq".index("q")


def test_scroll_keeps_cursor_visible():
    editor, _ = make_editor(rows=4, cols=5, lines=["x" * 20 for _ in range(20)])
    editor.cy, editor.cx = 15, 12
    editor.scroll()
    assert editor.rowoff <= editor.cy < editor.rowoff + editor.screen_rows
    assert editor.coloff <= editor.rx < editor.coloff + editor.screen_cols
    editor.cy, editor.cx = 0, 0
    editor.scroll()
    assert (editor.rowoff, editor.coloff) == (0, 0)


def test_scroll_uses_rendered_column():
    editor, _ = make_editor(lines=["\tab"])
    editor.cx = 1
    editor.scroll()
    assert editor.rx == editor.document[0].cx_to_rx(1)
    assert editor.rx > editor.cx


def test_status_message_is_bounded():
    editor, _ = make_editor()
    editor.set_status_message("m" * 200)
    assert len(editor.status_message) < 80
    assert set(editor.status_message) == {"m"}