import threading

import pytest

from markedit.state import AppState, OutlineEntry


def test_fresh_state_is_empty_and_clean():
    state = AppState()
    assert state.current_file == ""
    assert state.current_content == ""
    assert state.original_content == ""
    assert state.outline == []
    assert state.has_unsaved_changes() is False


def test_unsaved_changes_follow_content():
    state = AppState()
    state.current_content = "# Title"
    assert state.has_unsaved_changes() is True
    state.original_content = "# Title"
    assert state.has_unsaved_changes() is False
    state.current_content = "# Title\nmore"
    assert state.has_unsaved_changes() is True


def test_outline_is_returned_as_copy():
    state = AppState()
    entry = OutlineEntry(title="Intro", level=1, line=1)
    state.outline = [entry]
    copy = state.outline
    copy.append(OutlineEntry(title="Other", level=2, line=5))
    assert state.outline == [entry]


def test_outline_setter_does_not_alias_input():
    state = AppState()
    entries = [OutlineEntry("A", 1, 1)]
    state.outline = entries
    entries.clear()
    assert state.outline == [OutlineEntry("A", 1, 1)]


def test_save_and_load_round_trip(tmp_path):
    state = AppState()
    path = tmp_path / "doc.md"
    content = "# 标题\r\nline one\nline two\n"
    state.save_file(path, content)
    assert path.read_bytes() == content.encode("utf-8")
    assert state.load_file(path) == content


def test_save_accepts_string_path(tmp_path):
    state = AppState()
    path = tmp_path / "notes.markdown"
    state.save_file(str(path), "text")
    assert state.load_file(str(path)) == "text"


def test_load_missing_file_raises(tmp_path):
    state = AppState()
    with pytest.raises(FileNotFoundError):
        state.load_file(tmp_path / "absent.md")


def test_save_into_missing_directory_raises(tmp_path):
    state = AppState()
    with pytest.raises(FileNotFoundError):
        state.save_file(tmp_path / "nope" / "doc.md", "x")


def test_reset_clears_everything():
    state = AppState()
    state.current_file = "/tmp/doc.md"
    state.current_content = "new"
    state.original_content = "old"
    state.outline = [OutlineEntry("A", 1, 1)]
    state.reset()
    assert state.current_file == ""
    assert state.current_content == ""
    assert state.original_content == ""
    assert state.outline == []
    assert state.has_unsaved_changes() is False


def test_concurrent_writes_leave_a_written_value():
    state = AppState()
    values = [f"content {n}" for n in range(20)]
    threads = [
        threading.Thread(target=setattr, args=(state, "current_content", value))
        for value in values
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert state.current_content in values