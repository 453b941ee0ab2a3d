import pytest

from markedit.gui import NEW_DOCUMENT, GuiController


@pytest.fixture
def controller():
    return GuiController()


def test_starts_outside_editing(controller):
    assert controller.is_editing is False
    assert controller.state.current_file == ""


def test_create_new_file(controller):
    controller.create_new_file()
    assert controller.is_editing is True
    assert controller.state.current_file == ""
    assert controller.state.current_content == "# 新文档\n\n开始编写您的内容..."
    assert controller.state.original_content == ""
    assert controller.state.has_unsaved_changes()


def test_open_markdown_file(controller, tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Title\n\nbody", encoding="utf-8")
    controller.open_path(path)
    assert controller.is_editing is True
    assert controller.state.current_file == str(path)
    assert controller.state.current_content == "# Title\n\nbody"
    assert not controller.state.has_unsaved_changes()


def test_open_accepts_uppercase_markdown_extension(controller, tmp_path):
    path = tmp_path / "README.MARKDOWN"
    path.write_text("text", encoding="utf-8")
    controller.open_path(path)
    assert controller.state.current_content == "text"


def test_open_rejects_other_extensions(controller, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("text", encoding="utf-8")
    with pytest.raises(ValueError):
        controller.open_path(path)
    assert controller.is_editing is False
    assert controller.state.current_file == ""


def test_open_missing_file_raises(controller, tmp_path):
    with pytest.raises(FileNotFoundError):
        controller.open_path(tmp_path / "missing.md")
    assert controller.is_editing is False


def test_save_writes_to_current_file(controller, tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("old", encoding="utf-8")
    controller.open_path(path)
    controller.state.current_content = "new text"
    controller.save()
    assert path.read_text(encoding="utf-8") == "new text"
    assert not controller.state.has_unsaved_changes()


def test_save_without_path_raises(controller):
    controller.create_new_file()
    with pytest.raises(ValueError):
        controller.save()
    assert controller.state.has_unsaved_changes()


def test_save_as_sets_file_and_marks_saved(controller, tmp_path):
    controller.create_new_file()
    path = tmp_path / "fresh.md"
    controller.save_as(path)
    assert path.read_text(encoding="utf-8") == NEW_DOCUMENT
    assert controller.state.current_file == str(path)
    assert not controller.state.has_unsaved_changes()


def test_close_saves_pending_changes(controller, tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("start", encoding="utf-8")
    controller.open_path(path)
    controller.state.current_content = "edited"
    controller.on_window_close()
    assert path.read_text(encoding="utf-8") == "edited"


def test_close_leaves_new_files_alone(controller, tmp_path):
    controller.create_new_file()
    controller.on_window_close()
    assert list(tmp_path.iterdir()) == []
    assert controller.state.has_unsaved_changes()


def test_close_when_not_editing_writes_nothing(controller, tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("start", encoding="utf-8")
    controller.state.current_file = str(path)
    controller.state.current_content = "changed"
    controller.on_window_close()
    assert path.read_text(encoding="utf-8") == "start"


def test_close_ignores_write_errors(controller, tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("start", encoding="utf-8")
    controller.open_path(path)
    controller.state.current_content = "edited"
    controller.state.current_file = str(tmp_path / "missing-dir" / "doc.md")
    controller.on_window_close()
    assert path.read_text(encoding="utf-8") == "start"