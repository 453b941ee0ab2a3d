"""Desktop editor window and the controller behind it."""

from __future__ import annotations

import argparse
import contextlib
from pathlib import Path
from typing import Optional, Sequence

from markedit.renderer import Renderer
from markedit.state import AppState, StrPath
from markedit.theme import ColorName, GitHubTheme

APP_TITLE = "MarkUp"
MARKDOWN_SUFFIXES = (".md", ".markdown")
NEW_DOCUMENT = "# 新文档\n\n开始编写您的内容..."
PLACEHOLDER = "在此输入 Markdown 内容..."
NOT_MARKDOWN = "请选择 Markdown 文件（.md 或 .markdown）"
_FILETYPES = [("Markdown", "*.md *.markdown"), ("All files", "*")]


class GuiController:
    """Holds the editing session and drives the window's contents."""

    def __init__(self, theme: Optional[GitHubTheme] = None) -> None:
        self.renderer = Renderer()
        self.state = AppState()
        self.theme = theme or GitHubTheme()
        self.is_editing = False
        self._root = None
        self._editor = None
        self._placeholder = None

    def build_ui(self, root):
        """Replace the window's contents with the startup or editor view."""
        import tkinter as tk

        self._root = root
        for child in root.winfo_children():
            child.destroy()
        self._editor = self._placeholder = None
        colors = self.theme.hex_color
        frame = tk.Frame(root, bg=colors(ColorName.BACKGROUND))
        if self.is_editing:
            self._build_editor(frame)
        else:
            self._build_startup(frame)
        frame.pack(fill="both", expand=True)
        return frame

    def _build_startup(self, frame) -> None:
        import tkinter as tk

        background = self.theme.hex_color(ColorName.BACKGROUND)
        inner = tk.Frame(frame, bg=background)
        inner.place(relx=0.5, rely=0.5, anchor="center")
        tk.Label(
            inner, text=APP_TITLE, font=("TkDefaultFont", 18, "bold"),
            bg=background, fg=self.theme.hex_color(ColorName.FOREGROUND),
        ).pack(pady=(0, 24))
        self._button(inner, "新建文件", self.create_new_file, width=20).pack(pady=8)
        self._button(inner, "打开文件", self._on_open_clicked, width=20).pack(pady=8)

    def _build_editor(self, frame) -> None:
        import tkinter as tk
        from tkinter.scrolledtext import ScrolledText

        colors = self.theme.hex_color
        self._button(frame, "保存", self._on_save_clicked, width=8).pack(
            side="top", anchor="w", padx=4, pady=4
        )
        editor = ScrolledText(
            frame, wrap="word", undo=True,
            bg=colors(ColorName.INPUT_BACKGROUND), fg=colors(ColorName.FOREGROUND),
            selectbackground=colors(ColorName.SELECTION),
        )
        editor.pack(fill="both", expand=True)
        editor.bind("<<Modified>>", self._on_modified)
        self._placeholder = tk.Label(
            editor, text=PLACEHOLDER,
            bg=colors(ColorName.INPUT_BACKGROUND), fg=colors(ColorName.PLACEHOLDER),
        )
        self._editor = editor
        self._update_placeholder()

    def _button(self, parent, text, command, width):
        import tkinter as tk

        return tk.Button(
            parent, text=text, command=command, width=width, relief="flat",
            bg=self.theme.hex_color(ColorName.BUTTON),
            fg=self.theme.hex_color(ColorName.FOREGROUND),
            activebackground=self.theme.hex_color(ColorName.HOVER),
        )

    def _refresh(self) -> None:
        if self._root is None:
            return
        self.build_ui(self._root)
        if self._editor is not None:
            self._editor.delete("1.0", "end")
            self._editor.insert("1.0", self.state.current_content)
            self._update_placeholder()

    def _update_placeholder(self) -> None:
        if self._editor is None or self._placeholder is None:
            return
        if self._editor.get("1.0", "end-1c"):
            self._placeholder.place_forget()
        else:
            self._placeholder.place(x=4, y=2)

    def _on_modified(self, _event=None) -> None:
        if self._editor is None or not self._editor.edit_modified():
            return
        self.state.current_content = self._editor.get("1.0", "end-1c")
        self._editor.edit_modified(False)
        self._update_placeholder()

    def _on_open_clicked(self) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(parent=self._root, filetypes=_FILETYPES)
        if not path:
            return
        try:
            self.open_path(path)
        except ValueError as exc:
            messagebox.showinfo("错误", str(exc), parent=self._root)
        except OSError as exc:
            messagebox.showerror("错误", str(exc), parent=self._root)

    def _on_save_clicked(self) -> None:
        from tkinter import filedialog, messagebox

        try:
            if self.state.current_file:
                self.save()
            else:
                path = filedialog.asksaveasfilename(
                    parent=self._root, defaultextension=".md", filetypes=_FILETYPES
                )
                if not path:
                    return
                self.save_as(path)
        except OSError as exc:
            messagebox.showerror("错误", str(exc), parent=self._root)
            return
        messagebox.showinfo("保存成功", "文件已保存", parent=self._root)

    def create_new_file(self) -> None:
        """Start editing a fresh, unsaved document."""
        self.is_editing = True
        self.state.current_file = ""
        self.state.current_content = NEW_DOCUMENT
        self.state.original_content = ""
        self._refresh()

    def open_path(self, path: StrPath) -> None:
        """Open a Markdown file for editing.

        Raises ValueError if the name lacks a Markdown extension and OSError
        if the file cannot be read.
        """
        if not Path(path).name.lower().endswith(MARKDOWN_SUFFIXES):
            raise ValueError(NOT_MARKDOWN)
        content = self.state.load_file(path)
        self.is_editing = True
        self.state.current_file = str(path)
        self.state.current_content = content
        self.state.original_content = content
        self._refresh()

    def save(self) -> None:
        """Write the document to its file; raises ValueError if it has none."""
        if not self.state.current_file:
            raise ValueError("the document has no file path yet")
        self.save_as(self.state.current_file)

    def save_as(self, path: StrPath) -> None:
        """Write the document to a path and keep editing it there."""
        content = self.state.current_content
        self.state.save_file(path, content)
        self.state.current_file = str(path)
        self.state.original_content = content

    def on_window_close(self) -> None:
        """Save pending changes to an existing file; new files are left alone."""
        if self.is_editing and self.state.has_unsaved_changes() and self.state.current_file:
            with contextlib.suppress(OSError):
                self.state.save_file(self.state.current_file, self.state.current_content)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the editor window and run until it is closed."""
    argparse.ArgumentParser(prog="markedit", description="Edit Markdown files.").parse_args(argv)

    import tkinter as tk

    root = tk.Tk(className="markedit")
    root.title(APP_TITLE)
    root.geometry("1200x800")
    controller = GuiController()
    controller.build_ui(root)

    def close() -> None:
        controller.on_window_close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", close)
    root.mainloop()
    return 0