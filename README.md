# markedit

A small desktop editor for Markdown files, together with a library for
rendering Markdown to sanitised HTML, extracting a heading outline and
building a table of contents.

## Installing

    pip install .

The editor window uses tkinter, which must be available in your Python
installation. The library modules do not need it.

To run the test suite as well:

    pip install ".[test]"
    pytest

## The editor

Start it with:

    markedit

It takes no options besides `--help`. The window opens at 1200×800 with a
start screen offering "新建文件" (new file) and "打开文件" (open file).

- A new document starts with a short placeholder text and has no path.
- Opening accepts only names ending in `.md` or `.markdown` (case
  insensitive); other files are refused with a message.
- The "保存" (save) button writes the document to its file. A document
  without a path is saved through a "save as" dialog whose default
  extension is `.md`.
- When the window is closed, unsaved changes to a document that already has
  a path are written back automatically. New, never-saved documents are not.

The window uses a light, GitHub-like colour scheme from
`markedit.theme.GitHubTheme`.

The same actions are available without a window through
`markedit.gui.GuiController`: `create_new_file()`, `open_path(path)`
(raises `ValueError` for a non-Markdown name, `OSError` if the file cannot
be read), `save()` (raises `ValueError` when the document has no path),
`save_as(path)` and `on_window_close()`. `build_ui(root)` fills a tkinter
window with the start or editor view.

## The library

```python
from markedit.renderer import Renderer

renderer = Renderer()

html = renderer.render_to_html("# Title\n\nSome *text*.")
page = renderer.render_to_html_with_template("# Title", "My page")
page_with_toc = renderer.render_to_html_with_toc("# A\n\n## B", "My page")

outline = renderer.extract_outline("# A\n\n## B")
for entry in outline:
    print(entry.level, entry.line, entry.title)

toc_html = renderer.generate_table_of_contents(outline)

for warning in renderer.validate_markdown("#NoSpace\n[broken](link"):
    print(warning)
```

- `render_to_html` renders CommonMark with tables and strikethrough, gives
  headings generated `id` attributes, and passes the result through
  `markedit.sanitize.sanitize_html`, which keeps ordinary document markup
  and strips scripts, styles, unlisted attributes (such as event handlers)
  and links whose scheme is not `http`, `https` or `mailto`.
- `render_to_html_with_template` wraps the HTML in a complete, styled page
  with the escaped title.
- `extract_outline` lists ATX headings (`#` to `######`) as
  `markedit.state.OutlineEntry` values with 1-based line numbers.
- `generate_table_of_contents` builds nested `<ul>` lists inside a
  `<div class="toc">`, and returns an empty string for an empty outline.
- `validate_markdown` returns warnings (in Chinese) for headings with no
  space after the `#` signs and for lines with `](` but no complete link.
- `render_to_rich_text` returns the Markdown unchanged.

Document state lives in `markedit.state.AppState`: the `current_file`,
`current_content`, `original_content` and `outline` properties (reading
`outline` gives a copy). `has_unsaved_changes()` compares the current
content with the original; `load_file()` and `save_file()` read and write
UTF-8 text without newline translation, raising `OSError` on failure; and
`reset()` clears everything.

`GitHubTheme.color(name)` returns an `RGBA` tuple for a `ColorName` (or its
string value) and `hex_color(name)` the same colour as `#rrggbb`; unknown
names raise `ValueError`.

## What it does not do

The editor window is a plain text editor: it shows no rendered preview and
no outline, and it has no command to export HTML. Rendering, outlines and
tables of contents are available only through the library.