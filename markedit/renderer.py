"""Markdown rendering, outline extraction and simple syntax checks."""

from __future__ import annotations

import re
from typing import Iterable

from markdown_it import MarkdownIt

from markedit.sanitize import sanitize_html
from markedit.state import OutlineEntry

_HEADER_LINE = re.compile(r"(#{1,6})[\t\n\f\r ]+(.+)")
_HEADING_FORMAT = re.compile(r"#{1,6}[\t\n\f\r ]+.+")
_LINK_FORMAT = re.compile(r"\[.*?\]\(.*?\)")
_ANCHOR_DROP = re.compile(r"[^0-9A-Za-z_\t\n\f\r -]")
_ANCHOR_SPACE = re.compile(r"[\t\n\f\r ]+")
_HEADING_ID_WORD = re.compile(r"[^\W_]+")

_TEXT_ESCAPES_MAP = {
    "\x00": "\ufffd", '"': "&#34;", "&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;",
}
_TEXT_ESCAPES = str.maketrans(_TEXT_ESCAPES_MAP)
_TEMPLATE_ESCAPES = str.maketrans({**_TEXT_ESCAPES_MAP, "+": "&#43;"})

_FONT_STACK = ", ".join(
    [
        "-apple-system",
        "BlinkMacSystemFont",
        '"Segoe UI"',
        "Roboto",
        '"Helvetica Neue"',
        "Arial",
        "sans-serif",
    ]
)
_PANEL_GREY = "#f6f8fa"
_RULE_GREY = "#dfe2e5"
_HEADING_RULE = "#eaecef"

# (selector, declarations, written on one line)
_STYLE_RULES: tuple[tuple[str, tuple[tuple[str, str], ...], bool], ...] = (
    (
        "body",
        (
            ("font-family", _FONT_STACK),
            ("line-height", "1.6"),
            ("color", "#333"),
            ("max-width", "800px"),
            ("margin", "0 auto"),
            ("padding", "2rem"),
            ("background-color", "#fff"),
        ),
        False,
    ),
    (
        ", ".join(f"h{level}" for level in range(1, 7)),
        (("margin-top", "2rem"), ("margin-bottom", "1rem"), ("color", "#2c3e50")),
        False,
    ),
    ("h1", (("border-bottom", f"2px solid {_HEADING_RULE}"), ("padding-bottom", "0.3rem")), True),
    ("h2", (("border-bottom", f"1px solid {_HEADING_RULE}"), ("padding-bottom", "0.3rem")), True),
    ("p", (("margin-bottom", "1rem"),), True),
    (
        "pre",
        (
            ("background", _PANEL_GREY),
            ("border-radius", "6px"),
            ("padding", "16px"),
            ("overflow", "auto"),
            ("line-height", "1.45"),
        ),
        False,
    ),
    (
        "code",
        (
            ("background", _PANEL_GREY),
            ("padding", "0.2em 0.4em"),
            ("border-radius", "3px"),
            ("font-size", "85%"),
        ),
        False,
    ),
    (
        "blockquote",
        (
            ("border-left", f"4px solid {_RULE_GREY}"),
            ("padding-left", "1rem"),
            ("color", "#6a737d"),
            ("margin", "1rem 0"),
        ),
        False,
    ),
    (
        "table",
        (("border-collapse", "collapse"), ("width", "100%"), ("margin", "1rem 0")),
        False,
    ),
    (
        "th, td",
        (
            ("border", f"1px solid {_RULE_GREY}"),
            ("padding", "0.6rem 1rem"),
            ("text-align", "left"),
        ),
        False,
    ),
    ("th", (("background-color", _PANEL_GREY), ("font-weight", "600")), False),
    ("a", (("color", "#0366d6"), ("text-decoration", "none")), False),
    ("a:hover", (("text-decoration", "underline"),), False),
    ("img", (("max-width", "100%"), ("height", "auto")), False),
    (
        ".toc",
        (
            ("background", "#f8f9fa"),
            ("border", "1px solid #e1e4e8"),
            ("border-radius", "6px"),
            ("padding", "1rem"),
            ("margin", "1rem 0"),
        ),
        False,
    ),
    (".toc ul", (("list-style-type", "none"), ("padding-left", "1rem")), False),
    (".toc > ul", (("padding-left", "0"),), False),
    (".toc a", (("color", "#586069"),), False),
)

_INDENT = "    "


def _css_rule(selector: str, declarations: tuple[tuple[str, str], ...], one_line: bool) -> str:
    outer = _INDENT * 2
    if one_line:
        body = " ".join(f"{prop}: {value};" for prop, value in declarations)
        return f"{outer}{selector} {{ {body} }}"
    inner = _INDENT * 3
    lines = [f"{outer}{selector} {{"]
    lines.extend(f"{inner}{prop}: {value};" for prop, value in declarations)
    lines.append(f"{outer}}}")
    return "\n".join(lines)


_STYLESHEET = "\n".join(_css_rule(*rule) for rule in _STYLE_RULES)


def _meta(**attributes: str) -> str:
    attrs = " ".join(f'{key}="{value}"' for key, value in attributes.items())
    return f"<meta {attrs}>"


_HEAD_META = (
    _meta(charset="UTF-8"),
    _meta(name="viewport", content="width=device-width, initial-scale=1.0"),
)


def _page(title: str, content: str) -> str:
    lines = ["<!DOCTYPE html>", '<html lang="zh-CN">', "<head>"]
    lines.extend(_INDENT + tag for tag in _HEAD_META)
    lines.append(f"{_INDENT}<title>{title}</title>")
    lines.append(f"{_INDENT}<style>")
    lines.append(_STYLESHEET)
    lines.append(f"{_INDENT}</style>")
    lines.extend(["</head>", "<body>", f"{_INDENT}{content}", "</body>", "</html>"])
    return "\n".join(lines)


def _anchor_id(title: str) -> str:
    anchor = _ANCHOR_SPACE.sub("-", _ANCHOR_DROP.sub("", title.lower()))
    return anchor.strip("-")


def _assign_heading_ids(tokens) -> None:
    seen: dict[str, int] = {}
    for opening, inline in zip(tokens, tokens[1:]):
        if opening.type != "heading_open":
            continue
        text = "".join(
            child.content
            for child in inline.children or []
            if child.type in ("text", "code_inline")
        )
        anchor = "-".join(word.lower() for word in _HEADING_ID_WORD.findall(text))
        if anchor:
            count = seen.get(anchor, 0)
            seen[anchor] = count + 1
            opening.attrSet("id", f"{anchor}-{count}" if count else anchor)


class Renderer:
    """Renders Markdown to sanitised HTML and inspects its structure."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])

    def render_to_html(self, md_content: str) -> str:
        """Render Markdown to sanitised HTML."""
        env: dict = {}
        tokens = self._md.parse(md_content, env)
        _assign_heading_ids(tokens)
        return sanitize_html(self._md.renderer.render(tokens, self._md.options, env))

    def render_to_html_with_template(self, md_content: str, title: str) -> str:
        """Render Markdown into a complete, styled HTML page."""
        return _page(title.translate(_TEMPLATE_ESCAPES), self.render_to_html(md_content))

    def render_to_rich_text(self, md_content: str) -> str:
        """Return the text for a rich-text view, which reads Markdown itself."""
        return str(md_content)

    def extract_outline(self, md_content: str) -> list[OutlineEntry]:
        """List the ATX headings of a document with their 1-based line numbers."""
        outline = []
        for number, line in enumerate(md_content.split("\n"), start=1):
            match = _HEADER_LINE.fullmatch(line.strip())
            if match:
                outline.append(
                    OutlineEntry(title=match.group(2).strip(), level=len(match.group(1)), line=number)
                )
        return outline

    def generate_table_of_contents(self, outline: Iterable[OutlineEntry]) -> str:
        """Build a nested HTML list linking to each heading."""
        entries = list(outline)
        if not entries:
            return ""
        parts = ['<div class="toc">', "<h3>目录</h3>"]
        current = 0
        for entry in entries:
            if entry.level > current:
                parts.append("<ul>" * (entry.level - current))
            else:
                parts.append("</ul>" * (current - entry.level))
            parts.append(
                f'<li><a href="#{_anchor_id(entry.title)}">'
                f"{entry.title.translate(_TEXT_ESCAPES)}</a></li>"
            )
            current = entry.level
        parts.append("</ul>" * current + "</div>")
        return "".join(parts)

    def render_to_html_with_toc(self, md_content: str, title: str) -> str:
        """Render a full page with a table of contents before the content."""
        toc = self.generate_table_of_contents(self.extract_outline(md_content))
        return self.render_to_html_with_template(toc + self.render_to_html(md_content), title)

    def validate_markdown(self, md_content: str) -> list[str]:
        """Return warnings about malformed headings and links, one per problem."""
        warnings = []
        for number, line in enumerate(md_content.split("\n"), start=1):
            if line.startswith("#") and not _HEADING_FORMAT.match(line):
                warnings.append(f"第{number}行: 标题格式不正确，# 后面应该有空格")
            if "](" in line and not _LINK_FORMAT.search(line):
                warnings.append(f"第{number}行: 链接格式可能不正确")
        return warnings