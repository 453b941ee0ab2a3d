"""A small Markdown editor with sanitised HTML rendering, outlines and a table of contents."""

__version__ = "0.1.0"