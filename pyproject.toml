[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markedit"
version = "0.1.0"
description = "A small Markdown editor with sanitised HTML rendering, outlines and a table of contents"
requires-python = ">=3.10"
dependencies = [
    "markdown-it-py",
]
keywords = ["markdown", "editor", "html", "sanitize", "outline", "table-of-contents"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
markedit = "markedit.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["markedit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
