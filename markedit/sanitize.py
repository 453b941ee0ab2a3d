"""Allow-list HTML sanitiser for user-generated content."""

from __future__ import annotations

import re
from html.parser import HTMLParser
from urllib.parse import urlsplit

_INTEGER = re.compile(r"[0-9]+")
_CELL_ALIGN = re.compile(r"(?i)center|justify|left|right|char")

_ALLOWED_ELEMENTS = frozenset(
    "a abbr acronym address article aside b bdi bdo blockquote br caption cite "
    "code col colgroup dd del details dfn div dl dt em figcaption figure footer "
    "h1 h2 h3 h4 h5 h6 header hgroup hr i img ins kbd li mark ol p pre q rp rt "
    "ruby s samp section small span strike strong sub summary sup table tbody "
    "td tfoot th thead time tr tt u ul var wbr".split()
)
# Elements dropped together with everything inside them.
_SKIP_CONTENT = frozenset(
    "frame frameset iframe noembed noframes noscript nostyle object script style title".split()
)
_VOID_ELEMENTS = frozenset("area br col hr img wbr".split())
# Elements dropped (keeping their content) when no attribute survives.
_NEED_ATTRIBUTES = frozenset({"a", "img"})

# A pattern of None accepts any value.
_GLOBAL_ATTRIBUTES: dict[str, re.Pattern | None] = {
    "dir": re.compile(r"(?i)rtl|ltr|auto"),
    "id": re.compile(r"[a-zA-Z0-9:\-_.]+"),
    "lang": re.compile(r"[a-zA-Z]{2,20}"),
    "title": None,
}
_CELL_ATTRIBUTES: dict[str, re.Pattern | None] = {
    "abbr": None,
    "align": _CELL_ALIGN,
    "colspan": _INTEGER,
    "headers": None,
    "rowspan": _INTEGER,
    "scope": re.compile(r"(?i)row|col|rowgroup|colgroup"),
}
_ELEMENT_ATTRIBUTES: dict[str, dict[str, re.Pattern | None]] = {
    "img": {
        "alt": None,
        "align": re.compile(
            r"(?i)left|right|top|texttop|middle|absmiddle|baseline|bottom|absbottom"
        ),
        "height": _INTEGER,
        "width": _INTEGER,
    },
    "td": _CELL_ATTRIBUTES,
    "th": _CELL_ATTRIBUTES,
    "col": {"span": _INTEGER, "align": _CELL_ALIGN},
    "colgroup": {"span": _INTEGER, "align": _CELL_ALIGN},
    "ol": {"type": re.compile(r"[aAiI1]"), "start": _INTEGER},
    "li": {"value": _INTEGER},
    "code": {"class": re.compile(r"language-[a-zA-Z0-9]+")},
    "time": {"datetime": None},
    "details": {"open": None},
}
_URL_ATTRIBUTES = {
    "a": "href", "img": "src", "blockquote": "cite", "q": "cite", "del": "cite", "ins": "cite",
}
_URL_SCHEMES = frozenset({"http", "https", "mailto"})
_URL_EDGE = "".join(map(chr, range(0x21)))
_URL_INNER_NOISE = re.compile(r"[\t\n\r]")
_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


def _clean_url(value: str) -> str | None:
    url = _URL_INNER_NOISE.sub("", value.strip(_URL_EDGE))
    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        return None
    if scheme and scheme.lower() not in _URL_SCHEMES:
        return None
    return url


def _filter_attributes(tag: str, attrs) -> dict[str, str]:
    kept: dict[str, str] = {}
    url_name = _URL_ATTRIBUTES.get(tag)
    tables = (_ELEMENT_ATTRIBUTES.get(tag, {}), _GLOBAL_ATTRIBUTES)
    for name, raw in attrs:
        if name in kept:
            continue
        value = raw or ""
        if name == url_name:
            url = _clean_url(value)
            if url is not None:
                kept[name] = url
            continue
        for table in tables:
            if name in table:
                pattern = table[name]
                if pattern is None or pattern.fullmatch(value):
                    kept[name] = value
                break
    if tag == "a" and "href" in kept:
        kept["rel"] = "nofollow"
    return kept


class _Sanitizer(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.out: list[str] = []
        self.open: list[tuple[str, bool]] = []
        self.skip_depth = 0

    def _start(self, tag: str, attrs, self_closing: bool) -> None:
        if tag in _SKIP_CONTENT or self.skip_depth:
            if tag in _SKIP_CONTENT and not self_closing:
                self.skip_depth += 1
            return
        if tag not in _ALLOWED_ELEMENTS:
            return
        kept = _filter_attributes(tag, attrs)
        container = not self_closing and tag not in _VOID_ELEMENTS
        emitted = bool(kept) or tag not in _NEED_ATTRIBUTES
        if emitted:
            rendered = "".join(f' {k}="{v.translate(_ESCAPES)}"' for k, v in kept.items())
            self.out.append(f"<{tag}{rendered}{'/' if self_closing else ''}>")
        if container:
            self.open.append((tag, emitted))

    def handle_starttag(self, tag, attrs):
        self._start(tag, attrs, self_closing=False)

    def handle_startendtag(self, tag, attrs):
        self._start(tag, attrs, self_closing=True)

    def handle_endtag(self, tag):
        if tag in _SKIP_CONTENT:
            self.skip_depth = max(self.skip_depth - 1, 0)
            return
        names = [name for name, _ in self.open]
        if self.skip_depth or tag in _VOID_ELEMENTS or tag not in names:
            return
        position = len(names) - 1 - names[::-1].index(tag)
        closing = self.open[position:]
        del self.open[position:]
        self.out.extend(f"</{name}>" for name, emitted in reversed(closing) if emitted)

    def handle_data(self, data):
        if not self.skip_depth:
            self.out.append(data.translate(_ESCAPES))


def sanitize_html(html: str) -> str:
    """Strip everything from HTML that is not safe user-generated markup."""
    parser = _Sanitizer()
    parser.feed(html)
    parser.close()
    parser.out.extend(f"</{name}>" for name, emitted in reversed(parser.open) if emitted)
    return "".join(parser.out)