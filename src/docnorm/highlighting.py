"""Code highlighting for markdown descriptions."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

FENCE_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)```(?P<header>[^\n`]*)\n(?P<code>.*?)^[ \t]*```[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True)
class Fence:
    """A fenced code block found in markdown text."""

    lang: str
    header: str  # Everything after the opening backticks
    code: str
    start: int
    end: int


def iter_fences(text: str) -> Iterator[Fence]:
    """Yield fenced code blocks in ``text`` in document order."""
    for match in FENCE_PATTERN.finditer(text):
        header = match.group("header").strip()
        lang = header.split(" ", 1)[0] if header else ""
        yield Fence(
            lang=lang,
            header=header,
            code=match.group("code").rstrip("\n"),
            start=match.start(),
            end=match.end(),
        )


@lru_cache(maxsize=8)
def _formatter(css_class: str) -> HtmlFormatter:
    return HtmlFormatter(cssclass=css_class)


def _lexer_for(lang: str):
    if not lang:
        return TextLexer()
    try:
        return get_lexer_by_name(lang)
    except ClassNotFound:
        return TextLexer()


def highlight_code(code: str, lang: str, css_class: str = "highlight") -> str:
    """Highlight one block of code as HTML."""
    html = _pygments_highlight(code, _lexer_for(lang), _formatter(css_class))
    return html.rstrip("\n")


def highlight_code_in_markdown(text: str, css_class: str = "highlight") -> str:
    """Replace fenced code blocks in ``text`` with highlighted HTML.

    Everything outside the fences is left as is. The output contains no
    fences, so highlighting it again returns it unchanged.
    """
    if "```" not in text:
        return text

    parts: list[str] = []
    position = 0
    for fence in iter_fences(text):
        parts.append(text[position : fence.start])
        parts.append(highlight_code(fence.code, fence.lang, css_class))
        position = fence.end
    parts.append(text[position:])
    return "".join(parts)
