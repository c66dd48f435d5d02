"""Doclet extraction: ``@name value`` lines in a free-text description."""

from __future__ import annotations

import re

# A line starting with @word, followed by end of line or by everything up to
# the next line that starts with @word.
DOCLET_PATTERN = re.compile(
    r"^[ \t]*@(\w+)(?:$|\s((?:[\s\S](?!^[ \t]*@\w))*))",
    re.MULTILINE,
)


def _mask_fenced_code(text: str) -> str:
    """Blank the ``@`` on lines inside fenced code, keeping every offset."""
    lines = text.splitlines(keepends=True)
    in_fence = False
    for i, line in enumerate(lines):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
        elif in_fence:
            lines[i] = line.replace("@", " ", 1)
    return "".join(lines)


def _matches(text: str) -> list[re.Match]:
    # Matched against the masked copy; spans index into ``text`` unchanged
    return list(DOCLET_PATTERN.finditer(_mask_fenced_code(text)))


def get_doclets(text: str | None) -> dict[str, str | bool]:
    """Return a mapping of doclet name to value (``True`` for bare doclets).

    Lines inside fenced code (``@media`` in CSS, say) are not doclets.
    """
    doclets: dict[str, str | bool] = {}
    if not text:
        return doclets
    for match in _matches(text):
        value = ""
        if match.group(2) is not None:
            value = text[match.start(2) : match.end(2)].strip()
        doclets[match.group(1)] = value or True
    return doclets


def remove_doclets(text: str | None) -> str:
    """Strip all doclets from ``text`` and trim the remainder."""
    if not text:
        return ""
    kept: list[str] = []
    position = 0
    for match in _matches(text):
        kept.append(text[position : match.start()])
        position = match.end()
    kept.append(text[position:])
    return "".join(kept).strip()
