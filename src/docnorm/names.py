"""Display-name fallback derived from a component's file path."""

from __future__ import annotations

import re
from pathlib import PurePath

_WORDS = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]|[^A-Za-z]|$)|[A-Z]?[a-z]+|[A-Z]|[0-9]+")

INDEX_NAMES = frozenset({"index"})


def _camel_case(text: str) -> str:
    words = _WORDS.findall(text)
    if not words:
        return ""
    head, *tail = (word.lower() for word in words)
    return head + "".join(word.capitalize() for word in tail)


def get_name_from_file_path(file_path: str | PurePath) -> str:
    """Guess a component name from its file path.

    ``components/my-button.jsx`` -> ``MyButton``; index files are named after
    their directory, so ``widgets/Button/index.js`` -> ``Button``.
    """
    path = PurePath(file_path)
    name = path.stem
    if name in INDEX_NAMES:
        name = path.parent.name
    name = _camel_case(name)
    return name[:1].upper() + name[1:]
