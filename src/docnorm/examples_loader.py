"""Loader for external example files referenced by ``@example``.

References are kept lazy: ``require_it`` wraps a loader specifier of the form
``!!<loader>!<path>`` and the file is only read when ``load()`` is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ExampleLoadError
from .highlighting import iter_fences
from .modifiers import parse_example
from .settings import DEFAULT_EXAMPLES_LOADER, DEFAULT_PLAYGROUND_LANGS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Chunk:
    """Part of an examples file: a live code example or plain markdown."""

    type: str  # "code" | "markdown"
    content: str
    lang: str | None = None
    settings: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "content": self.content}
        if self.type == "code":
            data["lang"] = self.lang
            data["settings"] = self.settings
        return data


def build_specifier(path: str | Path, loader: str = DEFAULT_EXAMPLES_LOADER) -> str:
    return f"!!{loader}!{path}"


def split_specifier(specifier: str) -> tuple[str, str]:
    """Split ``!!loader!path`` into ``(loader, path)``."""
    if not specifier.startswith("!!"):
        raise ExampleLoadError(f"Not a loader specifier: {specifier}")
    loader, sep, path = specifier[2:].partition("!")
    if not sep or not loader or not path:
        raise ExampleLoadError(f"Not a loader specifier: {specifier}")
    return loader, path


def chunkify(
    markdown: str, playground_langs: tuple[str, ...] = DEFAULT_PLAYGROUND_LANGS
) -> list[Chunk]:
    """Split markdown into code chunks and the markdown around them.

    Fenced blocks in a playground language become code chunks unless they are
    marked ``static``; all other text, other fences included, stays markdown.
    """
    chunks: list[Chunk] = []
    pending = ""
    position = 0

    for fence in iter_fences(markdown):
        parsed = parse_example(fence.code, fence.header)
        if fence.lang not in playground_langs or parsed.settings.static:
            continue
        pending += markdown[position : fence.start]
        if pending.strip():
            chunks.append(Chunk(type="markdown", content=pending.strip()))
        pending = ""
        chunks.append(
            Chunk(
                type="code",
                content=fence.code,
                lang=fence.lang,
                settings=parsed.settings.model_dump(exclude_defaults=True),
            )
        )
        position = fence.end

    pending += markdown[position:]
    if pending.strip():
        chunks.append(Chunk(type="markdown", content=pending.strip()))
    return chunks


def load_examples(
    specifier: str, playground_langs: tuple[str, ...] = DEFAULT_PLAYGROUND_LANGS
) -> list[Chunk]:
    """Read the file named by a loader specifier and chunkify it."""
    _, path = split_specifier(specifier)
    try:
        markdown = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ExampleLoadError(f"Failed to read {path}: {e}") from e
    chunks = chunkify(markdown, playground_langs)
    log.debug(f"Loaded {len(chunks)} example chunks from {path}")
    return chunks


@dataclass(frozen=True)
class ModuleReference:
    """Deferred reference to an examples file, resolved by ``load()``."""

    specifier: str
    playground_langs: tuple[str, ...] = DEFAULT_PLAYGROUND_LANGS

    @property
    def path(self) -> Path:
        return Path(split_specifier(self.specifier)[1])

    def load(self) -> list[Chunk]:
        return load_examples(self.specifier, self.playground_langs)

    def to_dict(self) -> dict[str, str]:
        return {"require": self.specifier}


def require_it(
    specifier: str, playground_langs: tuple[str, ...] = DEFAULT_PLAYGROUND_LANGS
) -> ModuleReference:
    """Default example-loading collaborator."""
    return ModuleReference(specifier, playground_langs)
