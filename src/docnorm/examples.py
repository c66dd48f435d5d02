"""Resolution of ``@example`` tags into renderable examples.

An ``@example`` body is either a path to an examples file, relative to the
component source file, or an inline fenced code block:

    @example ./Button.examples.md

    @example
    ```jsx render
    <Button>Push me</Button>
    ```

Inline blocks must declare the ``render`` modifier. Examples that fail
validation are dropped with a warning; nothing is raised.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable

from .examples_loader import build_specifier, require_it
from .models import EXAMPLE, DocRecord
from .modifiers import parse_example
from .settings import DEFAULT_EXAMPLES_LOADER

log = logging.getLogger(__name__)

FENCE = "```"

ExampleLoader = Callable[[str], Any]


def example_file_path(source_path: str | Path | None, reference: str) -> Path:
    """Resolve an example reference against the source file's directory."""
    base = Path(source_path).parent if source_path else Path(".")
    return base / reference


def split_inline_example(body: str) -> tuple[str, str]:
    """Split an inline example into ``(header, content)``.

    The header is the opening fence line without its backticks. Lines before
    the fence (a caption) and the closing fence are not part of the content.
    """
    lines = [line for line in body.splitlines() if line.strip()]
    start = next(
        (i for i, line in enumerate(lines) if line.lstrip().startswith(FENCE)), 0
    )
    header = lines[start].strip()[len(FENCE) :].strip() if lines else ""
    content = lines[start + 1 :]
    if content and content[-1].strip() == FENCE:
        content = content[:-1]
    return header, "\n".join(content)


def resolve_examples(
    record: DocRecord,
    source_path: str | Path | None,
    *,
    loader: str = DEFAULT_EXAMPLES_LOADER,
    load_example: ExampleLoader = require_it,
) -> DocRecord:
    """Resolve the record's ``@example`` tags into ``example``/``examples``.

    Each occurrence is handled independently, in declaration order:

    - an existing file becomes the record's single external ``example``
      (a later file replaces an earlier one);
    - a fenced block with the ``render`` modifier is appended to
      ``examples`` verbatim;
    - anything else is dropped with a warning naming ``source_path``.

    The ``example`` doclet is removed once any example has been accepted.
    """
    occurrences = record.tags.get(EXAMPLE, ())
    if not record.doclets.example or not occurrences:
        return record

    doclets = record.doclets
    examples = list(record.examples)
    external = record.example

    for occurrence in occurrences:
        body = occurrence.description
        reference = body.strip()
        if not reference:
            continue

        file_path = example_file_path(source_path, reference)
        # os.path.isfile tolerates over-long and NUL-containing inline bodies
        if os.path.isfile(file_path):
            file_path = file_path.resolve()
            external = load_example(build_specifier(file_path, loader))
            doclets = doclets.without(EXAMPLE)
            log.debug(f"Resolved example file {file_path} for {source_path}")
        elif FENCE in reference:
            header, content = split_inline_example(reference)
            parsed = parse_example(content, header)
            if parsed.render:
                examples.append(body)
                doclets = doclets.without(EXAMPLE)
            else:
                log.warning(
                    f"An inline example defined in {source_path} is missing "
                    "the required `render` modifier."
                )
        else:
            log.warning(
                f"An example file {reference} defined in {source_path} "
                "component not found."
            )

    return replace(
        record, doclets=doclets, examples=tuple(examples), example=external
    )
