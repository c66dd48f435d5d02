"""Parsing of code fence headers: language plus example modifiers.

A header is the text after the opening backticks, e.g. ``jsx render`` or
``jsx {"render": true, "padded": true}``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, ValidationError

_STRING_MODIFIERS = re.compile(r"^[ \w]+$")


class ExampleSettings(BaseModel):
    """Settings declared by example modifiers. Unknown modifiers are kept."""

    model_config = ConfigDict(extra="allow")

    render: bool = False
    static: bool = False
    showcode: bool = False
    noeditor: bool = False


@dataclass(frozen=True)
class ParsedExample:
    content: str
    lang: str | None = None
    settings: ExampleSettings = field(default_factory=ExampleSettings)
    error: str | None = None

    @property
    def render(self) -> bool:
        return self.error is None and self.settings.render


def _parse_modifiers(modifiers: str) -> ExampleSettings:
    if _STRING_MODIFIERS.match(modifiers):
        return ExampleSettings.model_validate(
            {modifier: True for modifier in modifiers.split()}
        )
    return ExampleSettings.model_validate(json.loads(modifiers))


def parse_example(content: str, header: str | None = None) -> ParsedExample:
    """Parse an example's fence header into language and settings.

    Modifiers are either space-separated flags or a JSON object. Invalid
    modifiers do not raise: the result carries an ``error`` and default
    settings instead.
    """
    header = (header or "").strip()
    if not header:
        return ParsedExample(content=content)

    lang, _, modifiers = header.partition(" ")
    modifiers = modifiers.strip()
    if not modifiers:
        return ParsedExample(content=content, lang=lang)

    try:
        settings = _parse_modifiers(modifiers)
    except (json.JSONDecodeError, ValidationError) as e:
        return ParsedExample(
            content=content,
            lang=lang,
            error=(
                f'Cannot parse modifiers for "{modifiers}". '
                f'Use space-separated strings or JSON: {e.__class__.__name__}'
            ),
        )
    return ParsedExample(content=content, lang=lang, settings=settings)
