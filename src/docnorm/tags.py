"""Tag extraction from documentation comments.

Parses JSDoc-style comment text into a free-text description and an ordered
list of ``@title`` occurrences, then groups and merges them:

    /**
     * Focus the input.
     *
     * @public
     * @param {boolean} [select=false] Select the text as well
     * @returns {void}
     */
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .errors import TagSyntaxError
from .models import TagGroups, TagOccurrence

PARAM_LIKE_TAGS = frozenset({"param", "arg", "argument", "prop", "property"})
RETURN_LIKE_TAGS = frozenset({"return", "returns"})
RAW_TAGS = frozenset({"example"})

_TAG_LINE = re.compile(r"^\s*@(\w+)(.*)$")
_NAME = re.compile(r"[\w$][\w$.]*(?:\[\])?(?:\.[\w$]+)*")


@dataclass(frozen=True)
class ParsedComment:
    """Description text plus tags, in the order they appear."""

    description: str
    tags: tuple[TagOccurrence, ...] = ()


def unwrap(comment: str) -> str:
    """Strip ``/**``, ``*/`` and leading ``*`` gutters from a block comment.

    Text that is not a block comment is returned unchanged.
    """
    if not comment.lstrip().startswith("/*"):
        return comment
    text = re.sub(r"^\s*/\*\*?", "", comment)
    text = re.sub(r"\*/\s*$", "", text)
    lines = [re.sub(r"^\s*\* ?", "", line) for line in text.split("\n")]
    return "\n".join(lines).strip("\n")


def _read_type(rest: str, lineno: int) -> tuple[str | None, str]:
    """Read a leading ``{type}`` expression, honouring nested braces."""
    rest = rest.lstrip()
    if not rest.startswith("{"):
        return None, rest
    depth = 0
    for i, char in enumerate(rest):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return rest[1:i].strip(), rest[i + 1 :]
    raise TagSyntaxError("Unbalanced braces in type expression", lineno, rest)


def _read_name(
    title: str, rest: str, lineno: int, sloppy: bool
) -> tuple[str, str | None, str]:
    """Read the identifier of a param-like tag: ``name`` or ``[name=default]``."""
    rest = rest.lstrip()
    if rest.startswith("["):
        if not sloppy:
            raise TagSyntaxError(
                f"Optional name syntax in @{title} requires sloppy mode", lineno, rest
            )
        end = rest.find("]")
        if end == -1:
            raise TagSyntaxError(f"Unclosed [ in @{title}", lineno, rest)
        inner, rest = rest[1:end], rest[end + 1 :]
        name, _, default = inner.partition("=")
        name = name.strip()
        if not _NAME.fullmatch(name):
            raise TagSyntaxError(f"Invalid identifier in @{title}", lineno, inner)
        return name, (default.strip() or None), rest

    match = _NAME.match(rest)
    if not match:
        raise TagSyntaxError(f"Missing identifier in @{title}", lineno, rest)
    return match.group(0), None, rest[match.end() :]


def _clean_text(rest: str) -> str:
    rest = rest.strip()
    if rest.startswith("- "):
        rest = rest[2:]
    return rest.strip()


def _build_tag(
    title: str, lines: list[str], lineno: int, sloppy: bool
) -> TagOccurrence:
    if title in RAW_TAGS:
        first, body = lines[0].strip(), lines[1:]
        body_lines = ([first] if first else []) + body
        return TagOccurrence(title=title, description="\n".join(body_lines).rstrip())

    rest = "\n".join(lines)
    if title in PARAM_LIKE_TAGS:
        type_, rest = _read_type(rest, lineno)
        name, default, rest = _read_name(title, rest, lineno, sloppy)
        return TagOccurrence(
            title=title,
            description=_clean_text(rest),
            name=name,
            type=type_,
            default=default,
        )
    if title in RETURN_LIKE_TAGS:
        type_, rest = _read_type(rest, lineno)
        return TagOccurrence(title=title, description=_clean_text(rest), type=type_)
    return TagOccurrence(title=title, description=rest.strip())


def parse_comment(
    text: str | None, *, unwrap_comment: bool = False, sloppy: bool = False
) -> ParsedComment:
    """Parse comment text into a description and tag occurrences.

    Args:
        text: Comment text. ``None`` is treated as empty.
        unwrap_comment: Strip block comment delimiters and ``*`` gutters first.
        sloppy: Accept ``[name]`` / ``[name=default]`` optional param syntax.

    Returns:
        ParsedComment with description (tags removed) and tags in order.

    Raises:
        TagSyntaxError: On unbalanced type braces or a param tag without a name.
    """
    if not text:
        return ParsedComment(description="")
    if unwrap_comment:
        text = unwrap(text)

    description_lines: list[str] = []
    tags: list[TagOccurrence] = []
    current: tuple[str, list[str], int] | None = None
    in_fence = False

    for lineno, line in enumerate(text.split("\n"), start=1):
        # Lines inside fenced code never start a tag
        match = None if in_fence else _TAG_LINE.match(line)
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
        if match:
            if current:
                tags.append(_build_tag(*current, sloppy))
            current = (match.group(1), [match.group(2)], lineno)
        elif current:
            current[1].append(line)
        else:
            description_lines.append(line)

    if current:
        tags.append(_build_tag(*current, sloppy))

    return ParsedComment(
        description="\n".join(description_lines).strip(), tags=tuple(tags)
    )


def group_tags(tags: Iterable[TagOccurrence]) -> TagGroups:
    """Group tag occurrences by title, keeping encounter order."""
    groups: dict[str, list[TagOccurrence]] = {}
    for tag in tags:
        groups.setdefault(tag.title, []).append(tag)
    return {title: tuple(group) for title, group in groups.items()}


def extract_tags(
    text: str | None, *, unwrap_comment: bool = False, sloppy: bool = False
) -> TagGroups:
    """Parse ``text`` and return its tags grouped by title."""
    parsed = parse_comment(text, unwrap_comment=unwrap_comment, sloppy=sloppy)
    return group_tags(parsed.tags)


def merge_synonyms(
    groups: Mapping[str, tuple[TagOccurrence, ...]], names: Iterable[str]
) -> tuple[TagOccurrence, ...]:
    """Concatenate the occurrences of every tag in ``names``, in that order."""
    merged: list[TagOccurrence] = []
    for name in names:
        merged.extend(groups.get(name, ()))
    return tuple(merged)


def omit_tags(
    groups: Mapping[str, tuple[TagOccurrence, ...]], names: Iterable[str]
) -> TagGroups:
    """Return ``groups`` without the given titles."""
    excluded = set(names)
    return {title: group for title, group in groups.items() if title not in excluded}
