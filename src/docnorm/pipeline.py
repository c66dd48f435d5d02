"""Normalization pipeline for documentation records.

``get_props`` runs a record through named stages, in order:

    methods       keep public methods, merge @param/@returns into them
    description   doclets, tags, cleaned description, @example resolution
    props         tag-free prop descriptions, drop hidden props
    display_name  fall back to a name derived from the file path
    visible_name  promote the @visibleName doclet

Each stage takes a record and returns a new one; none mutates its input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from functools import partial
from pathlib import Path
from typing import Any, Callable

from .doclets import get_doclets, remove_doclets
from .examples import ExampleLoader, resolve_examples
from .examples_loader import require_it
from .highlighting import highlight_code_in_markdown
from .models import (
    Doclets,
    DocRecord,
    Method,
    Param,
    Returns,
    TagOccurrence,
)
from .names import get_name_from_file_path
from .settings import Settings
from .tags import (
    extract_tags,
    group_tags,
    merge_synonyms,
    omit_tags,
    parse_comment,
    unwrap,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineContext:
    """Inputs shared by every stage for one record."""

    source_path: str | None = None
    settings: Settings = field(default_factory=Settings)
    load_example: ExampleLoader = require_it


Stage = Callable[[DocRecord, PipelineContext], DocRecord]


# Methods


def _document_param(param: Param, param_tags: tuple[TagOccurrence, ...]) -> Param:
    """Attach the first tag documenting ``param``; introspected data is the base."""
    tag = next((t for t in param_tags if t.name == param.name), None)
    if tag is None:
        return param
    if tag.type is None or tag.type == param.type:
        type_name, type_details = param.type, param.type_details
    else:
        # Introspected details describe the old type
        type_name, type_details = tag.type, {}
    return replace(
        param,
        description=tag.description,
        type=type_name,
        type_details=type_details,
        default=tag.default if tag.default is not None else param.default,
    )


def normalize_method(method: Method, settings: Settings) -> Method:
    """Merge a method's tags into its introspected params and return value."""
    all_tags = extract_tags(method.docblock, unwrap_comment=True, sloppy=True)

    param_tags = merge_synonyms(all_tags, settings.param_synonyms)
    params = tuple(_document_param(param, param_tags) for param in method.params)

    # Introspected return data takes precedence over @returns
    returns = method.returns
    if returns is None:
        return_tags = merge_synonyms(all_tags, settings.return_synonyms)
        if return_tags:
            returns = Returns(
                type=return_tags[0].type, description=return_tags[0].description
            )

    return replace(
        method,
        params=params,
        returns=returns,
        tags=omit_tags(all_tags, settings.all_synonyms),
    )


def is_public(method: Method) -> bool:
    if not method.docblock:
        return False
    return Doclets(get_doclets(unwrap(method.docblock))).public


def normalize_methods(record: DocRecord, context: PipelineContext) -> DocRecord:
    """Drop non-public methods and normalize the rest."""
    public = [method for method in record.methods if is_public(method)]
    return replace(
        record,
        methods=tuple(normalize_method(m, context.settings) for m in public),
    )


# Description


def clean_description(text: str, css_class: str = "highlight") -> str:
    """Strip doclets, then highlight code.

    Stripping comes first so that doclet text is never highlighted.
    """
    return highlight_code_in_markdown(remove_doclets(text), css_class)


def process_description(record: DocRecord, context: PipelineContext) -> DocRecord:
    """Extract doclets and tags from the description and resolve examples."""
    if not record.description:
        return replace(record, doclets=Doclets())

    doclets = Doclets(get_doclets(record.description))
    tags = {**record.tags, **extract_tags(record.description)}
    record = replace(
        record,
        doclets=doclets,
        tags=tags,
        description=clean_description(
            record.description, context.settings.highlight_css_class
        ),
    )
    return resolve_examples(
        record,
        context.source_path,
        loader=context.settings.examples_loader,
        load_example=context.load_example,
    )


# Props


def normalize_props(record: DocRecord, context: PipelineContext) -> DocRecord:
    """Replace prop descriptions with tag-free text and drop hidden props."""
    if record.props is None:
        return record

    hidden = context.settings.hidden_doclets
    props = {}
    for name, prop in record.props.items():
        # Props declared only through defaults have no description
        parsed = parse_comment(prop.description or "")
        if Doclets(get_doclets(prop.description)).any_of(hidden):
            log.debug(f"Dropping hidden prop {name} in {context.source_path}")
            continue
        props[name] = replace(
            prop,
            description=parsed.description,
            tags={**prop.tags, **group_tags(parsed.tags)},
        )
    return replace(record, props=props)


# Names


def fill_display_name(record: DocRecord, context: PipelineContext) -> DocRecord:
    """Derive a display name from the source path when there is none."""
    if record.display_name or not context.source_path:
        return record
    return replace(record, display_name=get_name_from_file_path(context.source_path))


def promote_visible_name(record: DocRecord, context: PipelineContext) -> DocRecord:
    """Move the label doclet (@visibleName by default) into ``visible_name``.

    The doclet is removed from both ``doclets`` and ``tags``.
    """
    name = context.settings.label_doclet
    label = record.doclets.get(name)
    if not label:
        return record
    return replace(
        record,
        visible_name=label if isinstance(label, str) else record.visible_name,
        doclets=record.doclets.without(name),
        tags=omit_tags(record.tags, [name]),
    )


STAGES: tuple[tuple[str, Stage], ...] = (
    ("methods", normalize_methods),
    ("description", process_description),
    ("props", normalize_props),
    ("display_name", fill_display_name),
    ("visible_name", promote_visible_name),
)


def get_props(
    record: DocRecord | Mapping[str, Any],
    source_path: str | Path | None = None,
    *,
    settings: Settings | None = None,
    load_example: ExampleLoader | None = None,
) -> DocRecord:
    """Normalize a documentation record.

    Args:
        record: Record from introspection, or its JSON dict form.
        source_path: Path of the component source file. Used to resolve
            example files, derive a display name and in warnings.
        settings: Pipeline settings; defaults to ``Settings()``.
        load_example: Loader for example files; defaults to ``require_it``.

    Returns:
        The normalized record.

    Raises:
        TagSyntaxError: If a docblock or description has malformed tags.
    """
    if not isinstance(record, DocRecord):
        record = DocRecord.from_dict(record)

    settings = settings or Settings()
    if load_example is None:
        load_example = partial(require_it, playground_langs=settings.playground_langs)

    context = PipelineContext(
        source_path=str(source_path) if source_path else None,
        settings=settings,
        load_example=load_example,
    )
    for name, stage in STAGES:
        log.debug(f"Running stage {name} for {context.source_path}")
        record = stage(record, context)
    return record
