"""Validation schemas for introspection JSON.

Accepts the camelCase shape emitted by component introspection tools and
converts it into ``docnorm.models`` records. Keys the schemas do not model
are kept (``extra="allow"``) and carried on the records, so normalized
output still has them.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import DocRecord, Doclets, Method, Param, Prop, Returns, TagOccurrence


class TypeSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


TypeField = Optional[Union[TypeSchema, str]]


def _type_name(value: TypeField) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.name


def _type_details(value: TypeField) -> dict[str, Any]:
    """Everything in a type descriptor besides its name (enum values, raw, ...)."""
    if isinstance(value, TypeSchema):
        return dict(value.model_extra or {})
    return {}


def _extra(model: BaseModel) -> dict[str, Any]:
    return dict(model.model_extra or {})


class TagSchema(BaseModel):
    title: str
    description: Optional[str] = ""
    name: Optional[str] = None
    type: TypeField = None
    default: Optional[str] = None

    def to_tag(self) -> TagOccurrence:
        return TagOccurrence(
            title=self.title,
            description=self.description or "",
            name=self.name,
            type=_type_name(self.type),
            default=self.default,
        )


def _to_tag_groups(tags: dict[str, list[TagSchema]]) -> dict:
    return {title: tuple(t.to_tag() for t in group) for title, group in tags.items()}


class ParamSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    type: TypeField = None
    description: Optional[str] = None
    default: Optional[str] = None

    def to_param(self) -> Param:
        return Param(
            name=self.name,
            type=_type_name(self.type),
            description=self.description,
            default=self.default,
            type_details=_type_details(self.type),
            extra=_extra(self),
        )


class ReturnsSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: TypeField = None
    description: Optional[str] = None

    def to_returns(self) -> Returns:
        return Returns(
            type=_type_name(self.type),
            description=self.description,
            type_details=_type_details(self.type),
            extra=_extra(self),
        )


class MethodSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    docblock: Optional[str] = None
    description: Optional[str] = None
    modifiers: list[str] = Field(default_factory=list)
    params: Optional[list[ParamSchema]] = None
    returns: Optional[ReturnsSchema] = None
    tags: dict[str, list[TagSchema]] = Field(default_factory=dict)

    def to_method(self) -> Method:
        return Method(
            name=self.name,
            docblock=self.docblock,
            description=self.description,
            modifiers=tuple(self.modifiers),
            params=tuple(p.to_param() for p in self.params or []),
            returns=self.returns.to_returns() if self.returns else None,
            tags=_to_tag_groups(self.tags),
            extra=_extra(self),
        )


class DefaultValueSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: Any = None
    computed: bool = False


class PropSchema(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: Optional[str] = None
    type: TypeField = None
    required: bool = False
    default_value: Optional[DefaultValueSchema] = Field(
        default=None, alias="defaultValue"
    )
    tags: dict[str, list[TagSchema]] = Field(default_factory=dict)

    def to_prop(self) -> Prop:
        default = self.default_value.value if self.default_value else None
        return Prop(
            description=self.description,
            type=_type_name(self.type),
            required=self.required,
            default_value=None if default is None else str(default),
            default_computed=bool(self.default_value and self.default_value.computed),
            type_details=_type_details(self.type),
            tags=_to_tag_groups(self.tags),
            extra=_extra(self),
        )


class RecordSchema(BaseModel):
    """Top-level documentation record."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    methods: Optional[list[MethodSchema]] = None
    props: Optional[dict[str, PropSchema]] = None
    doclets: dict[str, Union[bool, str]] = Field(default_factory=dict)
    tags: dict[str, list[TagSchema]] = Field(default_factory=dict)
    examples: list[str] = Field(default_factory=list)
    example: Any = None
    visible_name: Optional[str] = Field(default=None, alias="visibleName")

    def to_record(self) -> DocRecord:
        return DocRecord(
            description=self.description,
            display_name=self.display_name,
            methods=tuple(m.to_method() for m in self.methods or []),
            props=(
                {name: p.to_prop() for name, p in self.props.items()}
                if self.props is not None
                else None
            ),
            doclets=Doclets(self.doclets),
            tags=_to_tag_groups(self.tags),
            examples=tuple(self.examples),
            example=self.example,
            visible_name=self.visible_name,
            extra=_extra(self),
        )
