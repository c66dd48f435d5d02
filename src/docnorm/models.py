"""Data models for documentation records."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Recognized doclet names
PUBLIC = "public"
EXAMPLE = "example"


def type_to_dict(name: str, details: Mapping[str, Any]) -> dict[str, Any]:
    """Serialize a type name with the rest of its introspected descriptor."""
    return {"name": name, **details}


@dataclass(frozen=True)
class TagOccurrence:
    """One ``@title`` occurrence in a documentation comment."""

    title: str
    description: str = ""
    name: str | None = None  # Identifier the tag documents, e.g. a param name
    type: str | None = None  # From {type}
    default: str | None = None  # From [name=default]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "description": self.description}
        if self.name is not None:
            data["name"] = self.name
        if self.type is not None:
            data["type"] = {"name": self.type}
        if self.default is not None:
            data["default"] = self.default
        return data


TagGroups = dict[str, tuple[TagOccurrence, ...]]


def tags_to_dict(tags: Mapping[str, tuple[TagOccurrence, ...]]) -> dict[str, list]:
    return {title: [tag.to_dict() for tag in group] for title, group in tags.items()}


# The ``type_details`` and ``extra`` fields below hold introspection data that
# is not modeled (enum values, flowType, tsType, ...). ``to_dict`` writes them
# back out unchanged, under the modeled keys.


@dataclass(frozen=True)
class Param:
    """Method parameter, introspected and optionally documented."""

    name: str
    type: str | None = None
    description: str | None = None
    default: str | None = None
    type_details: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {**self.extra, "name": self.name}
        if self.type is not None:
            data["type"] = type_to_dict(self.type, self.type_details)
        if self.description is not None:
            data["description"] = self.description
        if self.default is not None:
            data["default"] = self.default
        return data


@dataclass(frozen=True)
class Returns:
    """Method return value descriptor."""

    type: str | None = None
    description: str | None = None
    type_details: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        if self.type is not None:
            data["type"] = type_to_dict(self.type, self.type_details)
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class Method:
    """Component method. ``tags`` is filled in by normalization."""

    name: str
    docblock: str | None = None
    params: tuple[Param, ...] = ()
    returns: Returns | None = None
    modifiers: tuple[str, ...] = ()
    tags: TagGroups = field(default_factory=dict)
    description: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            **self.extra,
            "name": self.name,
            "docblock": self.docblock,
            "modifiers": list(self.modifiers),
            "params": [param.to_dict() for param in self.params],
            "returns": self.returns.to_dict() if self.returns else None,
            "tags": tags_to_dict(self.tags),
        }
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class Prop:
    """Component property."""

    description: str | None = None
    type: str | None = None
    required: bool = False
    default_value: str | None = None
    tags: TagGroups = field(default_factory=dict)
    default_computed: bool = False
    type_details: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            **self.extra,
            "description": self.description,
            "required": self.required,
            "tags": tags_to_dict(self.tags),
        }
        if self.type is not None:
            data["type"] = type_to_dict(self.type, self.type_details)
        if self.default_value is not None:
            data["defaultValue"] = {
                "value": self.default_value,
                "computed": self.default_computed,
            }
        return data


class Doclets(Mapping):
    """Read-only mapping of doclet name to value, with named accessors."""

    def __init__(self, values: Mapping[str, str | bool] | None = None):
        self._values = dict(values or {})

    def __getitem__(self, key: str) -> str | bool:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Doclets({self._values!r})"

    @property
    def public(self) -> bool:
        return bool(self._values.get(PUBLIC))

    @property
    def example(self) -> str | bool | None:
        return self._values.get(EXAMPLE)

    def any_of(self, names: tuple[str, ...]) -> bool:
        """True if any doclet in ``names`` is set."""
        return any(self._values.get(name) for name in names)

    def without(self, *names: str) -> Doclets:
        """Return a copy with ``names`` removed."""
        return Doclets({k: v for k, v in self._values.items() if k not in names})

    def to_dict(self) -> dict[str, str | bool]:
        return dict(self._values)


@dataclass(frozen=True)
class DocRecord:
    """Documentation record for one component.

    Built from introspection output, then passed through the normalization
    stages in ``docnorm.pipeline``; each stage returns a new record.
    """

    description: str | None = None
    display_name: str | None = None
    methods: tuple[Method, ...] = ()
    props: dict[str, Prop] | None = None
    doclets: Doclets = field(default_factory=Doclets)
    tags: TagGroups = field(default_factory=dict)
    examples: tuple[str, ...] = ()
    example: Any = None  # Resolved external example (opaque loader value)
    visible_name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.doclets, Doclets):
            object.__setattr__(self, "doclets", Doclets(self.doclets))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DocRecord:
        """Build a record from introspection JSON (validated)."""
        from .schemas import RecordSchema

        return RecordSchema.model_validate(data).to_record()

    def to_dict(self) -> dict[str, Any]:
        example = self.example
        if hasattr(example, "to_dict"):
            example = example.to_dict()
        data: dict[str, Any] = {
            **self.extra,
            "description": self.description,
            "displayName": self.display_name,
            "methods": [method.to_dict() for method in self.methods],
            "doclets": self.doclets.to_dict(),
            "tags": tags_to_dict(self.tags),
            "examples": list(self.examples),
            "example": example,
        }
        if self.props is not None:
            data["props"] = {name: prop.to_dict() for name, prop in self.props.items()}
        if self.visible_name is not None:
            data["visibleName"] = self.visible_name
        return data
