"""Normalize component documentation records.

Merges introspected method and prop data with documentation-comment tags and
resolves ``@example`` annotations into renderable examples.
"""

from .errors import DocnormError, ExampleLoadError, TagSyntaxError
from .examples_loader import ModuleReference, require_it
from .models import DocRecord, Doclets, Method, Param, Prop, Returns, TagOccurrence
from .pipeline import STAGES, PipelineContext, get_props
from .settings import Settings

__all__ = [
    "DocRecord",
    "Doclets",
    "DocnormError",
    "ExampleLoadError",
    "Method",
    "ModuleReference",
    "Param",
    "PipelineContext",
    "Prop",
    "Returns",
    "STAGES",
    "Settings",
    "TagOccurrence",
    "TagSyntaxError",
    "get_props",
    "require_it",
]
