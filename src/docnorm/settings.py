"""Runtime configuration for the normalization pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

# Canonical field -> tag names treated as one logical tag
DEFAULT_TAG_SYNONYMS: dict[str, tuple[str, ...]] = {
    "params": ("param", "arg", "argument"),
    "returns": ("return", "returns"),
}

DEFAULT_EXAMPLES_LOADER = "docnorm.examples_loader"
DEFAULT_PLAYGROUND_LANGS = ("javascript", "js", "jsx", "ts", "tsx")
DEFAULT_HIDDEN_DOCLETS = ("ignore", "hidden")
DEFAULT_LABEL_DOCLET = "visibleName"


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Pipeline settings.

    Defaults match the tag conventions of JSDoc-style comments. Use
    ``Settings.from_env()`` to pick up overrides from the environment.
    """

    tag_synonyms: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_TAG_SYNONYMS)
    )
    examples_loader: str = DEFAULT_EXAMPLES_LOADER
    playground_langs: tuple[str, ...] = DEFAULT_PLAYGROUND_LANGS
    highlight_css_class: str = "highlight"
    # A prop carrying any of these doclets is dropped
    hidden_doclets: tuple[str, ...] = DEFAULT_HIDDEN_DOCLETS
    label_doclet: str = DEFAULT_LABEL_DOCLET

    @property
    def param_synonyms(self) -> tuple[str, ...]:
        return self.tag_synonyms["params"]

    @property
    def return_synonyms(self) -> tuple[str, ...]:
        return self.tag_synonyms["returns"]

    @property
    def all_synonyms(self) -> tuple[str, ...]:
        names: list[str] = []
        for synonyms in self.tag_synonyms.values():
            names.extend(synonyms)
        return tuple(names)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings, overriding defaults from DOCNORM_* variables."""
        settings = cls()
        overrides: dict[str, object] = {}

        loader = os.environ.get("DOCNORM_EXAMPLES_LOADER")
        if loader:
            overrides["examples_loader"] = loader

        langs = os.environ.get("DOCNORM_PLAYGROUND_LANGS")
        if langs:
            overrides["playground_langs"] = _split_list(langs)

        css_class = os.environ.get("DOCNORM_HIGHLIGHT_CSS_CLASS")
        if css_class:
            overrides["highlight_css_class"] = css_class

        hidden = os.environ.get("DOCNORM_HIDDEN_DOCLETS")
        if hidden:
            overrides["hidden_doclets"] = _split_list(hidden)

        label = os.environ.get("DOCNORM_LABEL_DOCLET")
        if label:
            overrides["label_doclet"] = label

        return replace(settings, **overrides) if overrides else settings
