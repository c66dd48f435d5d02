"""Tests for environment-driven settings."""

import pytest

from docnorm.settings import DEFAULT_EXAMPLES_LOADER, Settings

ENV_VARS = [
    "DOCNORM_EXAMPLES_LOADER",
    "DOCNORM_PLAYGROUND_LANGS",
    "DOCNORM_HIGHLIGHT_CSS_CLASS",
    "DOCNORM_HIDDEN_DOCLETS",
    "DOCNORM_LABEL_DOCLET",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.examples_loader == DEFAULT_EXAMPLES_LOADER
    assert settings.param_synonyms == ("param", "arg", "argument")
    assert settings.return_synonyms == ("return", "returns")
    assert settings.all_synonyms == ("param", "arg", "argument", "return", "returns")
    assert settings.hidden_doclets == ("ignore", "hidden")
    assert settings.label_doclet == "visibleName"


def test_env_overrides(clean_env):
    clean_env.setenv("DOCNORM_EXAMPLES_LOADER", "custom-loader")
    clean_env.setenv("DOCNORM_PLAYGROUND_LANGS", "vue, html")
    clean_env.setenv("DOCNORM_HIGHLIGHT_CSS_CLASS", "code")
    clean_env.setenv("DOCNORM_HIDDEN_DOCLETS", "internal,private")
    clean_env.setenv("DOCNORM_LABEL_DOCLET", "title")

    settings = Settings.from_env()

    assert settings.examples_loader == "custom-loader"
    assert settings.playground_langs == ("vue", "html")
    assert settings.highlight_css_class == "code"
    assert settings.hidden_doclets == ("internal", "private")
    assert settings.label_doclet == "title"
