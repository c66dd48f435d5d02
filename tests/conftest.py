"""Shared pytest fixtures for docnorm tests."""

from pathlib import Path

import pytest

from docnorm import Method, Param


@pytest.fixture
def source_file(tmp_path) -> Path:
    """A component source file at <tmp>/widgets/Button.js."""
    path = tmp_path / "widgets" / "Button.js"
    path.parent.mkdir()
    path.write_text("export default function Button() {}\n")
    return path


@pytest.fixture
def example_file(source_file) -> Path:
    """An examples file next to the component."""
    path = source_file.parent / "demo.md"
    path.write_text(
        "Basic usage:\n\n```jsx\n<Button>Push</Button>\n```\n\n"
        "```jsx static\nimport Button from './Button';\n```\n"
    )
    return path


@pytest.fixture
def focus_method() -> Method:
    return Method(
        name="focus",
        docblock=(
            "Focus the input.\n\n"
            "@public\n"
            "@param {boolean} select Also select the text\n"
            "@returns {void} Nothing"
        ),
        params=(Param(name="select", type="bool"),),
    )
