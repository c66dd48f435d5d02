"""Tests for display names derived from file paths."""

import pytest

from docnorm.names import get_name_from_file_path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/src/widgets/Button.js", "Button"),
        ("components/my-button.jsx", "MyButton"),
        ("components/date_picker.tsx", "DatePicker"),
        ("widgets/Button/index.js", "Button"),
        ("widgets/radio-group/index.jsx", "RadioGroup"),
        ("Button.test.js", "ButtonTest"),
    ],
)
def test_name_from_path(path, expected):
    assert get_name_from_file_path(path) == expected
