"""Tests for code highlighting in markdown."""

from docnorm.highlighting import highlight_code_in_markdown, iter_fences


def test_text_without_fences_is_unchanged():
    text = "Plain *markdown* with `inline` code."
    assert highlight_code_in_markdown(text) == text


def test_fence_is_replaced():
    html = highlight_code_in_markdown("Before\n\n```js\nconst x = 1;\n```\n\nAfter")

    assert html.startswith("Before\n\n")
    assert html.endswith("\n\nAfter")
    assert '<div class="highlight">' in html
    assert "```" not in html


def test_unknown_language_falls_back_to_text():
    html = highlight_code_in_markdown("```nosuchlang\nhello\n```")
    assert "hello" in html
    assert "```" not in html


def test_highlighting_twice_is_a_no_op():
    once = highlight_code_in_markdown("```jsx\n<Button />\n```")
    assert highlight_code_in_markdown(once) == once


def test_unclosed_fence_is_left_alone():
    text = "```js\nconst x = 1;"
    assert highlight_code_in_markdown(text) == text


def test_iter_fences():
    fences = list(iter_fences("```jsx render\n<A />\n```\ntext\n```\nplain\n```"))

    assert [f.lang for f in fences] == ["jsx", ""]
    assert fences[0].header == "jsx render"
    assert fences[0].code == "<A />"
    assert fences[1].code == "plain"
