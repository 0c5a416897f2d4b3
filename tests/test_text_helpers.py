"""Tests for attribute naming and default value formatting."""

import pytest

from lit_docs.kebab_case import kebab_case
from lit_docs.sanitize_default_value import sanitize_default_value


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("label", "label"),
        ("maxLength", "max-length"),
        ("ariaLabelledBy", "aria-labelled-by"),
        ("imageURL", "image-url"),
        ("URLValue", "url-value"),
        ("item2Count", "item2-count"),
        ("snake_case_name", "snake-case-name"),
    ],
)
def test_kebab_case(name: str, expected: str) -> None:
    """Verify camelCase to kebab-case conversion."""
    assert kebab_case(name) == expected


def test_sanitize_default_value() -> None:
    """Verify whitespace collapsing, templates and truncation."""
    assert sanitize_default_value("  'a'\n   + 'b' ") == "'a' + 'b'"
    assert sanitize_default_value("html`<p>${x}</p>`") == "(template)"
    assert sanitize_default_value("css`:host{}`") == "(template)"
    assert sanitize_default_value("x" * 50) == "x" * 50
    assert sanitize_default_value("x" * 51) == "x" * 50 + "..."
