"""Tests for property type inference and normalization."""

from collections.abc import Callable

import pytest
from tree_sitter import Node

from lit_docs.member_parser import parse_property
from lit_docs.type_inference import (
    RECORD_TYPE,
    infer_type_from_initializer,
    normalize_decorator_type_name,
)


@pytest.mark.parametrize(
    ("initializer", "expected"),
    [
        ("'text'", "string"),
        ("`template`", "string"),
        ("true", "boolean"),
        ("false", "boolean"),
        ("42", "number"),
        ("-1.5", "number"),
        ("[]", "unknown[]"),
        ("{ a: 1 }", RECORD_TYPE),
        ("null", "null"),
        ("undefined", "undefined"),
        ("someCall()", None),
    ],
)
def test_infer_type_from_initializer(
    first_node: Callable[[str, str], Node], initializer: str, expected: str | None
) -> None:
    """Verify literal-based inference for each supported literal kind."""
    declarator = first_node(f"const x = {initializer};", "variable_declarator")
    value = declarator.child_by_field_name("value")
    assert infer_type_from_initializer(value) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("String", "string"),
        ("Number", "number"),
        ("Boolean", "boolean"),
        ("Array", "unknown[]"),
        ("Object", RECORD_TYPE),
        ("Date", "Date"),
        ("StringConstructor", "string"),
        ("MapConstructor", "Map"),
        ("Custom", "Custom"),
    ],
)
def test_normalize_decorator_type_name(raw: str, expected: str) -> None:
    """Verify wrapper names map to primitive labels."""
    assert normalize_decorator_type_name(raw) == expected


def _property_type(first_node: Callable[[str, str], Node], member: str) -> str:
    field = first_node(f"class A extends B {{\n  {member}\n}}", "public_field_definition")
    prop = parse_property(field)
    assert prop is not None
    return prop.type


def test_type_precedence(first_node: Callable[[str, str], Node]) -> None:
    """Verify annotation beats decorator hint, which beats the initializer."""
    assert _property_type(first_node, "@property() x = 42;") == "number"
    assert _property_type(first_node, "@property({ type: String }) x = 42;") == "string"
    assert _property_type(first_node, "@property({ type: Number }) x: string = 42;") == "string"


def test_type_fallback_and_union_annotation(first_node: Callable[[str, str], Node]) -> None:
    """Verify the `any` fallback and verbatim annotations."""
    assert _property_type(first_node, "@property() x;") == "any"
    assert _property_type(first_node, "@property() x = compute();") == "any"
    assert _property_type(first_node, "@property() mode: 'a' | 'b' = 'a';") == "'a' | 'b'"
