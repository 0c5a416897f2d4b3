"""Type inference and normalization for documented properties."""

import re

from tree_sitter import Node

from lit_docs.syntax_tree import (
    TRANSPARENT_WRAPPERS,
    named_children,
    node_text,
    string_value,
    unwrap_expression,
)

RECORD_TYPE = "Record<string, unknown>"
FALLBACK_TYPE = "any"

DECORATOR_TYPE_NAMES = {
    "String": "string",
    "Number": "number",
    "Boolean": "boolean",
    "Array": "unknown[]",
    "Object": RECORD_TYPE,
    "Date": "Date",
}


def annotation_text(annotation: Node | None) -> str | None:
    """Return the type written in a `: Type` annotation, without the colon."""
    if annotation is None:
        return None
    inner = named_children(annotation)
    if inner:
        return node_text(inner[0]).strip()
    return node_text(annotation).lstrip(":").strip() or None


def normalize_decorator_type_name(raw: str) -> str | None:
    """Map constructor names such as `String` to their primitive labels."""
    cleaned = re.sub(r"Constructor$", "", raw).strip()
    if cleaned in DECORATOR_TYPE_NAMES:
        return DECORATOR_TYPE_NAMES[cleaned]
    return cleaned or None


def type_from_decorator_expression(expression: Node) -> str | None:
    """Read the `type:` option of a property decorator as a type label."""
    if expression.type in TRANSPARENT_WRAPPERS:
        return type_from_decorator_expression(unwrap_expression(expression))

    if expression.type in {"identifier", "member_expression"}:
        return normalize_decorator_type_name(node_text(expression))

    literal = string_value(expression)
    if literal is not None:
        return normalize_decorator_type_name(literal)

    if expression.type == "call_expression":
        return normalize_decorator_type_name(
            node_text(expression.child_by_field_name("function"))
        )

    return normalize_decorator_type_name(node_text(expression))


def infer_type_from_initializer(initializer: Node) -> str | None:
    """Infer a type label from a literal initializer."""
    kind = initializer.type

    if kind in {"string", "template_string"}:
        return "string"
    if kind in {"true", "false"}:
        return "boolean"
    if kind == "number":
        return "number"
    if kind == "unary_expression":
        operator = node_text(initializer.child_by_field_name("operator"))
        argument = initializer.child_by_field_name("argument")
        if operator in {"-", "+"} and argument is not None and argument.type == "number":
            return "number"
        return None
    if kind == "array":
        return "unknown[]"
    if kind == "object":
        return RECORD_TYPE
    if kind == "null":
        return "null"
    if kind == "undefined" or (kind == "identifier" and node_text(initializer) == "undefined"):
        return "undefined"

    return None


def resolve_property_type(
    annotation: Node | None,
    decorator_type: str | None,
    initializer: Node | None,
) -> str:
    """Pick a property type: annotation, then decorator hint, then literal, then `any`."""
    explicit = annotation_text(annotation)
    if explicit:
        return explicit
    if decorator_type:
        return decorator_type
    if initializer is not None:
        inferred = infer_type_from_initializer(initializer)
        if inferred:
            return inferred
    return FALLBACK_TYPE
