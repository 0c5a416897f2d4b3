"""Decorator parsing utilities for Lit components."""

from dataclasses import dataclass

from tree_sitter import Node

from lit_docs.syntax_tree import named_children, node_text, string_value
from lit_docs.type_inference import type_from_decorator_expression

REGISTRATION_DECORATOR = "customElement"
PROPERTY_DECORATOR = "property"
STATE_DECORATORS = {"state", "internalProperty"}


@dataclass
class PropertyDecoratorInfo:
    """Options read from a `@property()` or `@state()` decorator."""

    attribute: str | None = None
    attribute_disabled: bool = False
    reflects: bool = False
    state: bool = False
    type: str | None = None


def decorators_of(node: Node) -> list[Node]:
    """Return every decorator applied to a class or class member, in source order.

    Covers decorators nested in the node, decorators written as preceding
    siblings (methods in a class body) and decorators placed before `export`.
    """
    leading: list[Node] = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "decorator":
        leading.insert(0, sibling)
        sibling = sibling.prev_sibling

    if node.parent is not None and node.parent.type == "export_statement":
        leading = [c for c in node.parent.children if c.type == "decorator"] + leading

    own = [c for c in node.children if c.type == "decorator"]
    return leading + own


def decorator_call(decorator: Node) -> tuple[str, list[Node]]:
    """Split a decorator into its bare name and call arguments."""
    inner = named_children(decorator)
    if not inner:
        return "", []

    expression = inner[0]
    if expression.type == "call_expression":
        name = node_text(expression.child_by_field_name("function"))
        arguments = expression.child_by_field_name("arguments")
        args = named_children(arguments) if arguments is not None and arguments.type == "arguments" else []
        return name.rsplit(".", 1)[-1], args

    return node_text(expression).rsplit(".", 1)[-1], []


def object_pairs(node: Node) -> list[tuple[str, Node]]:
    """Return `(key, value)` pairs of an object literal, ignoring spreads and methods."""
    pairs = []
    for child in named_children(node):
        if child.type != "pair":
            continue
        key_node = child.child_by_field_name("key")
        value = child.child_by_field_name("value")
        if key_node is None or value is None:
            continue
        key = string_value(key_node)
        pairs.append((key if key is not None else node_text(key_node), value))
    return pairs


def extract_custom_element_tag(node: Node) -> str | None:
    """Return the tag registered through `@customElement('tag')`, if present."""
    for decorator in decorators_of(node):
        name, args = decorator_call(decorator)
        if name != REGISTRATION_DECORATOR or not args:
            continue
        tag = string_value(args[0])
        if tag:
            return tag
    return None


def extract_property_decorator(node: Node) -> PropertyDecoratorInfo | None:
    """Return property decorator options, or None if the member is not reactive."""
    for decorator in decorators_of(node):
        name, args = decorator_call(decorator)

        if name in STATE_DECORATORS:
            return PropertyDecoratorInfo(state=True)

        if name != PROPERTY_DECORATOR:
            continue

        info = PropertyDecoratorInfo()
        if args and args[0].type == "object":
            for key, value in object_pairs(args[0]):
                if key == "attribute":
                    attribute = string_value(value)
                    if attribute is not None:
                        info.attribute = attribute
                    elif value.type == "false":
                        info.attribute_disabled = True
                elif key == "reflect":
                    info.reflects = value.type == "true"
                elif key == "type":
                    info.type = type_from_decorator_expression(value)
        return info

    return None
