"""Matching of the mixin applications written in a class's `extends` clause."""

from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node

from lit_docs.syntax_tree import named_children, node_text, unwrap_expression


class NameKind(Enum):
    """Shape of an expression that may name a mixin."""

    PLAIN = "plain"
    QUALIFIED = "qualified"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ExpressionName:
    """Outcome of matching an expression against a (possibly dotted) name."""

    kind: NameKind
    text: str = ""


def expression_name(expression: Node) -> ExpressionName:
    """Match `Name`, `ns.Name` and their parenthesized or asserted forms."""
    expression = unwrap_expression(expression)
    if expression.type == "identifier":
        return ExpressionName(NameKind.PLAIN, node_text(expression))
    if expression.type == "member_expression":
        return ExpressionName(NameKind.QUALIFIED, node_text(expression))
    return ExpressionName(NameKind.UNSUPPORTED)


def collect_mixin_names(expression: Node) -> list[str]:
    """List callee and argument names of nested mixin calls, outermost first."""
    expression = unwrap_expression(expression)

    if expression.type == "call_expression":
        names = []
        callee = expression_name(expression.child_by_field_name("function"))
        if callee.kind is not NameKind.UNSUPPORTED:
            names.append(callee.text)
        arguments = expression.child_by_field_name("arguments")
        if arguments is not None and arguments.type == "arguments":
            for arg in named_children(arguments):
                names.extend(collect_mixin_names(arg))
        return names

    name = expression_name(expression)
    return [name.text] if name.kind is not NameKind.UNSUPPORTED else []


def heritage_expressions(class_node: Node) -> list[Node]:
    """Return the expressions of a class's `extends` clause."""
    for child in class_node.children:
        if child.type != "class_heritage":
            continue
        for part in named_children(child):
            if part.type == "extends_clause":
                return [c for c in named_children(part) if c.type != "type_arguments"]
    return []


def has_extends_clause(class_node: Node) -> bool:
    """Check whether a class declares a base class."""
    return bool(heritage_expressions(class_node))


def extract_mixin_names_from_class(class_node: Node) -> list[str]:
    """Return the distinct names referenced by a class's `extends` clause."""
    names: list[str] = []
    for expression in heritage_expressions(class_node):
        for name in collect_mixin_names(expression):
            if name and name not in names:
                names.append(name)
    return names
