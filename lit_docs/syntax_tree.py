"""Tree-sitter parsing helpers for TypeScript and JavaScript sources."""

from functools import lru_cache
from pathlib import PurePath

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from lit_docs.errors import UnsupportedSourceError

TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts", ".js", ".mjs", ".cjs"}
TSX_SUFFIXES = {".tsx", ".jsx"}

# Expression wrappers that never change which value an expression denotes.
TRANSPARENT_WRAPPERS = {
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "type_assertion",
    "non_null_expression",
}


@lru_cache(maxsize=None)
def _language(dialect: str) -> Language:
    if dialect == "tsx":
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


def dialect_for(path: str) -> str | None:
    """Return the grammar dialect used for a file, or None if unsupported."""
    suffix = PurePath(path).suffix.lower()
    if suffix in TSX_SUFFIXES:
        return "tsx"
    if suffix in TYPESCRIPT_SUFFIXES:
        return "typescript"
    return None


def parse_source(path: str, source: bytes) -> Tree:
    """Parse source bytes with the grammar matching the file extension."""
    dialect = dialect_for(path)
    if dialect is None:
        raise UnsupportedSourceError(path)
    parser = Parser(_language(dialect))
    return parser.parse(source)


def node_text(node: Node | None) -> str:
    """Return the source text covered by a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def named_children(node: Node) -> list[Node]:
    """Return the named children of a node, skipping comments."""
    return [child for child in node.named_children if child.type != "comment"]


def string_value(node: Node | None) -> str | None:
    """Return the value of a string literal without its quotes."""
    if node is None:
        return None
    if node.type == "string":
        return node_text(node)[1:-1]
    if node.type == "template_string" and not any(
        child.type == "template_substitution" for child in node.named_children
    ):
        return node_text(node)[1:-1]
    return None


def unwrap_expression(node: Node) -> Node:
    """Strip parentheses, type assertions and non-null markers from an expression."""
    while node.type in TRANSPARENT_WRAPPERS:
        inner = named_children(node)
        if not inner:
            break
        # `<T>expr` keeps the expression last; every other wrapper keeps it first.
        node = inner[-1] if node.type == "type_assertion" else inner[0]
    return node


def has_token(node: Node, token: str) -> bool:
    """Check whether an anonymous keyword token is a direct child of a node."""
    return any(not child.is_named and child.type == token for child in node.children)
