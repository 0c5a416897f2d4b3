"""Shared fixtures for parsing TypeScript snippets in tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Node

from lit_docs.syntax_tree import parse_source

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def find_nodes(root: Node, node_type: str) -> list[Node]:
    """Return every descendant of the given type in pre-order."""
    found = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == node_type:
            found.append(node)
        stack.extend(reversed(node.children))
    return found


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the TypeScript fixture sources."""
    return FIXTURES_DIR


@pytest.fixture
def parse_ts() -> Callable[[str], Node]:
    """Parse a TypeScript snippet and return its root node."""

    def _parse(source: str) -> Node:
        return parse_source("snippet.ts", source.encode("utf-8")).root_node

    return _parse


@pytest.fixture
def first_node(parse_ts: Callable[[str], Node]) -> Callable[[str, str], Node]:
    """Parse a snippet and return the first node of a given type."""

    def _first(source: str, node_type: str) -> Node:
        nodes = find_nodes(parse_ts(source), node_type)
        assert nodes, f"no {node_type} in snippet"
        return nodes[0]

    return _first
