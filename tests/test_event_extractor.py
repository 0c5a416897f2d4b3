"""Tests for dispatched event extraction."""

from collections.abc import Callable

from tree_sitter import Node

from lit_docs.event_extractor import extract_events
from lit_docs.models import EventDocs

SOURCE = """
class A extends B {
  notify() {
    this.dispatchEvent(new CustomEvent<{ id: string }>('item-selected', {
      bubbles: true,
      composed: false,
      cancelable: isCancelable,
    }));
  }

  handle() {
    const fire = () => {
      if (ok) {
        this.dispatchEvent(new Event('nested-fired'));
      }
    };
    fire();
    this.dispatchEvent(new CustomEvent('item-selected', { bubbles: false }));
    this.dispatchEvent(new CustomEvent(dynamicName));
    this.dispatchEvent(existingEvent);
    other.addEventListener('click', fire);
  }
}
"""


def test_extract_events(first_node: Callable[[str, str], Node]) -> None:
    """Verify names, flags, detail types and first-occurrence dedup."""
    events = extract_events(first_node(SOURCE, "class_declaration"))

    assert events == [
        EventDocs(name="item-selected", detail="{ id: string }", bubbles=True, composed=False),
        EventDocs(name="nested-fired"),
    ]


def test_class_without_events(first_node: Callable[[str, str], Node]) -> None:
    """Verify that a class dispatching nothing has no events."""
    assert extract_events(first_node("class A { render() { return 1; } }", "class_declaration")) == []
