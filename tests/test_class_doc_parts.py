"""Tests for building and merging documentation fragments."""

from collections.abc import Callable

from tree_sitter import Node

from lit_docs.class_doc_parts import clone_class_doc_parts, collect_class_doc_parts, merge_class_doc_parts
from lit_docs.models import ClassDocParts, MethodDocs, ParameterDocs, PropertyDocs, SlotDocs


def test_merge_description_fills_only_when_empty() -> None:
    """Verify that the target keeps its own description."""
    target = ClassDocParts(description="Outer")
    merge_class_doc_parts(target, ClassDocParts(description="Inner"))
    assert target.description == "Outer"

    empty = ClassDocParts()
    merge_class_doc_parts(empty, ClassDocParts(description="Inner"))
    assert empty.description == "Inner"


def test_merge_deduplicates_values_and_names() -> None:
    """Verify exact-value dedup for lists and name dedup for collections."""
    target = ClassDocParts(
        usage=["<a-b></a-b>"],
        dependencies=["x-icon"],
        slots=[SlotDocs(name="", description="Target default")],
        properties=[PropertyDocs(name="open", type="boolean")],
    )
    source = ClassDocParts(
        usage=["<a-b></a-b>", "<a-b open></a-b>"],
        dependencies=["x-icon", "x-spinner"],
        slots=[SlotDocs(name="", description="Source default"), SlotDocs(name="footer")],
        properties=[PropertyDocs(name="open", type="string"), PropertyDocs(name="size")],
    )

    merge_class_doc_parts(target, source)

    assert target.usage == ["<a-b></a-b>", "<a-b open></a-b>"]
    assert target.dependencies == ["x-icon", "x-spinner"]
    assert [s.description for s in target.slots] == ["Target default", None]
    assert [(p.name, p.type) for p in target.properties] == [("open", "boolean"), ("size", "any")]


def test_merge_copies_method_records() -> None:
    """Verify that merged methods do not share parameter records with the source."""
    source = ClassDocParts(
        methods=[MethodDocs(name="load", parameters=[ParameterDocs(name="url", type="string")])]
    )
    target = ClassDocParts()
    merge_class_doc_parts(target, source)

    target.methods[0].parameters[0].type = "URL"
    assert source.methods[0].parameters[0].type == "string"


def test_merge_never_introduces_duplicates_into_clean_target() -> None:
    """Verify that a source with duplicate names contributes each name once."""
    source = ClassDocParts(slots=[SlotDocs(name="a"), SlotDocs(name="a", description="again")])
    target = ClassDocParts()
    merge_class_doc_parts(target, source)
    assert target.slots == [SlotDocs(name="a")]


def test_clone_is_independent() -> None:
    """Verify that clones share no mutable state."""
    original = ClassDocParts(properties=[PropertyDocs(name="x")])
    copy = clone_class_doc_parts(original)
    copy.properties.append(PropertyDocs(name="y"))
    copy.properties[0].type = "string"
    assert [p.name for p in original.properties] == ["x"]
    assert original.properties[0].type == "any"


def test_collect_class_doc_parts(first_node: Callable[[str, str], Node]) -> None:
    """Verify that a class contributes comment facts, members and events."""
    source = """
/**
 * A panel.
 * @slot header - Heading
 */
class Panel extends LitElement {
  /** Expanded state. */
  @property({ type: Boolean }) expanded = false;

  /** Toggles the panel. */
  toggle() {
    this.dispatchEvent(new Event('toggled'));
  }
}
"""
    docs = collect_class_doc_parts(first_node(source, "class_declaration"))
    assert docs.description == "A panel."
    assert docs.slots == [SlotDocs(name="header", description="Heading")]
    assert [p.name for p in docs.properties] == ["expanded"]
    assert [m.name for m in docs.methods] == ["toggle"]
    assert [e.name for e in docs.events] == ["toggled"]
