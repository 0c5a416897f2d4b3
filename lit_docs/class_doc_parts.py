"""Building, copying and merging documentation fragments."""

import copy

from tree_sitter import Node

from lit_docs.event_extractor import extract_events
from lit_docs.jsdoc_parser import JSDocInfo, parse_jsdoc
from lit_docs.member_parser import parse_method, parse_property
from lit_docs.models import ClassDocParts
from lit_docs.syntax_tree import named_children

FIELD_TYPES = {"public_field_definition", "field_definition"}


def doc_parts_from_jsdoc(jsdoc: JSDocInfo) -> ClassDocParts:
    """Create a fragment holding only the class-level facts of a comment."""
    return ClassDocParts(
        description=jsdoc.description,
        usage=list(jsdoc.usage),
        dependencies=list(jsdoc.dependencies),
        slots=copy.deepcopy(jsdoc.slots),
        css_properties=copy.deepcopy(jsdoc.css_properties),
        css_parts=copy.deepcopy(jsdoc.css_parts),
    )


def collect_class_doc_parts(class_node: Node) -> ClassDocParts:
    """Extract a class's own comment facts, members and dispatched events."""
    docs = doc_parts_from_jsdoc(parse_jsdoc(class_node))

    body = class_node.child_by_field_name("body")
    if body is not None:
        for member in named_children(body):
            if member.type in FIELD_TYPES:
                prop = parse_property(member)
                if prop is not None:
                    docs.properties.append(prop)
            elif member.type == "method_definition":
                method = parse_method(member)
                if method is not None:
                    docs.methods.append(method)

    docs.events.extend(extract_events(class_node))
    return docs


def clone_class_doc_parts(source: ClassDocParts) -> ClassDocParts:
    """Return an independent deep copy of a fragment."""
    return copy.deepcopy(source)


def merge_class_doc_parts(target: ClassDocParts, source: ClassDocParts) -> None:
    """Merge `source` into `target` in place.

    The target keeps its description and wins every name collision.
    """
    if not target.description and source.description:
        target.description = source.description

    for example in source.usage:
        if example not in target.usage:
            target.usage.append(example)

    for dependency in source.dependencies:
        if dependency not in target.dependencies:
            target.dependencies.append(dependency)

    _merge_named(target.slots, source.slots)
    _merge_named(target.css_properties, source.css_properties)
    _merge_named(target.css_parts, source.css_parts)
    _merge_named(target.properties, source.properties)
    _merge_named(target.events, source.events)
    _merge_named(target.methods, source.methods)


def _merge_named(target: list, source: list) -> None:
    names = {item.name for item in target}
    for item in source:
        if item.name not in names:
            target.append(copy.deepcopy(item))
            names.add(item.name)
