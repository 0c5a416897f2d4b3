"""Extraction of property and method facts from class members."""

from tree_sitter import Node

from lit_docs.decorator_parser import extract_property_decorator
from lit_docs.jsdoc_parser import parse_jsdoc
from lit_docs.kebab_case import kebab_case
from lit_docs.models import MethodDocs, ParameterDocs, PropertyDocs, ReturnDocs
from lit_docs.sanitize_default_value import sanitize_default_value
from lit_docs.syntax_tree import has_token, named_children, node_text, string_value
from lit_docs.type_inference import annotation_text, resolve_property_type

LIFECYCLE_METHODS = frozenset(
    {
        "connectedCallback",
        "disconnectedCallback",
        "attributeChangedCallback",
        "adoptedCallback",
        "render",
        "update",
        "updated",
        "firstUpdated",
        "willUpdate",
        "shouldUpdate",
        "createRenderRoot",
        "performUpdate",
    }
)


def is_lifecycle_method(name: str) -> bool:
    """Check if a method name is a Lit or custom element lifecycle hook."""
    return name in LIFECYCLE_METHODS


def _member_name(node: Node) -> tuple[str, bool] | None:
    """Return the member name and whether it is an ECMAScript `#private` name."""
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None
    if name_node.type == "private_property_identifier":
        return node_text(name_node), True
    literal = string_value(name_node)
    return (literal if literal is not None else node_text(name_node)), False


def _is_private(node: Node) -> bool:
    return any(
        child.type == "accessibility_modifier" and node_text(child) == "private"
        for child in node.children
    )


def _is_static(node: Node) -> bool:
    return has_token(node, "static")


def parse_property(node: Node) -> PropertyDocs | None:
    """Build a property fact from a decorated field declaration."""
    member = _member_name(node)
    if member is None:
        return None
    name, hash_private = member
    if hash_private or _is_private(node) or _is_static(node):
        return None

    decorator = extract_property_decorator(node)
    if decorator is None:
        return None

    jsdoc = parse_jsdoc(node)
    initializer = node.child_by_field_name("value")
    default = sanitize_default_value(node_text(initializer)) if initializer is not None else None

    if decorator.state or decorator.attribute_disabled:
        attribute = None
    else:
        attribute = decorator.attribute or kebab_case(name)

    return PropertyDocs(
        name=name,
        type=resolve_property_type(node.child_by_field_name("type"), decorator.type, initializer),
        attribute=attribute,
        description=jsdoc.description,
        default=default,
        reflects=decorator.reflects,
        state=decorator.state,
        required=jsdoc.required,
        deprecated=jsdoc.deprecated,
    )


def parse_method(node: Node) -> MethodDocs | None:
    """Build a method fact from a method definition, skipping non-public API."""
    member = _member_name(node)
    if member is None:
        return None
    name, hash_private = member
    if (
        hash_private
        or _is_private(node)
        or name.startswith("_")
        or name == "constructor"
        or is_lifecycle_method(name)
        or has_token(node, "get")
        or has_token(node, "set")
    ):
        return None

    jsdoc = parse_jsdoc(node)

    parameters = []
    formal = node.child_by_field_name("parameters")
    if formal is not None:
        for param in named_children(formal):
            parsed = _parse_parameter(param, jsdoc.params)
            if parsed is not None:
                parameters.append(parsed)

    returns = None
    return_type = annotation_text(node.child_by_field_name("return_type"))
    if return_type:
        returns = ReturnDocs(type=return_type, description=jsdoc.returns)

    return MethodDocs(
        name=name,
        description=jsdoc.description,
        parameters=parameters,
        returns=returns,
        is_async=has_token(node, "async"),
        deprecated=jsdoc.deprecated,
    )


def _parse_parameter(param: Node, descriptions: dict[str, str]) -> ParameterDocs | None:
    if param.type not in {"required_parameter", "optional_parameter"}:
        return None

    pattern = param.child_by_field_name("pattern")
    if pattern is None or pattern.type == "this":
        return None
    if pattern.type == "rest_pattern":
        inner = named_children(pattern)
        name = node_text(inner[0]) if inner else node_text(pattern).lstrip(".")
    else:
        name = node_text(pattern)

    value = param.child_by_field_name("value")
    return ParameterDocs(
        name=name,
        type=annotation_text(param.child_by_field_name("type")) or "any",
        description=descriptions.get(name) or None,
        optional=param.type == "optional_parameter" or value is not None,
        default=node_text(value) if value is not None else None,
    )
