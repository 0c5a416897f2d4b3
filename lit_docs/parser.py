"""Entry point: parse one component file into a fully resolved documentation record."""

import logging

from tree_sitter import Node

from lit_docs.class_doc_parts import collect_class_doc_parts, merge_class_doc_parts
from lit_docs.decorator_parser import extract_custom_element_tag
from lit_docs.import_path_resolver import normalize_path
from lit_docs.mixin_names import extract_mixin_names_from_class, has_extends_clause
from lit_docs.mixin_resolver import MixinContext, ensure_file_info, resolve_mixin_docs
from lit_docs.models import ComponentDocs
from lit_docs.syntax_tree import named_children, node_text, parse_source

logger = logging.getLogger(__name__)

CLASS_DECLARATION_TYPES = {"class_declaration", "abstract_class_declaration"}


def find_component_class(root: Node) -> tuple[Node, str] | None:
    """Return the first top-level class with a `@customElement` tag and a base class."""
    for statement in named_children(root):
        node = statement
        if statement.type == "export_statement":
            node = statement.child_by_field_name("declaration")
            if node is None:
                continue
        if node.type not in CLASS_DECLARATION_TYPES:
            continue

        tag = extract_custom_element_tag(node)
        if tag and has_extends_clause(node):
            return node, tag
        if has_extends_clause(node) and not tag:
            logger.warning(
                "Class %s at line %d has no @customElement decorator",
                node_text(node.child_by_field_name("name")),
                node.start_point[0] + 1,
            )
    return None


def parse_lit_component(file_path: str) -> ComponentDocs | None:
    """Extract the documentation of the component declared in `file_path`.

    Returns None when the file is unreadable or declares no registered
    component. Raises UnsupportedSourceError for extensions with no grammar.
    """
    file_path = normalize_path(file_path)
    try:
        with open(file_path, "rb") as f:
            source = f.read()
    except OSError as e:
        logger.warning("Could not read %s: %s", file_path, e)
        return None

    tree = parse_source(file_path, source)
    found = find_component_class(tree.root_node)
    if found is None:
        logger.info("No Lit component found in %s", file_path)
        return None
    class_node, tag_name = found

    context = MixinContext()
    ensure_file_info(file_path, context, tree)

    docs = collect_class_doc_parts(class_node)
    for mixin_name in extract_mixin_names_from_class(class_node):
        mixin_docs = resolve_mixin_docs(mixin_name, context, file_path)
        if mixin_docs is None:
            continue
        # Only methods declared on the component itself are documented.
        mixin_docs.methods = []
        merge_class_doc_parts(docs, mixin_docs)

    return ComponentDocs(
        **vars(docs),
        class_name=node_text(class_node.child_by_field_name("name")),
        tag_name=tag_name,
        file_path=file_path,
    )
