"""Per-file index of class-like declarations, mixin functions and imports."""

import logging
from dataclasses import dataclass, field

from tree_sitter import Node, Tree

from lit_docs.import_path_resolver import ImportPathResolver
from lit_docs.mixin_names import has_extends_clause
from lit_docs.syntax_tree import has_token, named_children, node_text, string_value, unwrap_expression

logger = logging.getLogger(__name__)

CLASS_TYPES = {"class", "class_declaration", "abstract_class_declaration"}
FUNCTION_TYPES = {"arrow_function", "function_expression", "function", "generator_function"}
FUNCTION_DECLARATION_TYPES = {"function_declaration", "generator_function_declaration"}
VARIABLE_TYPES = {"lexical_declaration", "variable_declaration"}
# Nested scopes whose return statements belong to someone else.
SCOPE_BOUNDARIES = FUNCTION_TYPES | FUNCTION_DECLARATION_TYPES | {"method_definition"}

NAMED = "named"
DEFAULT = "default"
NAMESPACE = "namespace"


@dataclass
class MixinDeclaration:
    """A resolvable declaration: the node holding members and the node holding the comment."""

    class_node: Node
    doc_node: Node
    file_path: str


@dataclass
class ImportRecord:
    """A locally bound import name and where its value comes from."""

    file_path: str | None
    export_name: str
    kind: str = NAMED
    specifier: str = ""


@dataclass
class FileInfo:
    """Index of one parsed source file."""

    file_path: str
    tree: Tree
    declarations: dict[str, MixinDeclaration] = field(default_factory=dict)
    imports: dict[str, ImportRecord] = field(default_factory=dict)
    reexports: dict[str, ImportRecord] = field(default_factory=dict)
    star_exports: list[str] = field(default_factory=list)


def index_file(file_path: str, tree: Tree, resolver: ImportPathResolver) -> FileInfo:
    """Scan the top-level statements of a parsed file."""
    info = FileInfo(file_path=file_path, tree=tree)
    default_alias = None

    for statement in named_children(tree.root_node):
        if statement.type == "import_statement":
            _index_import(statement, info, resolver)
            continue

        if statement.type != "export_statement":
            _index_declaration(statement, info)
            continue

        if statement.child_by_field_name("source") is not None:
            _index_reexport(statement, info, resolver)
            continue

        declaration = statement.child_by_field_name("declaration")
        if declaration is not None:
            for name in _index_declaration(declaration, info):
                if has_token(statement, "default"):
                    info.declarations[DEFAULT] = info.declarations[name]
            continue

        value = statement.child_by_field_name("value")
        if value is not None and has_token(statement, "default"):
            default_alias = _index_default_value(statement, value, info)
            continue

        for clause in named_children(statement):
            if clause.type == "export_clause":
                _index_local_export_clause(clause, info)

    if default_alias and default_alias in info.declarations:
        info.declarations[DEFAULT] = info.declarations[default_alias]

    logger.debug(
        "Indexed %s: %d declarations, %d imports",
        file_path,
        len(info.declarations),
        len(info.imports),
    )
    return info


def _index_declaration(node: Node, info: FileInfo) -> list[str]:
    """Index one top-level declaration; return the names it bound."""
    if node.type in {"class_declaration", "abstract_class_declaration"}:
        name = node_text(node.child_by_field_name("name"))
        if not name:
            return []
        info.declarations[name] = MixinDeclaration(node, node, info.file_path)
        return [name]

    if node.type in FUNCTION_DECLARATION_TYPES:
        name = node_text(node.child_by_field_name("name"))
        class_node = find_returned_class(node)
        if not name or class_node is None:
            return []
        info.declarations[name] = MixinDeclaration(class_node, node, info.file_path)
        return [name]

    if node.type in VARIABLE_TYPES:
        names = []
        for declarator in named_children(node):
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            value = declarator.child_by_field_name("value")
            if name_node is None or name_node.type != "identifier" or value is None:
                continue
            class_node = _class_of_value(value)
            if class_node is None:
                continue
            name = node_text(name_node)
            info.declarations[name] = MixinDeclaration(class_node, declarator, info.file_path)
            names.append(name)
        return names

    return []


def _class_of_value(value: Node) -> Node | None:
    value = unwrap_expression(value)
    if value.type in CLASS_TYPES:
        return value
    if value.type in FUNCTION_TYPES:
        return find_returned_class(value)
    return None


def _index_default_value(statement: Node, value: Node, info: FileInfo) -> str | None:
    """Index `export default <expr>`; return an aliased local name if any.

    The export statement is recorded as the doc node.
    """
    value = unwrap_expression(value)
    if value.type == "identifier":
        return node_text(value)
    class_node = _class_of_value(value)
    if class_node is not None:
        info.declarations[DEFAULT] = MixinDeclaration(class_node, statement, info.file_path)
    return None


def _index_local_export_clause(clause: Node, info: FileInfo) -> None:
    """Register `export { local as exported }` aliases of local declarations."""
    for specifier in named_children(clause):
        if specifier.type != "export_specifier":
            continue
        local = _module_name(specifier.child_by_field_name("name"))
        alias = _module_name(specifier.child_by_field_name("alias"))
        if alias and local in info.declarations:
            info.declarations[alias] = info.declarations[local]
        elif alias and local in info.imports:
            info.reexports[alias] = info.imports[local]


def find_returned_class(function: Node) -> Node | None:
    """Find the class a mixin function returns.

    Return statements are matched first, as class expressions or as names of
    classes declared in the body. Otherwise a class with an `extends` clause
    is preferred, then the first class found.
    """
    body = function.child_by_field_name("body")
    if body is None:
        return None

    body = unwrap_expression(body)
    if body.type in CLASS_TYPES:
        return body
    if body.type != "statement_block":
        return None

    classes: list[tuple[str, Node]] = []
    returns: list[Node] = []
    stack = list(reversed(named_children(body)))
    while stack:
        node = stack.pop()
        if node.type in CLASS_TYPES:
            classes.append((_class_binding_name(node), node))
            continue
        if node.type in SCOPE_BOUNDARIES:
            continue
        if node.type == "return_statement":
            returns.append(node)
        stack.extend(reversed(named_children(node)))

    for statement in returns:
        values = named_children(statement)
        if not values:
            continue
        returned = unwrap_expression(values[0])
        if returned.type in CLASS_TYPES:
            return returned
        if returned.type == "identifier":
            wanted = node_text(returned)
            for name, class_node in classes:
                if name == wanted:
                    return class_node

    for _, class_node in classes:
        if has_extends_clause(class_node):
            return class_node
    return classes[0][1] if classes else None


def _class_binding_name(class_node: Node) -> str:
    """Return the name a class is reachable by inside its enclosing body."""
    parent = class_node.parent
    while parent is not None and parent.type in {"parenthesized_expression", "as_expression"}:
        parent = parent.parent
    if parent is not None and parent.type == "variable_declarator":
        return node_text(parent.child_by_field_name("name"))
    return node_text(class_node.child_by_field_name("name"))


def _module_name(node: Node | None) -> str:
    if node is None:
        return ""
    literal = string_value(node)
    return literal if literal is not None else node_text(node)


def _index_import(statement: Node, info: FileInfo, resolver: ImportPathResolver) -> None:
    specifier = string_value(statement.child_by_field_name("source")) or ""
    clause = next((c for c in named_children(statement) if c.type == "import_clause"), None)
    if clause is None:
        return

    target = resolver.resolve(specifier, info.file_path)
    if target is None:
        logger.debug("Import %r in %s is not followed", specifier, info.file_path)

    for part in named_children(clause):
        if part.type == "identifier":
            info.imports[node_text(part)] = ImportRecord(target, DEFAULT, DEFAULT, specifier)
        elif part.type == "namespace_import":
            local = next((c for c in named_children(part) if c.type == "identifier"), None)
            if local is not None:
                info.imports[node_text(local)] = ImportRecord(target, "*", NAMESPACE, specifier)
        elif part.type == "named_imports":
            for item in named_children(part):
                if item.type != "import_specifier":
                    continue
                name = _module_name(item.child_by_field_name("name"))
                alias = _module_name(item.child_by_field_name("alias")) or name
                if name:
                    info.imports[alias] = ImportRecord(target, name, NAMED, specifier)


def _index_reexport(statement: Node, info: FileInfo, resolver: ImportPathResolver) -> None:
    specifier = string_value(statement.child_by_field_name("source")) or ""
    target = resolver.resolve(specifier, info.file_path)

    clauses = [c for c in named_children(statement) if c.type in {"export_clause", "namespace_export"}]
    if not clauses:
        # export * from '...'
        if target is not None and target not in info.star_exports:
            info.star_exports.append(target)
        return

    for clause in clauses:
        if clause.type == "namespace_export":
            names = [c for c in named_children(clause) if c.type in {"identifier", "string"}]
            if names:
                info.reexports[_module_name(names[0])] = ImportRecord(target, "*", NAMESPACE, specifier)
            continue
        for item in named_children(clause):
            if item.type != "export_specifier":
                continue
            name = _module_name(item.child_by_field_name("name"))
            alias = _module_name(item.child_by_field_name("alias")) or name
            if name:
                kind = DEFAULT if name == DEFAULT else NAMED
                info.reexports[alias] = ImportRecord(target, name, kind, specifier)
