"""Memoized, cycle-safe resolution of mixin chains into documentation fragments."""

import logging
from dataclasses import dataclass, field

from tree_sitter import Tree

from lit_docs.class_doc_parts import (
    clone_class_doc_parts,
    collect_class_doc_parts,
    doc_parts_from_jsdoc,
    merge_class_doc_parts,
)
from lit_docs.declaration_indexer import NAMESPACE, FileInfo, ImportRecord, MixinDeclaration, index_file
from lit_docs.errors import UnsupportedSourceError
from lit_docs.import_path_resolver import ImportPathResolver, normalize_path
from lit_docs.jsdoc_parser import parse_jsdoc
from lit_docs.mixin_names import extract_mixin_names_from_class
from lit_docs.models import ClassDocParts
from lit_docs.syntax_tree import parse_source

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str]


@dataclass
class MixinContext:
    """State of one top-level parse: fragment cache, cycle guard and file indexes.

    A context must not outlive the parse call that created it.
    """

    docs_cache: dict[CacheKey, ClassDocParts] = field(default_factory=dict)
    resolving_keys: set[CacheKey] = field(default_factory=set)
    file_infos: dict[str, FileInfo] = field(default_factory=dict)
    path_resolver: ImportPathResolver = field(default_factory=ImportPathResolver)


def ensure_file_info(file_path: str, context: MixinContext, tree: Tree | None = None) -> FileInfo | None:
    """Return the cached index of a file, parsing and indexing it on first use.

    Files that cannot be read or parsed yield None.
    """
    file_path = normalize_path(file_path)
    cached = context.file_infos.get(file_path)
    if cached is not None:
        return cached

    if tree is None:
        try:
            with open(file_path, "rb") as f:
                source = f.read()
            tree = parse_source(file_path, source)
        except (OSError, UnsupportedSourceError) as e:
            logger.warning("Could not index %s: %s", file_path, e)
            return None

    info = index_file(file_path, tree, context.path_resolver)
    context.file_infos[file_path] = info
    return info


def resolve_mixin_docs(name: str, context: MixinContext, file_path: str) -> ClassDocParts | None:
    """Resolve the fragment contributed by `name` as seen from `file_path`.

    Returns None when the name cannot be followed (unresolved import,
    namespace import, missing file) or when it is already being resolved.
    """
    file_path = normalize_path(file_path)
    key = (file_path, name)

    cached = context.docs_cache.get(key)
    if cached is not None:
        logger.debug("Cache hit for %s in %s", name, file_path)
        return clone_class_doc_parts(cached)

    if key in context.resolving_keys:
        logger.debug("Cycle broken at %s in %s", name, file_path)
        return None

    context.resolving_keys.add(key)
    try:
        docs = _resolve_uncached(name, context, file_path)
    finally:
        context.resolving_keys.discard(key)

    if docs is None:
        return None
    context.docs_cache[key] = clone_class_doc_parts(docs)
    return docs


def _resolve_uncached(name: str, context: MixinContext, file_path: str) -> ClassDocParts | None:
    info = ensure_file_info(file_path, context)
    if info is None:
        return None

    declaration = info.declarations.get(name)
    if declaration is not None:
        return build_docs_from_declaration(declaration, context)

    record = info.imports.get(name)
    if record is not None:
        return _follow_import(record, context)

    record = info.reexports.get(name)
    if record is not None:
        return _follow_import(record, context)

    for target in info.star_exports:
        docs = resolve_mixin_docs(name, context, target)
        if docs is not None:
            return docs

    logger.debug("No declaration or import named %s in %s", name, file_path)
    return None


def _follow_import(record: ImportRecord, context: MixinContext) -> ClassDocParts | None:
    if record.kind == NAMESPACE or record.file_path is None:
        return None
    return resolve_mixin_docs(record.export_name, context, record.file_path)


def build_docs_from_declaration(declaration: MixinDeclaration, context: MixinContext) -> ClassDocParts:
    """Collect a declaration's own facts and merge in every mixin its class extends."""
    docs = collect_class_doc_parts(declaration.class_node)

    if declaration.doc_node != declaration.class_node:
        merge_class_doc_parts(docs, doc_parts_from_jsdoc(parse_jsdoc(declaration.doc_node)))

    for mixin_name in extract_mixin_names_from_class(declaration.class_node):
        mixin_docs = resolve_mixin_docs(mixin_name, context, declaration.file_path)
        if mixin_docs is not None:
            merge_class_doc_parts(docs, mixin_docs)

    return docs
