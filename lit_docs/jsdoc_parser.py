"""Parsing of JSDoc comments attached to syntax nodes."""

import re
import textwrap
from dataclasses import dataclass, field

from tree_sitter import Node

from lit_docs.models import CssPartDocs, CssPropertyDocs, SlotDocs
from lit_docs.syntax_tree import node_text

# Declarations whose comment sits before an enclosing `export` / `const` statement.
CLIMBING_TYPES = {
    "class_declaration",
    "abstract_class_declaration",
    "function_declaration",
    "generator_function_declaration",
    "variable_declarator",
    "lexical_declaration",
    "variable_declaration",
}
DOC_WRAPPERS = {
    "export_statement",
    "lexical_declaration",
    "variable_declaration",
    "variable_declarator",
}

TAG_LINE_RE = re.compile(r"^@(\w+)\s?(.*)$")
PARAM_TAG_RE = re.compile(r"^(?:\{[^}]*\}\s*)?(\[[^\]]*\]|\S+)\s*(?:-\s*)?(.*)$", re.DOTALL)
TYPE_PREFIX_RE = re.compile(r"^\{[^}]*\}\s*")
SLOT_TAG_RE = re.compile(r"(\S+)?\s*-?\s*(.+)?")
CSS_PROP_TAG_RE = re.compile(r"(--[\w-]+)\s*-?\s*(.+)?")
CSS_PART_TAG_RE = re.compile(r"(\S+)\s*-?\s*(.+)?")
DEFAULT_SUFFIX_RE = re.compile(r"\[default:\s*(.+?)\]$")
DEFAULT_STRIP_RE = re.compile(r"\s*\[default:.+\]$")
# Tags that end an `@example` block; other `@name` lines (event bindings) stay in it.
KNOWN_TAGS = {
    "example",
    "slot",
    "cssprop",
    "cssproperty",
    "part",
    "csspart",
    "dependency",
    "deprecated",
    "required",
    "param",
    "returns",
    "return",
    "fires",
    "event",
    "see",
    "since",
    "summary",
    "tag",
    "tagname",
    "element",
}


@dataclass
class JSDocInfo:
    """Facts read from a single JSDoc comment."""

    description: str | None = None
    params: dict[str, str] = field(default_factory=dict)
    returns: str | None = None
    required: bool = False
    deprecated: bool | str | None = None
    slots: list[SlotDocs] = field(default_factory=list)
    css_properties: list[CssPropertyDocs] = field(default_factory=list)
    css_parts: list[CssPartDocs] = field(default_factory=list)
    usage: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)


def find_jsdoc_comment(node: Node) -> Node | None:
    """Return the `/** ... */` comment leading a node, if any.

    Decorators and plain comments between the JSDoc block and the node are
    skipped; any other sibling ends the search.
    """
    anchor = node
    if node.type in CLIMBING_TYPES:
        while anchor.parent is not None and anchor.parent.type in DOC_WRAPPERS:
            anchor = anchor.parent

    sibling = anchor.prev_sibling
    while sibling is not None:
        if sibling.type == "decorator":
            sibling = sibling.prev_sibling
            continue
        if sibling.type == "comment":
            if node_text(sibling).startswith("/**"):
                return sibling
            sibling = sibling.prev_sibling
            continue
        break
    return None


def parse_jsdoc(node: Node) -> JSDocInfo:
    """Parse the JSDoc comment leading a node into description and tags."""
    comment = find_jsdoc_comment(node)
    if comment is None:
        return JSDocInfo()
    return parse_jsdoc_text(node_text(comment))


def parse_jsdoc_text(raw: str) -> JSDocInfo:
    """Parse raw `/** ... */` comment text."""
    info = JSDocInfo()
    description_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []

    for line in _comment_lines(raw):
        match = TAG_LINE_RE.match(line.lstrip())
        in_example = bool(tags) and tags[-1][0] == "example"
        if match and not (in_example and match.group(1) not in KNOWN_TAGS):
            tags.append((match.group(1), [match.group(2)]))
        elif tags:
            tags[-1][1].append(line)
        else:
            description_lines.append(line)

    description = "\n".join(description_lines).strip()
    info.description = description or None

    for tag_name, lines in tags:
        if tag_name == "example":
            example = textwrap.dedent("\n".join(lines)).strip()
            if example:
                info.usage.append(example)
            continue
        _apply_tag(info, tag_name, " ".join(part.strip() for part in lines if part.strip()))

    return info


def _apply_tag(info: JSDocInfo, tag_name: str, text: str) -> None:
    if tag_name == "param":
        match = PARAM_TAG_RE.match(text)
        if match:
            name = match.group(1)
            if name.startswith("["):
                name = name[1:-1].split("=", 1)[0].strip()
            info.params[name] = match.group(2).strip()
    elif tag_name in {"returns", "return"}:
        info.returns = _strip_dash(TYPE_PREFIX_RE.sub("", text))
    elif tag_name == "required":
        info.required = True
    elif tag_name == "deprecated":
        info.deprecated = text or True
    elif tag_name == "slot":
        info.slots.append(parse_slot_tag(text))
    elif tag_name in {"cssprop", "cssproperty"}:
        info.css_properties.append(parse_css_prop_tag(text))
    elif tag_name in {"part", "csspart"}:
        info.css_parts.append(parse_css_part_tag(text))
    elif tag_name == "dependency":
        if text:
            info.dependencies.append(text)


def parse_slot_tag(comment: str) -> SlotDocs:
    """Parse `@slot [name] - description`; `-` alone names the default slot."""
    match = SLOT_TAG_RE.fullmatch(comment)
    if match is None:
        return SlotDocs(name="", description=comment or None)
    name = match.group(1) or ""
    if name == "-":
        name = ""
    description = match.group(2).strip() if match.group(2) else None
    return SlotDocs(name=name, description=description or None)


def parse_css_prop_tag(comment: str) -> CssPropertyDocs:
    """Parse `@cssprop --name - description [default: value]`."""
    match = CSS_PROP_TAG_RE.fullmatch(comment)
    if match is None:
        return CssPropertyDocs(name=comment)

    description = match.group(2).strip() if match.group(2) else None
    default = None
    if description:
        default_match = DEFAULT_SUFFIX_RE.search(description)
        if default_match:
            default = default_match.group(1).strip()
            description = DEFAULT_STRIP_RE.sub("", description).strip()
    return CssPropertyDocs(name=match.group(1), description=description or None, default=default)


def parse_css_part_tag(comment: str) -> CssPartDocs:
    """Parse `@part name - description`."""
    match = CSS_PART_TAG_RE.fullmatch(comment)
    if match is None:
        return CssPartDocs(name=comment)
    description = match.group(2).strip() if match.group(2) else None
    return CssPartDocs(name=match.group(1), description=description or None)


def _comment_lines(raw: str) -> list[str]:
    body = raw[3:]
    if body.endswith("*/"):
        body = body[:-2]
    lines = []
    for line in body.splitlines():
        content = line.lstrip()
        if content.startswith("*"):
            content = content[1:]
            if content.startswith(" "):
                content = content[1:]
        lines.append(content.rstrip())
    return lines


def _strip_dash(text: str) -> str | None:
    text = text.strip()
    if text.startswith("- "):
        text = text[2:].strip()
    return text or None
