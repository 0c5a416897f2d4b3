"""Data models for documentation facts extracted from Lit components."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class SlotDocs:
    """A slot exposed by a component (empty name for the default slot)."""

    name: str
    description: str | None = None


@dataclass
class CssPropertyDocs:
    """A themeable CSS custom property."""

    name: str
    description: str | None = None
    default: str | None = None


@dataclass
class CssPartDocs:
    """A shadow part exposed for external styling."""

    name: str
    description: str | None = None


@dataclass
class PropertyDocs:
    """A reactive property or internal state field."""

    name: str
    type: str = "any"
    attribute: str | None = None
    description: str | None = None
    default: str | None = None
    reflects: bool = False
    state: bool = False
    required: bool = False
    deprecated: bool | str | None = None


@dataclass
class EventDocs:
    """An event dispatched from a class body."""

    name: str
    description: str | None = None
    detail: str | None = None  # verbatim type argument of the event constructor
    bubbles: bool | None = None
    composed: bool | None = None
    cancelable: bool | None = None
    deprecated: bool | str | None = None


@dataclass
class ParameterDocs:
    """A method parameter."""

    name: str
    type: str = "any"
    description: str | None = None
    optional: bool = False
    default: str | None = None


@dataclass
class ReturnDocs:
    """The declared return of a method."""

    type: str
    description: str | None = None


@dataclass
class MethodDocs:
    """A public method."""

    name: str
    description: str | None = None
    parameters: list[ParameterDocs] = field(default_factory=list)
    returns: ReturnDocs | None = None
    is_async: bool = False
    deprecated: bool | str | None = None


@dataclass
class ClassDocParts:
    """Mergeable documentation fragment contributed by one declaration."""

    description: str | None = None
    usage: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    slots: list[SlotDocs] = field(default_factory=list)
    css_properties: list[CssPropertyDocs] = field(default_factory=list)
    css_parts: list[CssPartDocs] = field(default_factory=list)
    properties: list[PropertyDocs] = field(default_factory=list)
    events: list[EventDocs] = field(default_factory=list)
    methods: list[MethodDocs] = field(default_factory=list)


@dataclass
class ComponentDocs(ClassDocParts):
    """Fully resolved documentation record of a registered component."""

    class_name: str = ""
    tag_name: str = ""
    file_path: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary suitable for JSON or YAML output."""
        return asdict(self)
