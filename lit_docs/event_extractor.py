"""Extraction of dispatched events from class bodies."""

from tree_sitter import Node

from lit_docs.decorator_parser import object_pairs
from lit_docs.models import EventDocs
from lit_docs.syntax_tree import named_children, node_text, string_value, unwrap_expression

EVENT_FLAGS = ("bubbles", "composed", "cancelable")


def extract_events(class_node: Node) -> list[EventDocs]:
    """Collect events passed to `dispatchEvent(new SomeEvent(...))` in a class body.

    Events are keyed by name; the first dispatch in source order wins.
    """
    body = class_node.child_by_field_name("body")
    if body is None:
        return []

    events: dict[str, EventDocs] = {}
    stack = [body]
    while stack:
        node = stack.pop()
        if node.type == "call_expression":
            event = _event_from_dispatch(node)
            if event is not None and event.name not in events:
                events[event.name] = event
        stack.extend(reversed(node.named_children))

    return list(events.values())


def _event_from_dispatch(call: Node) -> EventDocs | None:
    function = call.child_by_field_name("function")
    if function is None or function.type != "member_expression":
        return None
    if node_text(function.child_by_field_name("property")) != "dispatchEvent":
        return None

    arguments = call.child_by_field_name("arguments")
    args = named_children(arguments) if arguments is not None else []
    if not args:
        return None

    constructed = unwrap_expression(args[0])
    if constructed.type != "new_expression":
        return None

    ctor_arguments = constructed.child_by_field_name("arguments")
    ctor_args = named_children(ctor_arguments) if ctor_arguments is not None else []
    if not ctor_args:
        return None
    name = string_value(ctor_args[0])
    if not name:
        return None

    event = EventDocs(name=name)

    type_arguments = constructed.child_by_field_name("type_arguments")
    if type_arguments is not None:
        detail = named_children(type_arguments)
        if detail:
            event.detail = node_text(detail[0])

    if len(ctor_args) > 1 and ctor_args[1].type == "object":
        for key, value in object_pairs(ctor_args[1]):
            if key in EVENT_FLAGS and value.type in {"true", "false"}:
                setattr(event, key, value.type == "true")

    return event
