"""Logic for making initializer source text presentable as a default value."""

import re

MAX_DEFAULT_LENGTH = 50
TEMPLATE_PLACEHOLDER = "(template)"
TEMPLATE_TAGS = ("css`", "html`", "svg`")


def sanitize_default_value(value: str) -> str:
    """Collapse whitespace, truncate long values and hide template literals."""
    value = re.sub(r"\s+", " ", value).strip()

    if value.startswith(TEMPLATE_TAGS):
        return TEMPLATE_PLACEHOLDER

    if len(value) > MAX_DEFAULT_LENGTH:
        value = value[:MAX_DEFAULT_LENGTH] + "..."

    return value
