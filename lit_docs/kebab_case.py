"""Logic for deriving attribute names from property names."""

import re

# Acronym run followed by a TitleCase word (URLValue -> URL-Value).
ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
# Lowercase letter or digit followed by an uppercase letter (fooBar -> foo-Bar).
CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def kebab_case(name: str) -> str:
    """Convert a camelCase or snake_case identifier to kebab-case."""
    text = ACRONYM_BOUNDARY_RE.sub(r"\1-\2", name)
    text = CAMEL_BOUNDARY_RE.sub(r"\1-\2", text)
    text = re.sub(r"[_\s]+", "-", text)
    return text.strip("-").lower()
