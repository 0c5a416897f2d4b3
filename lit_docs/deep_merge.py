"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_LIST_KEYS = {"ignore_dirs"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries without mutating either.

    - Mappings are merged recursively.
    - Lists in `update` replace lists in `base`, except for `ignore_dirs`,
      which is additive and keeps first-seen order.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif key in ADDITIVE_LIST_KEYS and isinstance(current, list) and isinstance(value, list):
            result[key] = current + [v for v in value if v not in current]
        else:
            result[key] = value
    return result
