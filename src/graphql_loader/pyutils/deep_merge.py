"""Deep merge of mappings"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["deep_merge"]


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the source mapping deeply into a copy of the target mapping.

    Where both mappings have a mapping under the same key, these are merged
    recursively. Any other value of the source replaces the value of the target.
    Neither of the given mappings is modified.
    """
    result = dict(target)
    for key, value in source.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            result[key] = deep_merge({}, value)
        else:
            result[key] = value
    return result
