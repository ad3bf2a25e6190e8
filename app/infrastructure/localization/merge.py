"""Recursive mapping merges used when combining label files."""

import copy
from collections.abc import Mapping
from typing import Any, Dict


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, tuple, dict)) and not value)


def merge_recursive_with_override(
    original: Mapping,
    overrule: Mapping,
    include_empty_values: bool = True,
) -> Dict[str, Any]:
    """Merge ``overrule`` onto ``original`` and return a new dict.

    Nested mappings are merged key by key. Any other value in ``overrule``
    replaces the value in ``original`` outright. Neither input is modified.

    Args:
        original: Base mapping.
        overrule: Mapping whose values win on key collisions.
        include_empty_values: When False, empty values in ``overrule``
            (None, "", empty containers) leave the original value in place.

    Returns:
        Merged mapping.
    """
    result = copy.deepcopy(dict(original))
    for key, value in overrule.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_recursive_with_override(
                current, value, include_empty_values
            )
        elif include_empty_values or not _is_empty(value):
            result[key] = copy.deepcopy(value)
    return result
