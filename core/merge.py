# =============================================================================
# core/merge.py  —  Merge Engine for partial updates
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Computes the new state of a document when update_item applies a patch.
#
# THE RULES:
#   For every field in the patch:
#     - both sides are objects       -> merge them recursively
#     - anything else                -> the patch value replaces the field
#   Arrays count as plain values: a patched array replaces the old one
#   wholesale.  A patch never removes a field.
#
#   Example:
#     target = {"name": "a", "nested": {"x": 1, "tags": ["p"]}}
#     patch  = {"nested": {"y": 2, "tags": ["q"]}}
#     result = {"name": "a", "nested": {"x": 1, "y": 2, "tags": ["q"]}}
#
# COPY SEMANTICS:
#   merge() never touches its arguments.  The result is a fresh tree that
#   shares no containers with either input, so the caller can write it back
#   to the store as a full replace without aliasing anything it read.
# =============================================================================

import copy
from enum import Enum
from typing import Any, Mapping


class ValueKind(Enum):
    """Tag for a JSON value, as far as merging is concerned."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


def kind_of(value: Any) -> ValueKind:
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.SCALAR


def merge(target: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``target`` with ``patch`` applied recursively.

    Later values win at every depth.  Neither argument is modified.

    Args:
        target: The current document (typically as read from the store).
        patch: Fields to add or overwrite.

    Returns:
        A new dict holding the merged document.
    """
    result = copy.deepcopy(dict(target))
    _merge_into(result, patch)
    return result


def _merge_into(target: dict[str, Any], patch: Mapping[str, Any]) -> None:
    for field, new_value in patch.items():
        current = target.get(field)
        pair = (kind_of(current), kind_of(new_value))

        if field in target and pair == (ValueKind.OBJECT, ValueKind.OBJECT):
            _merge_into(current, new_value)
        elif pair[1] is ValueKind.OBJECT:
            target[field] = merge({}, new_value)
        else:
            target[field] = copy.deepcopy(new_value)
