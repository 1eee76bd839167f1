"""Structural helpers for plain JSON-like data (dicts, lists, scalars)

Provides:
- clone_obj: depth-bounded deep copy
- deep_compare: depth-bounded structural equality with a per-key hook
- ary_remove_item: identity-based list removal
"""

from typing import Any, Callable, List, Optional

from lottie_builder.constants import DEFAULT_MAX_DEPTH
from lottie_builder.exceptions import MaxDepthExceededError

# Returns True (treat key as equal), False (objects differ) or None (compare normally)
KeyComparer = Callable[[str, int, dict, dict, Any], Optional[bool]]


def clone_obj(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Deep copy nested dicts and lists; other values are returned as-is

    Args:
        obj: Value to clone
        max_depth: Remaining nesting allowed before giving up

    Returns:
        Independent copy of obj

    Raises:
        MaxDepthExceededError: If nesting exceeds max_depth
    """
    if max_depth < 0:
        raise MaxDepthExceededError('clone_obj max depth reached')
    max_depth -= 1

    if isinstance(obj, dict):
        return {key: clone_obj(value, max_depth) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [clone_obj(value, max_depth) for value in obj]
    return obj


def _kind(value: Any) -> str:
    """JSON kind of a value, used to reject cross-type equality (True == 1)"""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, (list, tuple)):
        return 'array'
    return type(value).__name__


def deep_compare(a: Any, b: Any, key_comparer: Optional[KeyComparer] = None,
                 key_comparer_state: Any = None, max_depth: int = DEFAULT_MAX_DEPTH,
                 depth: int = 0) -> bool:
    """Structural equality of two JSON-like values

    Arrays must match in length and element-wise. Objects must have the same
    number of keys, and every key of `a` must be present in `b` with an equal
    value. Keys the comparer skips are exempt from the presence check, so
    only the key counts are compared for them.

    When key_comparer is given it is asked about every key of `a` first:
    True skips the key, False fails the whole comparison, None falls
    through to the normal recursive comparison.

    Args:
        a: First value
        b: Second value
        key_comparer: Optional per-key hook, called as
            key_comparer(key, depth, a, b, key_comparer_state)
        key_comparer_state: Opaque value handed to key_comparer
        max_depth: Remaining nesting allowed before giving up
        depth: Nesting depth of a and b (0 for the top-level call)

    Returns:
        True if a and b are structurally equal

    Raises:
        MaxDepthExceededError: If nesting exceeds max_depth
    """
    if max_depth < 0:
        raise MaxDepthExceededError('deep_compare max depth reached')
    max_depth -= 1

    kind = _kind(a)
    if kind != _kind(b):
        return False

    if kind == 'array':
        if len(a) != len(b):
            return False
        for item_a, item_b in zip(a, b):
            if not deep_compare(item_a, item_b, key_comparer, key_comparer_state, max_depth, depth + 1):
                return False
        return True

    if kind != 'object':
        return a == b

    for key in a:
        if key_comparer is not None:
            result = key_comparer(key, depth, a, b, key_comparer_state)
            if result is False:
                return False
            if result is True:
                continue
        if key not in b:
            return False
        if not deep_compare(a[key], b[key], key_comparer, key_comparer_state, max_depth, depth + 1):
            return False

    # Extra keys on either side make the objects unequal
    return len(a) == len(b)


def ary_remove_item(ary: Optional[List[Any]], item: Any) -> bool:
    """Remove the first element that *is* item (identity, not equality)

    Returns:
        True if an element was removed
    """
    if not ary:
        return False
    for i, element in enumerate(ary):
        if element is item:
            del ary[i]
            return True
    return False
