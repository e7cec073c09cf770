"""Deep equality and containment used by the matchers."""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any

from expectkit.assertions.base import UNDEFINED
from expectkit.assertions.wildcard import WildcardMatcher


def equals(a: Any, b: Any) -> bool:
    """Structural equality that understands wildcards.

    Mappings compare by key set and deep-equal values, lists and tuples
    element-wise (a list never equals a tuple). Everything else falls back
    to ``==``.
    """
    if a is b:
        return True
    if isinstance(a, WildcardMatcher):
        return a.matches(b)
    if isinstance(b, WildcardMatcher):
        return b.matches(a)
    if a is UNDEFINED or b is UNDEFINED or a is None or b is None:
        return False

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if set(a.keys()) != set(b.keys()):
            return False
        return all(equals(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) or isinstance(b, (list, tuple)):
        if type(a) is not type(b) and not (isinstance(a, type(b)) or isinstance(b, type(a))):
            return False
        if len(a) != len(b):
            return False
        return all(equals(x, y) for x, y in zip(a, b))

    if isinstance(a, Set) and isinstance(b, Set):
        return a == b

    return bool(a == b)


def contains(collection: Any, item: Any) -> bool:
    """Membership by deep equality; substring search for text haystacks."""
    if isinstance(collection, (str, bytes)):
        return isinstance(item, type(collection)) and item in collection
    return any(equals(element, item) for element in collection)
