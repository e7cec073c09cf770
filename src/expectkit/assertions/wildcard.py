"""Type-category wildcards usable wherever an exact expected value goes."""

from __future__ import annotations

import numbers
import types
from collections.abc import Callable
from enum import Enum
from typing import Any


class Category(str, Enum):
    STRING = "String"
    NUMBER = "Number"
    INVOCABLE = "Invocable"
    COMPOUND = "Compound"
    NOMINAL = "Nominal"


_PRIMITIVES = (bool, numbers.Number, str, bytes)


def _categorize(type_tag: type) -> Category:
    if type_tag is str:
        return Category.STRING
    if type_tag in (int, float, complex, numbers.Number):
        return Category.NUMBER
    if type_tag in (Callable, types.FunctionType):
        return Category.INVOCABLE
    if type_tag is object:
        return Category.COMPOUND
    return Category.NOMINAL


class WildcardMatcher:
    """Matches any value of a declared category instead of an exact value.

    The deep-equality check reduces to :meth:`matches` whenever either
    operand is a WildcardMatcher.
    """

    def __init__(self, type_tag: type):
        if not isinstance(type_tag, type):
            raise TypeError(f"any_of() expects a class, got {type_tag!r}")
        self.type_tag = type_tag
        self.category = _categorize(type_tag)

    def matches(self, other: Any) -> bool:
        if self.category is Category.STRING:
            return isinstance(other, str)
        if self.category is Category.NUMBER:
            return isinstance(other, numbers.Number) and not isinstance(other, bool)
        if self.category is Category.INVOCABLE:
            return callable(other)
        if self.category is Category.COMPOUND:
            return other is not None and not isinstance(other, _PRIMITIVES)
        return isinstance(other, self.type_tag)

    def __repr__(self) -> str:
        if self.category is Category.NOMINAL:
            return f"<any({self.type_tag.__name__})>"
        return f"<any({self.category.value})>"


def any_of(type_tag: type) -> WildcardMatcher:
    """Return a wildcard matching any value of *type_tag*'s category."""
    return WildcardMatcher(type_tag)
