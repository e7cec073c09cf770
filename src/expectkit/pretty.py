"""Stable, readable rendering of arbitrary values for matcher messages."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any

from expectkit.assertions.base import UNDEFINED
from expectkit.assertions.wildcard import WildcardMatcher
from expectkit.spy import is_spy


def html_escape(text: str) -> str:
    return html.escape(text, quote=False)


def pp(value: Any, max_depth: int = 8) -> str:
    """Pretty-print *value*.

    Strings are single-quoted, lists render as ``[ 1, 2 ]`` and mappings
    as ``{ key : value }``. Containers nested deeper than *max_depth*
    collapse to ``Array`` / ``Object``; a container that contains itself
    renders as ``<circular reference>``.
    """
    return _format(value, max_depth, set())


def _format(value: Any, depth: int, seen: set[int]) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "None"
    if isinstance(value, WildcardMatcher):
        return repr(value)
    if is_spy(value):
        return f"spy on {value.identity}"
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, BaseException):
        return f"{type(value).__name__}({', '.join(_format(a, depth, seen) for a in value.args)})"

    if isinstance(value, (list, tuple, Mapping)):
        if id(value) in seen:
            return "<circular reference>"
        if depth <= 0:
            return "Object" if isinstance(value, Mapping) else "Array"
        seen = seen | {id(value)}
        if isinstance(value, Mapping):
            items = [f"{_format(k, depth - 1, seen)} : {_format(v, depth - 1, seen)}" for k, v in value.items()]
            return "{ " + ", ".join(items) + " }" if items else "{ }"
        items = [_format(v, depth - 1, seen) for v in value]
        return "[ " + ", ".join(items) + " ]" if items else "[ ]"

    if callable(value) and not isinstance(value, type):
        return "Function"
    return repr(value)
