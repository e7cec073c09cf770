"""Built-in matcher predicates.

Each predicate receives the MatcherContext first, then the matcher's own
arguments, and returns a bool or a Verdict carrying a custom message.
Misapplied matchers raise MatcherUsageError instead of failing.
"""

from __future__ import annotations

import operator
import re
from typing import Any, Callable

from expectkit.assertions.base import UNDEFINED, MatcherUsageError, Verdict
from expectkit.assertions.context import MatcherContext
from expectkit.spy import is_spy


def to_be(ctx: MatcherContext, expected: Any) -> bool:
    return ctx.actual is expected


def to_not_be(ctx: MatcherContext, expected: Any) -> bool:
    return ctx.actual is not expected


def to_equal(ctx: MatcherContext, expected: Any) -> bool:
    """Compare with deep equality; handles dicts, lists and wildcards."""
    return ctx.equals(ctx.actual, expected)


def to_not_equal(ctx: MatcherContext, expected: Any) -> bool:
    return not ctx.equals(ctx.actual, expected)


def _search(pattern: str | re.Pattern, actual: Any) -> bool:
    return re.compile(pattern).search(str(actual)) is not None


def to_match(ctx: MatcherContext, expected: str | re.Pattern) -> bool:
    """Regex search; takes a pattern source or a compiled pattern."""
    return _search(expected, ctx.actual)


def to_not_match(ctx: MatcherContext, expected: str | re.Pattern) -> bool:
    return not _search(expected, ctx.actual)


def to_be_defined(ctx: MatcherContext) -> bool:
    return ctx.actual is not UNDEFINED


def to_be_undefined(ctx: MatcherContext) -> bool:
    return ctx.actual is UNDEFINED


def to_be_null(ctx: MatcherContext) -> bool:
    return ctx.actual is None


def to_be_truthy(ctx: MatcherContext) -> bool:
    return bool(ctx.actual)


def to_be_falsy(ctx: MatcherContext) -> bool:
    return not ctx.actual


def _require_spy(ctx: MatcherContext) -> None:
    if not is_spy(ctx.actual):
        raise MatcherUsageError(f"Expected a spy, but got {ctx.pp_escaped(ctx.actual)}.")


def was_called(ctx: MatcherContext, *args: Any) -> Verdict:
    if args:
        raise MatcherUsageError("was_called does not take arguments, use was_called_with")
    _require_spy(ctx)
    spy = ctx.actual
    return Verdict(
        spy.was_called,
        message=lambda: f"Expected spy {spy.identity} to have been called.",
    )


def was_not_called(ctx: MatcherContext, *args: Any) -> Verdict:
    if args:
        raise MatcherUsageError("was_not_called does not take arguments")
    _require_spy(ctx)
    spy = ctx.actual
    return Verdict(
        not spy.was_called,
        message=lambda: f"Expected spy {spy.identity} to not have been called.",
    )


def was_called_with(ctx: MatcherContext, *args: Any) -> Verdict:
    """Pass when any recorded call's arguments deep-equal *args*."""
    _require_spy(ctx)
    spy = ctx.actual

    def message(*expected: Any) -> str:
        if spy.call_count == 0:
            return f"Expected spy to have been called with {ctx.pp(list(expected))} but it was never called."
        return (
            f"Expected spy to have been called with {ctx.pp(list(expected))} "
            f"but was called with {ctx.pp(spy.args_for_call)}"
        )

    return Verdict(ctx.contains(spy.args_for_call, list(args)), message=message)


def was_not_called_with(ctx: MatcherContext, *args: Any) -> Verdict:
    _require_spy(ctx)
    spy = ctx.actual
    return Verdict(
        not ctx.contains(spy.args_for_call, list(args)),
        message=lambda *expected: (
            f"Expected spy not to have been called with {ctx.pp(list(expected))} but it was"
        ),
    )


def to_contain(ctx: MatcherContext, expected: Any) -> bool:
    return ctx.contains(ctx.actual, expected)


def to_not_contain(ctx: MatcherContext, expected: Any) -> bool:
    return not ctx.contains(ctx.actual, expected)


def _compare(ctx: MatcherContext, compare: Callable[[Any, Any], bool], expected: Any) -> bool:
    try:
        return bool(compare(ctx.actual, expected))
    except TypeError as e:
        raise MatcherUsageError(
            f"Cannot order {ctx.pp_escaped(ctx.actual)} against {ctx.pp_escaped(expected)}."
        ) from e


def to_be_less_than(ctx: MatcherContext, expected: Any) -> bool:
    """Strict ordering; values that cannot be ordered are a usage error."""
    return _compare(ctx, operator.lt, expected)


def to_be_greater_than(ctx: MatcherContext, expected: Any) -> bool:
    """Strict ordering; values that cannot be ordered are a usage error."""
    return _compare(ctx, operator.gt, expected)


def _message_of(value: Any) -> Any:
    """An exception's message, or the value itself when it carries none.

    A single argument is the message as given (``str()`` would quote a
    KeyError's key); an empty message counts as none.
    """
    if not isinstance(value, BaseException) or not value.args:
        return value
    message = value.args[0] if len(value.args) == 1 else str(value)
    if message == "" or message is None:
        return value
    return message


def to_throw(ctx: MatcherContext, expected: Any = UNDEFINED) -> Verdict:
    """Call the actual and check what it raises.

    With no argument any exception passes. Otherwise the raised message
    must deep-equal the expected exception's message, or *expected* itself
    when it is not an exception.
    """
    if not callable(ctx.actual):
        raise MatcherUsageError("Actual is not callable")

    exception: Exception | None = None
    try:
        ctx.actual()
    except Exception as e:
        exception = e

    matched = exception is not None and (
        expected is UNDEFINED or ctx.equals(_message_of(exception), _message_of(expected))
    )

    def message(*args: Any) -> str:
        if exception is not None and not matched:
            return " ".join(
                [
                    "Expected function to throw",
                    str(_message_of(expected)),
                    ", but it threw",
                    str(_message_of(exception)),
                ]
            )
        return "Expected function to throw an exception."

    return Verdict(matched, message=message)


PREDICATES = {
    "to_be": to_be,
    "to_not_be": to_not_be,
    "to_equal": to_equal,
    "to_not_equal": to_not_equal,
    "to_match": to_match,
    "to_not_match": to_not_match,
    "to_be_defined": to_be_defined,
    "to_be_undefined": to_be_undefined,
    "to_be_null": to_be_null,
    "to_be_truthy": to_be_truthy,
    "to_be_falsy": to_be_falsy,
    "was_called": was_called,
    "was_not_called": was_not_called,
    "was_called_with": was_called_with,
    "was_not_called_with": was_not_called_with,
    "to_contain": to_contain,
    "to_not_contain": to_not_contain,
    "to_be_less_than": to_be_less_than,
    "to_be_greater_than": to_be_greater_than,
    "to_throw": to_throw,
}
