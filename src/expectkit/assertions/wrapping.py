"""Turns raw predicates into self-reporting matchers."""

from __future__ import annotations

import functools
import re
from typing import Any, Callable, Mapping

from expectkit.assertions.base import UNDEFINED, AssertionResult, MatcherUsageError, Reported, Verdict
from expectkit.assertions.context import MatcherContext

Predicate = Callable[..., "bool | Verdict | Reported"]
ReportingMatcher = Callable[..., bool]

_UPPER = re.compile(r"[A-Z]")


def englishify(matcher_name: str) -> str:
    """Render a matcher name as a phrase.

    ``toBeLessThan`` and ``to_be_less_than`` both become ``to be less than``.
    """
    phrase = _UPPER.sub(lambda m: " " + m.group(0).lower(), matcher_name)
    return phrase.replace("_", " ")


def synthesize_message(context: MatcherContext, matcher_name: str, args: list[Any]) -> str:
    message = f"Expected {context.pp(context.actual)} {englishify(matcher_name)}"
    message += ",".join(f" {context.pp(arg)}" for arg in args)
    return message + "."


def _expected_of(args: list[Any]) -> Any:
    if len(args) > 1:
        return args
    if args:
        return args[0]
    return UNDEFINED


def make_reporting(matcher_name: str, predicate: Predicate) -> ReportingMatcher:
    """Wrap *predicate* so each call records exactly one AssertionResult.

    The returned function takes the MatcherContext followed by the
    matcher's own arguments and returns the predicate's boolean result.
    """

    @functools.wraps(predicate)
    def reporting(context: MatcherContext, *args: Any) -> bool:
        matcher_args = list(args)
        outcome = predicate(context, *args)

        if isinstance(outcome, bool):
            outcome = Verdict(outcome)
        elif not isinstance(outcome, (Verdict, Reported)):
            raise TypeError(
                f"Matcher '{matcher_name}' returned {type(outcome).__name__}; "
                "expected bool, Verdict or Reported"
            )

        # The legacy report() path has already recorded this call's result.
        if context.reported:
            return outcome.passed
        if isinstance(outcome, Reported):
            raise MatcherUsageError(
                f"Matcher '{matcher_name}' returned Reported without calling report()"
            )

        if outcome.message is not None:
            message = outcome.message(*args)
        else:
            message = synthesize_message(context, matcher_name, matcher_args)

        result = AssertionResult(
            matcher_name=matcher_name,
            passed=outcome.passed,
            expected=_expected_of(matcher_args),
            actual=context.actual,
            message=message,
        )
        context.logger.debug(f"{matcher_name} passed={outcome.passed}: {message}")
        context.spec.add_result(result)
        return outcome.passed

    return reporting


def wrap(predicates: Mapping[str, Predicate]) -> dict[str, ReportingMatcher]:
    """Build a reporting matcher for every entry of a registration table."""
    return {name: make_reporting(name, predicate) for name, predicate in predicates.items()}
