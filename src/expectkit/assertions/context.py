"""Per-invocation state handed to every predicate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from expectkit.assertions.base import UNDEFINED, AssertionResult, MatcherUsageError, Reported
from expectkit.equality import contains, equals
from expectkit.pretty import html_escape, pp

if TYPE_CHECKING:
    from expectkit.spec import Spec


class MatcherContext:
    """Binds an actual value to the spec that owns the assertion.

    A fresh context is built for every matcher call and never reused.
    """

    def __init__(self, spec: Spec, actual: Any):
        self.spec = spec
        self.actual = actual
        self.reported = False

    @property
    def logger(self) -> logging.Logger:
        return self.spec.logger

    def equals(self, a: Any, b: Any) -> bool:
        return equals(a, b)

    def contains(self, collection: Any, item: Any) -> bool:
        return contains(collection, item)

    def pp(self, value: Any) -> str:
        return pp(value, max_depth=self.spec.config.pp_max_depth)

    def pp_escaped(self, value: Any) -> str:
        """Render *value* for a usage-error message."""
        text = self.pp(value)
        if self.spec.config.escape_usage_errors:
            return html_escape(text)
        return text

    def report(self, passed: bool, message: str, details: Any = None) -> Reported:
        """Forward a result directly to the spec.

        Deprecated: predicates should return a Verdict and let the
        wrapping engine report it.
        """
        if self.reported:
            raise MatcherUsageError("report() was already called for this expectation")
        self.logger.warning("MatcherContext.report() is deprecated; return a Verdict instead")
        self.reported = True
        self.spec.add_result(
            AssertionResult(
                matcher_name=None,
                passed=passed,
                expected=UNDEFINED,
                actual=self.actual,
                message=message,
                details=details,
            )
        )
        return Reported(passed)
