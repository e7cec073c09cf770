"""Self-reporting matchers for unit-testing frameworks."""

from expectkit.assertions import (
    UNDEFINED,
    AssertionResult,
    MatcherContext,
    MatcherUsageError,
    Reported,
    Verdict,
    WildcardMatcher,
    any_of,
    wrap,
)
from expectkit.config import ExpectConfig, load_config
from expectkit.equality import contains, equals
from expectkit.pretty import pp
from expectkit.spec import Expectation, Spec
from expectkit.spy import Spy, create_spy, is_spy, spy_on

__all__ = [
    "UNDEFINED",
    "AssertionResult",
    "Expectation",
    "ExpectConfig",
    "MatcherContext",
    "MatcherUsageError",
    "Reported",
    "Spec",
    "Spy",
    "Verdict",
    "WildcardMatcher",
    "any_of",
    "contains",
    "create_spy",
    "equals",
    "is_spy",
    "load_config",
    "pp",
    "spy_on",
    "wrap",
]
