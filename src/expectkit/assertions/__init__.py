"""Matcher system: predicates, the wrapping engine and wildcards."""

from expectkit.assertions.base import (
    UNDEFINED,
    AssertionResult,
    MatcherUsageError,
    Reported,
    Verdict,
)
from expectkit.assertions.context import MatcherContext
from expectkit.assertions.wildcard import WildcardMatcher, any_of
from expectkit.assertions.wrapping import englishify, make_reporting, wrap

__all__ = [
    "UNDEFINED",
    "AssertionResult",
    "MatcherContext",
    "MatcherUsageError",
    "Reported",
    "Verdict",
    "WildcardMatcher",
    "any_of",
    "englishify",
    "make_reporting",
    "wrap",
]
