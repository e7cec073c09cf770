"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class _Undefined:
    """Marker for a value that was never supplied (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class MatcherUsageError(Exception):
    """Raised when a matcher is misapplied (wrong actual type or arguments).

    Usage errors are never recorded as an AssertionResult.
    """


@dataclass(frozen=True)
class AssertionResult:
    """Result of evaluating a single matcher invocation.

    Attributes:
        matcher_name: Name of the matcher (e.g. "to_equal"). None for
            results forwarded through the legacy ``report`` path.
        passed: Whether the matcher's predicate held.
        expected: The single matcher argument, a list of them when more
            than one was given, or UNDEFINED when the matcher took none.
        actual: The value the expectation was bound to.
        message: Human-readable detail about the result.
        details: Free-form extra data supplied by the legacy path.
    """

    matcher_name: str | None
    passed: bool
    expected: Any
    actual: Any
    message: str
    details: Any = None


@dataclass(frozen=True)
class Verdict:
    """Outcome of a predicate that still has to be reported.

    ``message`` optionally overrides the synthesized message; it is called
    with the matcher's original arguments.
    """

    passed: bool
    message: Callable[..., str] | None = None


@dataclass(frozen=True)
class Reported:
    """Outcome of a predicate that already forwarded its own result."""

    passed: bool
