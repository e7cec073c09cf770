"""Spec result sink and the ``expect(actual)`` entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from expectkit.assertions.base import UNDEFINED, AssertionResult
from expectkit.assertions.context import MatcherContext
from expectkit.assertions.predicates import PREDICATES
from expectkit.assertions.wrapping import Predicate, ReportingMatcher, wrap
from expectkit.config import ExpectConfig
from expectkit.verbose import close_logger, setup_logger, spec_logger_name

BUILTIN_MATCHERS: dict[str, ReportingMatcher] = wrap(PREDICATES)


class Spec:
    """Collects the AssertionResults produced by one spec's expectations."""

    def __init__(
        self,
        description: str,
        config: ExpectConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.description = description
        self.config = config or ExpectConfig()
        self._owns_logger = logger is None and bool(self.config.log_file)
        if self._owns_logger:
            logger = setup_logger(
                Path(self.config.log_file),
                verbose=self.config.verbose,
                logger_name=spec_logger_name(description, id(self)),
            )
        elif logger is None:
            logger = logging.getLogger("expectkit")
        self.logger = logger
        self.results: list[AssertionResult] = []
        self.matchers: dict[str, ReportingMatcher] = dict(BUILTIN_MATCHERS)

    def close(self) -> None:
        """Release the log file opened for this spec, if any."""
        if self._owns_logger:
            close_logger(self.logger)

    def add_result(self, result: AssertionResult) -> None:
        self.results.append(result)

    def add_matchers(self, predicates: Mapping[str, Predicate]) -> None:
        """Register custom predicates for this spec's expectations."""
        self.matchers.update(wrap(predicates))

    def expect(self, actual: Any = UNDEFINED) -> Expectation:
        return Expectation(self, actual)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed_results(self) -> list[AssertionResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> dict[str, Any]:
        total = len(self.results)
        passed = total - len(self.failed_results)
        return {
            "description": self.description,
            "total": total,
            "passed": passed,
            "failed": total - passed,
            "pass_rate": round(passed / total * 100, 2) if total else 0.0,
        }


class Expectation:
    """An actual value waiting for a matcher.

    Each matcher call builds its own MatcherContext, so an Expectation can
    be asserted against several times.
    """

    def __init__(self, spec: Spec, actual: Any):
        self.spec = spec
        self.actual = actual

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        matchers = self.spec.matchers
        if name not in matchers:
            raise AttributeError(f"Unknown matcher '{name}'")
        reporting = matchers[name]

        def matcher(*args: Any) -> bool:
            return reporting(MatcherContext(self.spec, self.actual), *args)

        matcher.__name__ = name
        return matcher
