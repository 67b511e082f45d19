"""Synchronous test runner with per-test and per-suite failure isolation."""

import logging
import time
from collections.abc import Callable, Sequence
from typing import TypeVar, overload

from integration_runner.expect import Expectation, expect
from integration_runner.models.result import Summary, TestResult, TestSuite
from integration_runner.report import log_summary

log = logging.getLogger(__name__)

T = TypeVar("T")

Body = Callable[[], object]


class RunnerUsageError(Exception):
    """Raised when the runner is driven in a way it does not support.

    ``owner`` is the runner whose registration check failed. A suite body
    lets its own runner's usage errors propagate; raised from inside a test
    body they fail that test like any other exception.
    """

    def __init__(self, message: str, owner: "TestRunner") -> None:
        super().__init__(message)
        self.owner = owner


class NoActiveSuiteError(RunnerUsageError):
    """Raised when a test is registered outside a ``describe`` block."""


class NestedSuiteError(RunnerUsageError):
    """Raised when ``describe`` is called from inside another suite."""


class NestedTestError(RunnerUsageError):
    """Raised when ``it`` is called from inside a running test body."""


def describe_error(exc: BaseException) -> str:
    """Return the message recorded for a failed test."""
    return str(exc) or type(exc).__name__


def _elapsed_ms(start: float) -> int:
    return round((time.perf_counter() - start) * 1000)


class TestRunner:
    """Registry and driver for one test session.

    Suites and tests execute immediately and in order when registered. There
    is no timeout: a body that never returns blocks the whole session. Create
    a fresh runner for every session that needs a clean report.

    Progress lines and the report are emitted through ``logging`` at INFO
    level. The caller must configure logging (e.g. ``logging.basicConfig``
    with ``level=logging.INFO``) for them to appear; otherwise only ERROR
    lines such as ``[TEST RUN FAILED]`` reach the last-resort handler.
    """

    __test__ = False

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.log = logger or log
        self._suites: list[TestSuite] = []
        self._current: TestSuite | None = None
        self._running_test: str | None = None

    @property
    def suites(self) -> Sequence[TestSuite]:
        return tuple(self._suites)

    @property
    def current_suite(self) -> TestSuite | None:
        return self._current

    @overload
    def describe(self, name: str, body: None = None) -> Callable[[Body], Body]: ...

    @overload
    def describe(self, name: str, body: Body) -> None: ...

    def describe(
        self, name: str, body: Body | None = None
    ) -> Callable[[Body], Body] | None:
        """Register and run a suite.

        The suite is added to the registry before its body runs, so tests
        registered before a setup error stay visible. Errors raised by the
        body itself are logged and suppressed; usage errors raised by this
        runner propagate.

        The suite is closed and the current-suite pointer cleared as soon as
        the body returns or raises, so a later ``it`` outside any
        ``describe`` raises ``NoActiveSuiteError`` instead of reopening it.

        Without ``body`` this returns a decorator that runs the decorated
        function as the suite body.
        """
        if body is None:
            return self._decorator(self.describe, name)

        if self._current is not None:
            raise NestedSuiteError(
                f"Suite '{name}' cannot be declared inside suite '{self._current.name}'",
                owner=self,
            )

        self.log.info("")
        self.log.info("[TEST SUITE] %s", name)
        suite = TestSuite(name=name)
        self._suites.append(suite)
        self._current = suite

        try:
            body()
        except Exception as exc:
            if isinstance(exc, RunnerUsageError) and exc.owner is self:
                raise
            self.log.error("[TEST SUITE ERROR] %s: %s", name, exc, exc_info=exc)
        finally:
            suite.close()
            self._current = None
        return None

    @overload
    def it(self, name: str, body: None = None) -> Callable[[Body], Body]: ...

    @overload
    def it(self, name: str, body: Body) -> None: ...

    def it(self, name: str, body: Body | None = None) -> Callable[[Body], Body] | None:
        """Register and run a single test inside the current suite.

        Any ``Exception`` raised by the body marks the test as failed and is
        not propagated, so sibling tests keep running. This includes usage
        errors such as a nested ``it`` or ``describe`` inside the body.
        """
        if body is None:
            return self._decorator(self.it, name)

        suite = self._current
        if suite is None:
            raise NoActiveSuiteError(
                "Test must be inside a describe block", owner=self
            )
        if self._running_test is not None:
            raise NestedTestError(
                f"Test '{name}' cannot be declared inside test '{self._running_test}'",
                owner=self,
            )

        start = time.perf_counter()
        result = TestResult.pending(name)
        self.log.info("[TEST START] %s", name)
        self._running_test = name

        try:
            body()
        except Exception as exc:
            result = result.failed(_elapsed_ms(start), describe_error(exc))
            self.log.error("[TEST FAIL] %s: %s", name, result.error)
        else:
            result = result.passed(_elapsed_ms(start))
            self.log.info("[TEST PASS] %s (%dms)", name, result.duration)
        finally:
            self._running_test = None

        suite.add(result)
        return None

    @staticmethod
    def expect(value: T) -> Expectation[T]:
        """Wrap ``value`` in an assertion handle."""
        return expect(value)

    def get_summary(self) -> Summary:
        """Derive counts and detail from everything registered so far."""
        return Summary.from_suites(self._suites)

    def print_summary(self) -> bool:
        """Log the report and return True when no test failed."""
        return log_summary(self.log, self.get_summary())

    @staticmethod
    def _decorator(
        register: Callable[[str, Body], None], name: str
    ) -> Callable[[Body], Body]:
        def decorator(func: Body) -> Body:
            register(name, func)
            return func

        return decorator
