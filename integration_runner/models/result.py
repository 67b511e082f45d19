"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Literal, Self

Status = Literal["pending", "pass", "fail"]


class ResultAlreadyFinishedError(Exception):
    """Raised when a finished result is asked to transition again."""


class SuiteClosedError(Exception):
    """Raised when a result is added to a suite that no longer accepts tests."""


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a single test.

    A result starts ``pending`` and moves exactly once to ``pass`` or
    ``fail``. Both transitions return a new value; the pending one is only
    ever seen by the runner while the test body executes.
    """

    __test__ = False

    name: str
    status: Status = "pending"
    duration: int | None = None
    error: str | None = None

    @classmethod
    def pending(cls, name: str) -> Self:
        """Create the initial result for a test that is about to run."""
        return cls(name=name)

    @property
    def finished(self) -> bool:
        return self.status != "pending"

    def passed(self, duration: int) -> Self:
        """Return the terminal ``pass`` result."""
        self._ensure_pending()
        return replace(self, status="pass", duration=duration)

    def failed(self, duration: int, error: str) -> Self:
        """Return the terminal ``fail`` result carrying the error message."""
        self._ensure_pending()
        return replace(self, status="fail", duration=duration, error=error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status,
            "duration": self.duration,
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    def _ensure_pending(self) -> None:
        if self.finished:
            raise ResultAlreadyFinishedError(
                f"Test '{self.name}' already finished with status {self.status}"
            )


@dataclass(eq=False, kw_only=True)
class TestSuite:
    """Named, ordered group of test results.

    The suite is open while its registration body runs and closed afterwards;
    a closed suite's test list is frozen.
    """

    __test__ = False

    name: str
    _tests: list[TestResult] = field(default_factory=list, repr=False)
    _closed: bool = field(default=False, repr=False)

    @property
    def tests(self) -> Sequence[TestResult]:
        return tuple(self._tests)

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, result: TestResult) -> None:
        """Append a finished result in execution order."""
        if self._closed:
            raise SuiteClosedError(f"Suite '{self.name}' is closed")
        if not result.finished:
            raise ValueError(f"Test '{result.name}' has not finished yet")
        self._tests.append(result)

    def close(self) -> None:
        self._closed = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "tests": [test.to_dict() for test in self._tests],
        }


@dataclass(frozen=True, kw_only=True)
class Summary:
    """Aggregate counts plus the full suite detail of a session."""

    total: int
    passed: int
    failed: int
    suites: Sequence[TestSuite]

    @classmethod
    def from_suites(cls, suites: Sequence[TestSuite]) -> Self:
        """Derive counts by scanning every test of every suite."""
        statuses = [test.status for suite in suites for test in suite.tests]
        return cls(
            total=len(statuses),
            passed=statuses.count("pass"),
            failed=statuses.count("fail"),
            suites=tuple(suites),
        )

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "suites": [suite.to_dict() for suite in self.suites],
        }


@dataclass(frozen=True, kw_only=True)
class RunOutcome:
    """Result of a whole session, as handed to a UI or CI pipeline.

    ``summary`` is absent when the orchestration itself failed, in which case
    ``error`` carries the message.
    """

    passed: bool
    summary: Summary | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"passed": self.passed}
        if self.summary is not None:
            data["summary"] = self.summary.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data
