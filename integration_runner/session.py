"""Top-level orchestration of a test session."""

import logging
from collections.abc import Callable, Sequence

from integration_runner.models.result import RunOutcome
from integration_runner.runner import TestRunner, describe_error

log = logging.getLogger(__name__)

SuiteFn = Callable[[TestRunner], None]


def run_all_tests(runner: TestRunner, suites: Sequence[SuiteFn]) -> RunOutcome:
    """Run every suite registration function, then report.

    Test and suite failures are already isolated by the runner; anything that
    still escapes is turned into a failed outcome without a summary.
    """
    runner.log.info("")
    runner.log.info("Starting integration tests (%d suite(s))...", len(suites))

    try:
        for register in suites:
            register(runner)

        passed = runner.print_summary()
        return RunOutcome(passed=passed, summary=runner.get_summary())
    except Exception as exc:
        log.error("[TEST ERROR] %s", exc, exc_info=exc)
        return RunOutcome(passed=False, error=describe_error(exc))
