"""Human-readable and JSON renderings of a test session."""

import logging
from typing import Any

from integration_runner.models.result import RunOutcome, Summary

RULE = "=" * 60

STATUS_SYMBOLS = {
    "pass": ("✓", "PASS"),
    "fail": ("✗", "FAIL"),
}


def log_summary(log: logging.Logger, summary: Summary) -> bool:
    """Log the end-of-run report and return whether no test failed.

    The line layout is consumed by log-scraping CI jobs and must stay stable.
    """
    log.info("")
    log.info(RULE)
    log.info("[TEST SUMMARY]")
    log.info(RULE)
    log.info("Total Tests: %d", summary.total)
    log.info("Passed: %d", summary.passed)
    log.info("Failed: %d", summary.failed)
    log.info(RULE)

    for suite in summary.suites:
        log.info("")
        log.info("%s:", suite.name)
        for test in suite.tests:
            symbol, label = STATUS_SYMBOLS.get(test.status, ("?", test.status.upper()))
            log.info("  %s [%s] %s (%sms)", symbol, label, test.name, test.duration)
            if test.error:
                log.info("    Error: %s", test.error)

    log.info("")
    log.info(RULE)

    if summary.ok:
        log.info("[TEST RUN PASSED]")
        return True

    log.error("[TEST RUN FAILED]")
    return False


def format_output(outcome: RunOutcome) -> dict[str, Any]:
    """Format a session outcome for JSON output."""
    return outcome.to_dict()
