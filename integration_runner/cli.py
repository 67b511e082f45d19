"""CLI entry point for running integration test suites."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from integration_runner.config_loader import load_run_config
from integration_runner.models.config import RunConfig
from integration_runner.report import format_output
from integration_runner.runner import TestRunner
from integration_runner.session import run_all_tests
from integration_runner.suites.loading import available_suites, load_suites


def resolve_config(
    config_path: Path | None,
    suites: Sequence[str],
    json_output: bool,
    log_level: str | None,
) -> RunConfig:
    """Merge the optional config file with command line overrides."""
    config = load_run_config(config_path) if config_path else RunConfig()

    overrides: dict[str, object] = {}
    if suites:
        overrides["suites"] = tuple(suites)
    if json_output:
        overrides["output"] = "json"
    if log_level:
        overrides["log_level"] = log_level

    if not overrides:
        return config
    return RunConfig.model_validate(config.model_dump() | overrides)


def list_suites() -> int:
    """Print the installed suite keys, one per line."""
    for key in available_suites():
        print(key)
    return 0


def run(config: RunConfig) -> int:
    """Run the configured suites and return exit code."""
    log = logging.getLogger("integration_runner")

    log.debug("Loading suites: %s", ", ".join(config.suites))
    suites = load_suites(config.suites)

    outcome = run_all_tests(TestRunner(logger=log), suites)

    if config.output == "json":
        print(json.dumps(format_output(outcome), indent=2))

    return 0 if outcome.passed else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run integration test suites")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML run configuration",
    )
    parser.add_argument(
        "--suite",
        action="append",
        default=[],
        dest="suites",
        help="Suite key to run (repeatable, overrides the config file)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the structured outcome as JSON on stdout",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level for the report channel",
    )
    parser.add_argument(
        "--list-suites",
        action="store_true",
        help="Print the installed suite keys and exit",
    )

    args = parser.parse_args()

    if args.list_suites:
        sys.exit(list_suites())

    config = resolve_config(args.config, args.suites, args.json, args.log_level)

    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(config))


if __name__ == "__main__":  # pragma: no cover
    main()
