"""CLI entry point for summarising recorded acceptance test runs."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from acceptance_report.config import ReportConfig
from acceptance_report.models.aggregate import AggregateTestResults
from acceptance_report.models.result import TestResult
from acceptance_report.results_loader import load_run_record

STATUS_SYMBOLS = {
    TestResult.SUCCESS: "✅",
    TestResult.FAILURE: "❌",
    TestResult.ERROR: "❗",
    TestResult.PENDING: "⏳",
    TestResult.IGNORED: "➖",
    TestResult.SKIPPED: "⏭️",
}


def log_results_summary(log: logging.Logger, results: AggregateTestResults) -> None:
    """Log a formatted summary of each test outcome."""
    log.info("=" * 80)
    log.info("Test Results Summary: %s", results.title)
    log.info("=" * 80)

    for outcome in results.test_runs:
        result = outcome.result
        log.info(
            "%s %s: %s (%d step(s))",
            STATUS_SYMBOLS.get(result, "?"),
            outcome.report_name(),
            result,
            outcome.step_count,
        )
        for step in outcome.steps:
            if step.description and step.result != TestResult.SUCCESS:
                log.info("  %s: %s", step.result, step.description)

    log.info(
        "Overall: %s (%d passed, %d failed, %d pending, %d total)",
        results.result,
        results.success_count,
        results.failure_count,
        results.pending_count,
        results.total,
    )


def format_output(
    results: AggregateTestResults, config: ReportConfig
) -> dict[str, Any]:
    """Format aggregate results for JSON output."""
    outcomes: list[dict[str, Any]] = []
    for outcome in results.test_runs:
        outcomes.append(
            {
                "name": outcome.report_name(),
                "result": outcome.result.value,
                "steps": outcome.step_count,
                "reports": [
                    outcome.report_name(report_type)
                    for report_type in config.report_types
                ],
            }
        )

    return {
        "title": results.title,
        "result": results.result.value,
        "total": results.total,
        "passed": results.success_count,
        "failed": results.failure_count,
        "pending": results.pending_count,
        "outcomes": outcomes,
    }


def exit_code_for(results: AggregateTestResults, config: ReportConfig) -> int:
    """Exit code reflecting the suite verdict."""
    result = results.result
    if result == TestResult.FAILURE:
        return 1
    if result == TestResult.PENDING and config.fail_on_pending:
        return 1
    return 0


def run(results_path: Path, config: ReportConfig) -> int:
    """Summarise a recorded run and return exit code."""
    log = logging.getLogger("acceptance_report")

    log.info("Loading recorded run: %s", results_path)
    record = load_run_record(results_path)
    results = record.to_aggregate()

    log_results_summary(log, results)

    print(json.dumps(format_output(results, config), indent=2))

    return exit_code_for(results, config)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Summarise recorded acceptance test runs"
    )
    parser.add_argument(
        "--results",
        type=Path,
        required=True,
        help="Path to the recorded run (YAML)",
    )
    parser.add_argument(
        "--report-config",
        default="{}",
        help="JSON configuration for report naming and verdicts",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = ReportConfig(**json.loads(args.report_config))

    sys.exit(run(results_path=args.results, config=config))


if __name__ == "__main__":  # pragma: no cover
    main()
