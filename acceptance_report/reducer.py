"""Reduction of many test results into one overall result."""

import logging
from collections.abc import Collection, Iterable

from acceptance_report.models.result import TestResult

log = logging.getLogger(__name__)

FAILING_RESULTS = (TestResult.FAILURE, TestResult.ERROR)
PASSING_RESULTS = (TestResult.SUCCESS, TestResult.IGNORED, TestResult.SKIPPED)


def overall_result(results: Iterable[TestResult]) -> TestResult:
    """Reduce step results to the overall result of a test.

    Rules are applied in order and the first match wins:

    1. No results at all: PENDING.
    2. Any FAILURE or ERROR: FAILURE.
    3. Any PENDING: PENDING.
    4. Only IGNORED: IGNORED.
    5. Only SKIPPED: SKIPPED.
    6. Only SUCCESS, IGNORED or SKIPPED: SUCCESS.
    7. Anything else: PENDING.

    Args:
        results: Step results in any order

    Returns:
        The overall result. Never raises, whatever the input contains.

    """
    collected = list(results)

    if not collected:
        return TestResult.PENDING

    if _contains_any(collected, FAILING_RESULTS):
        return TestResult.FAILURE

    if _contains_any(collected, (TestResult.PENDING,)):
        return TestResult.PENDING

    if _contains_only(collected, (TestResult.IGNORED,)):
        return TestResult.IGNORED

    if _contains_only(collected, (TestResult.SKIPPED,)):
        return TestResult.SKIPPED

    if _contains_only(collected, PASSING_RESULTS):
        return TestResult.SUCCESS

    log.warning(
        "Unrecognised results %s, reporting the test as pending",
        [r for r in collected if r not in PASSING_RESULTS],
    )
    return TestResult.PENDING


def suite_result(run_results: Iterable[TestResult]) -> TestResult:
    """Reduce the overall results of several test runs to a suite result.

    Unlike ``overall_result`` the inputs are already aggregated, so a suite
    of skipped runs still counts as a success. An empty suite is PENDING.
    """
    collected = list(run_results)

    if not collected:
        return TestResult.PENDING

    if _contains_any(collected, FAILING_RESULTS):
        return TestResult.FAILURE

    if _contains_any(collected, (TestResult.PENDING,)):
        return TestResult.PENDING

    if _contains_only(collected, (TestResult.IGNORED,)):
        return TestResult.IGNORED

    return TestResult.SUCCESS


def is_failure(result: TestResult) -> bool:
    """Check if an aggregated result counts as a failed run."""
    return result in FAILING_RESULTS


def is_success(result: TestResult) -> bool:
    """Check if an aggregated result counts as a successful run."""
    return result == TestResult.SUCCESS


def is_pending(result: TestResult) -> bool:
    """Check if an aggregated result is still awaiting a verdict."""
    return result == TestResult.PENDING


def _contains_any(
    results: Collection[TestResult], kinds: Collection[TestResult]
) -> bool:
    return any(result in kinds for result in results)


def _contains_only(
    results: Collection[TestResult], kinds: Collection[TestResult]
) -> bool:
    return all(result in kinds for result in results)
