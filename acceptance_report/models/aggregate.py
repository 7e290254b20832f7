"""Results of a set of test runs, such as a story or a whole suite."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from acceptance_report.models.outcome import TestOutcome
from acceptance_report.models.result import TestResult
from acceptance_report.reducer import suite_result


@dataclass(kw_only=True)
class AggregateTestResults:
    """Collects test outcomes and summarises them.

    Each run is classified from its own overall result, so the counts and
    the suite result always agree with what each outcome reports.
    """

    title: str
    _test_runs: list[TestOutcome] = field(
        default_factory=list, init=False, repr=False
    )

    def record_test_run(self, test_run: TestOutcome) -> None:
        """Add a test run to the aggregate results."""
        self._test_runs.append(test_run)

    @property
    def test_runs(self) -> Sequence[TestOutcome]:
        return tuple(self._test_runs)

    @property
    def total(self) -> int:
        return len(self._test_runs)

    @property
    def failure_count(self) -> int:
        """Number of runs with at least one failing step."""
        return sum(1 for run in self._test_runs if run.is_failure)

    @property
    def success_count(self) -> int:
        """Number of runs that succeeded outright."""
        return sum(1 for run in self._test_runs if run.is_success)

    @property
    def pending_count(self) -> int:
        return sum(1 for run in self._test_runs if run.is_pending)

    @property
    def result(self) -> TestResult:
        """Overall result of the recorded runs."""
        return suite_result(run.result for run in self._test_runs)
