"""Outcome of a single test or scenario run."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from acceptance_report.models.result import TestResult, TestStep
from acceptance_report.models.story import Story
from acceptance_report.naming import (
    InvalidIdentityError,
    ReportType,
    normalize,
    report_name,
    scoped_base,
)
from acceptance_report.parameters import ParameterSet, parameter_sets
from acceptance_report.reducer import (
    is_failure,
    is_pending,
    is_success,
    overall_result,
)


class TestMethodNotFoundError(Exception):
    """Raised when a named test method does not exist on its test class."""

    __test__ = False


@dataclass(kw_only=True)
class TestOutcome:
    """Steps recorded while running one test, and what they add up to.

    Identity is fixed at creation. Steps are appended while the test runs,
    and the overall result and report names always reflect every step
    recorded so far.
    """

    __test__ = False

    title: str | None = None
    method_name: str | None = None
    user_story: Story | None = None
    test_case_class: type | None = None
    qualifier: str | None = None
    steps: list[TestStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self._base_token():
            raise InvalidIdentityError(
                "A test outcome needs a method name, a title or a user story "
                "containing letters or digits"
            )

    @classmethod
    def for_test(cls, method_name: str, test_case_class: type) -> "TestOutcome":
        """Create an outcome for a test method of a test class."""
        return cls(
            method_name=method_name,
            test_case_class=test_case_class,
            user_story=Story.for_test_case(test_case_class),
        )

    @classmethod
    def for_test_in_story(cls, title: str, story: Story) -> "TestOutcome":
        """Create an outcome for a titled scenario of a user story."""
        return cls(title=title, user_story=story)

    @classmethod
    def for_parameterized_test(
        cls,
        method_name: str,
        test_case_class: type,
        parameter_set: ParameterSet,
    ) -> "TestOutcome":
        """Create an outcome for one data-driven run of a test method."""
        return cls(
            method_name=method_name,
            title=f"{parameter_set.test_name(method_name)} {parameter_set.name}",
            test_case_class=test_case_class,
            user_story=Story.for_test_case(test_case_class),
            qualifier=parameter_set.qualifier,
        )

    @classmethod
    def for_parameterized_runs(
        cls,
        method_name: str,
        test_case_class: type,
        rows: Iterable[Sequence[Any]],
    ) -> Sequence["TestOutcome"]:
        """Create one outcome per row of test data, in execution order."""
        return [
            cls.for_parameterized_test(method_name, test_case_class, parameter_set)
            for parameter_set in parameter_sets(rows)
        ]

    @property
    def test_method(self) -> Callable[..., Any]:
        """The test method this outcome was recorded for.

        Raises:
            TestMethodNotFoundError: If the test class has no such method

        """
        method = getattr(self.test_case_class, self.method_name or "", None)
        if not callable(method):
            raise TestMethodNotFoundError(
                f"Could not find the test method {self.method_name!r} "
                f"in {self.test_case_class!r}"
            )
        return method

    def record_result(
        self, result: TestResult, description: str | None = None
    ) -> None:
        """Record the result of the next step."""
        self.steps.append(TestStep(result=result, description=description))

    @property
    def step_results(self) -> Sequence[TestResult]:
        return [step.result for step in self.steps]

    @property
    def result(self) -> TestResult:
        """Overall result of the steps recorded so far."""
        return overall_result(self.step_results)

    @property
    def is_failure(self) -> bool:
        return is_failure(self.result)

    @property
    def is_success(self) -> bool:
        return is_success(self.result)

    @property
    def is_pending(self) -> bool:
        return is_pending(self.result)

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def success_count(self) -> int:
        return self._count(TestResult.SUCCESS)

    @property
    def failure_count(self) -> int:
        return self._count(TestResult.FAILURE) + self._count(TestResult.ERROR)

    @property
    def pending_count(self) -> int:
        return self._count(TestResult.PENDING)

    @property
    def ignored_count(self) -> int:
        return self._count(TestResult.IGNORED)

    @property
    def skipped_count(self) -> int:
        return self._count(TestResult.SKIPPED)

    def report_name(
        self,
        report_type: ReportType | None = None,
        qualifier: str | None = None,
    ) -> str:
        """Name of this test's report.

        The base is the method name (or the title when the method name is
        missing or unusable), prefixed with the user story title when there
        is a story.

        Args:
            report_type: Optional format, adding its file extension
            qualifier: Optional suffix; defaults to the parameter set
                qualifier of a data-driven run, and ``""`` drops it

        Returns:
            A lowercase, filesystem-safe report name

        """
        return report_name(
            self._base_token(),
            qualifier=self.qualifier if qualifier is None else qualifier,
            report_type=report_type,
        )

    def _base_token(self) -> str:
        story_title = self.user_story.title if self.user_story else None

        for test_token in (self.method_name, self.title):
            if test_token and normalize(test_token):
                return scoped_base(test_token, story_title)

        return normalize(story_title or "")

    def _count(self, kind: TestResult) -> int:
        return sum(1 for step in self.steps if step.result == kind)
