"""Models for recorded test runs loaded from results YAML files."""

from collections.abc import Sequence

from pydantic import Field

from acceptance_report.models.aggregate import AggregateTestResults
from acceptance_report.models.base import Model
from acceptance_report.models.outcome import TestOutcome
from acceptance_report.models.result import TestResult
from acceptance_report.models.story import Story


class StepRecord(Model):
    """Recorded result of one test step."""

    result: TestResult = Field(..., description="Step result")
    description: str | None = Field(default=None, description="What the step did")


class StoryRecord(Model):
    """User story a recorded test belongs to."""

    title: str = Field(..., min_length=1, description="Human-readable story title")
    story_class_name: str | None = Field(
        default=None, description="Fully qualified story class name"
    )

    def to_story(self) -> Story:
        return Story(title=self.title, story_class_name=self.story_class_name)


class OutcomeRecord(Model):
    """Recorded run of a single test."""

    title: str | None = Field(default=None, description="Display title")
    method_name: str | None = Field(default=None, description="Test method name")
    story: StoryRecord | None = Field(default=None, description="Owning story")
    qualifier: str | None = Field(
        default=None, description="Suffix distinguishing similar reports"
    )
    steps: Sequence[StepRecord] = Field(
        default_factory=list, description="Step results in execution order"
    )

    def to_test_outcome(self) -> TestOutcome:
        """Replay the recorded steps into a test outcome."""
        outcome = TestOutcome(
            title=self.title,
            method_name=self.method_name,
            user_story=self.story.to_story() if self.story else None,
            qualifier=self.qualifier,
        )
        for step in self.steps:
            outcome.record_result(step.result, step.description)
        return outcome


class RunRecord(Model):
    """Complete recorded run loaded from a results file."""

    version: str = Field(..., description="Results file schema version")
    title: str = Field(..., description="Title of the recorded run")
    outcomes: Sequence[OutcomeRecord] = Field(
        default_factory=list, description="Recorded test outcomes"
    )

    def to_aggregate(self) -> AggregateTestResults:
        """Build aggregate results holding one outcome per recorded test.

        Raises:
            InvalidIdentityError: If a recorded test has no name, title or story

        """
        aggregate = AggregateTestResults(title=self.title)
        for record in self.outcomes:
            aggregate.record_test_run(record.to_test_outcome())
        return aggregate
