"""User story identity shared by the tests that exercise it."""

from collections.abc import Callable
from typing import TypeVar

from pydantic import Field

from acceptance_report.models.base import Model
from acceptance_report.naming import ReportType, humanize, report_name

USER_STORY_ATTRIBUTE = "__user_story__"

T = TypeVar("T", bound=type)


class Story(Model):
    """A user story that groups related tests in the reports."""

    title: str = Field(..., min_length=1, description="Human-readable story title")
    story_class_name: str | None = Field(
        default=None,
        description="Fully qualified name of the class representing the story",
    )

    @classmethod
    def from_class(cls, story_class: type) -> "Story":
        """Create a story from the class that represents it."""
        return cls(
            title=humanize(story_class.__name__),
            story_class_name=f"{story_class.__module__}.{story_class.__qualname__}",
        )

    @classmethod
    def for_test_case(cls, test_case_class: type) -> "Story":
        """Find the story a test class exercises.

        Uses the story declared with ``@user_story`` and falls back to the
        test class itself when none is declared.
        """
        story_class = getattr(test_case_class, USER_STORY_ATTRIBUTE, None)
        return cls.from_class(story_class or test_case_class)

    def report_name(
        self,
        report_type: ReportType | None = None,
        qualifier: str | None = None,
    ) -> str:
        """Name of the report covering the whole story."""
        return report_name(self.title, qualifier=qualifier, report_type=report_type)


def user_story(story_class: type) -> Callable[[T], T]:
    """Declare the user story a test class exercises.

    Example:
        @user_story(AUserStory)
        class SomeTestScenario: ...

    """

    def decorate(test_case_class: T) -> T:
        setattr(test_case_class, USER_STORY_ATTRIBUTE, story_class)
        return test_case_class

    return decorate
