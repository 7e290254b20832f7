"""Tests for Story identity and report names."""

import pytest
from pydantic import ValidationError

from acceptance_report.models.story import Story, user_story
from acceptance_report.naming import ReportType


class AUserStory:
    pass


@user_story(AUserStory)
class SomeTestScenario:
    pass


class InheritedScenario(SomeTestScenario):
    pass


def test_from_class_humanizes_class_name() -> None:
    """Derives the title from the story class name."""
    story = Story.from_class(AUserStory)

    assert story.title == "A user story"
    assert story.story_class_name == f"{__name__}.AUserStory"


@pytest.mark.parametrize(
    ("report_type", "expected"),
    [
        (None, "a_user_story"),
        (ReportType.HTML, "a_user_story.html"),
        (ReportType.XML, "a_user_story.xml"),
    ],
)
def test_story_report_name(report_type: ReportType | None, expected: str) -> None:
    """Names story reports after the story title."""
    story = Story.from_class(AUserStory)

    assert story.report_name(report_type) == expected


def test_story_report_name_with_qualifier() -> None:
    """Appends a qualifier to story report names."""
    story = Story(title="A User Story")

    assert story.report_name(ReportType.HTML, "summary") == "a_user_story_summary.html"


def test_for_test_case_uses_declared_story() -> None:
    """Resolves the story declared with the decorator."""
    assert Story.for_test_case(SomeTestScenario) == Story.from_class(AUserStory)


def test_declared_story_is_inherited() -> None:
    """Subclasses share the story of their parent test class."""
    assert Story.for_test_case(InheritedScenario) == Story.from_class(AUserStory)


def test_user_story_returns_the_class() -> None:
    """Leaves the decorated class usable as before."""

    @user_story(AUserStory)
    class Decorated:
        value = 1

    assert Decorated.value == 1
    assert Decorated.__user_story__ is AUserStory  # type: ignore[attr-defined]


def test_story_requires_title() -> None:
    """Rejects an empty title."""
    with pytest.raises(ValidationError):
        Story(title="")


def test_story_is_frozen() -> None:
    """Stories cannot be modified once created."""
    story = Story(title="A User Story")

    with pytest.raises(ValidationError):
        story.title = "Another story"  # type: ignore[misc]
