"""Derivation of report names from test and story identities."""

import re
from enum import StrEnum

_NON_ALPHANUMERIC = re.compile(r"[\W_]+")
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class InvalidIdentityError(ValueError):
    """Raised when a test or story has no usable name to report under."""


class ReportType(StrEnum):
    """Report formats, valued by their file extension."""

    HTML = "html"
    XML = "xml"

    @property
    def extension(self) -> str:
        """File extension, without the leading dot."""
        return self.value.lower()


def normalize(text: str) -> str:
    """Reduce free text to a lowercase, underscore-separated token.

    Runs of anything other than letters and digits collapse to a single
    underscore, and underscores at either end are dropped, so
    ``normalize("A simple test case: exception case")`` is
    ``"a_simple_test_case_exception_case"``. Applying it twice changes
    nothing.
    """
    return _NON_ALPHANUMERIC.sub("_", text.lower()).strip("_")


def humanize(name: str) -> str:
    """Turn a class or method identifier into readable text.

    ``AUserStory`` becomes ``A user story`` and ``should_do_this`` becomes
    ``Should do this``.
    """
    words = _WORD_BOUNDARY.sub(" ", name).replace("_", " ").split()
    return " ".join(words).capitalize()


def report_name(
    base: str,
    qualifier: str | None = None,
    report_type: ReportType | None = None,
) -> str:
    """Build a report name from a base token.

    Args:
        base: Text identifying the test or story (normalized here)
        qualifier: Optional suffix distinguishing otherwise identical reports
        report_type: Optional format; adds the matching file extension

    Returns:
        ``<base>[_<qualifier>][.<extension>]``

    Raises:
        InvalidIdentityError: If the base holds no letters or digits

    """
    name = normalize(base)
    if not name:
        raise InvalidIdentityError(f"Cannot derive a report name from {base!r}")

    if qualifier and (suffix := normalize(qualifier)):
        name = f"{name}_{suffix}"

    if report_type is not None:
        name = f"{name}.{report_type.extension}"

    return name


def scoped_base(test_token: str, story_title: str | None = None) -> str:
    """Base token of a test, prefixed by its story title when it has one."""
    if story_title and (story_token := normalize(story_title)):
        return f"{story_token}_{normalize(test_token)}"
    return normalize(test_token)
