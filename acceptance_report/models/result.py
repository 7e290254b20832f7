"""Result kinds recorded for test steps and test runs."""

from dataclasses import dataclass
from enum import StrEnum


class TestResult(StrEnum):
    """Outcome classification of a single test step or test run."""

    __test__ = False

    SUCCESS = "success"
    FAILURE = "failure"
    IGNORED = "ignored"
    SKIPPED = "skipped"
    PENDING = "pending"
    ERROR = "error"


@dataclass(frozen=True, kw_only=True)
class TestStep:
    """A single recorded step result.

    The description is whatever the runner knows about the step; it plays no
    part in aggregation.
    """

    __test__ = False

    result: TestResult
    description: str | None = None
