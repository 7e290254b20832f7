"""Parameter sets of data-driven tests."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from acceptance_report.naming import normalize


@dataclass(frozen=True, kw_only=True)
class ParameterSet:
    """One row of test data, run as its own test."""

    index: int
    values: Sequence[Any]

    @property
    def name(self) -> str:
        """Display name of the run, taken from its first value."""
        first = self.values[0] if self.values else self.index
        return f"[{first}]"

    @property
    def qualifier(self) -> str:
        """Report name qualifier distinguishing this run from its siblings.

        Rows may share a first value, so the row index is always included.
        """
        if self.values and (token := normalize(str(self.values[0]))):
            return f"{self.index}_{token}"
        return str(self.index)

    def test_name(self, method_name: str) -> str:
        """Runner-facing name of a test method run with this parameter set."""
        return f"{method_name}[{self.index}]"


def parameter_sets(rows: Iterable[Sequence[Any]]) -> Sequence[ParameterSet]:
    """Number test data rows in the order the runner executes them."""
    return [
        ParameterSet(index=index, values=tuple(row)) for index, row in enumerate(rows)
    ]
