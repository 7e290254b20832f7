"""Tests for data-driven parameter sets."""

import pytest

from acceptance_report.parameters import ParameterSet, parameter_sets


def test_parameter_sets_are_numbered_in_order() -> None:
    """Numbers rows from zero in iteration order."""
    sets = parameter_sets([["alice", 1], ["bob", 2]])

    assert sets == [
        ParameterSet(index=0, values=("alice", 1)),
        ParameterSet(index=1, values=("bob", 2)),
    ]


def test_parameter_sets_empty() -> None:
    """Returns no parameter sets for no rows."""
    assert parameter_sets([]) == []


def test_name_uses_first_value() -> None:
    """Displays the first value in brackets."""
    assert ParameterSet(index=3, values=("alice", 1)).name == "[alice]"


def test_name_without_values_uses_index() -> None:
    """Displays the index when the row is empty."""
    assert ParameterSet(index=3, values=()).name == "[3]"


def test_test_name() -> None:
    """Suffixes the method name with the row index."""
    parameter_set = ParameterSet(index=4, values=("alice",))

    assert parameter_set.test_name("should_log_in") == "should_log_in[4]"


@pytest.mark.parametrize(
    ("parameter_set", "expected"),
    [
        (ParameterSet(index=0, values=("Alice Smith", 30)), "0_alice_smith"),
        (ParameterSet(index=1, values=(42,)), "1_42"),
        (ParameterSet(index=2, values=("!!",)), "2"),
        (ParameterSet(index=5, values=()), "5"),
    ],
)
def test_qualifier(parameter_set: ParameterSet, expected: str) -> None:
    """Qualifies with the index and the normalized first value."""
    assert parameter_set.qualifier == expected


def test_qualifiers_differ_for_repeated_values() -> None:
    """Keeps rows with the same first value apart."""
    first, second = parameter_sets([["alice", 1], ["alice", 2]])

    assert first.qualifier != second.qualifier
