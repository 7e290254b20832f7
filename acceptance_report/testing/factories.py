"""Test factories for generating recorded runs."""

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from acceptance_report.models.record import OutcomeRecord, RunRecord, StepRecord


class StepRecordFactory(ModelFactory[StepRecord]):
    """Factory for StepRecord."""


class OutcomeRecordFactory(ModelFactory[OutcomeRecord]):
    """Factory for OutcomeRecord."""

    method_name = "should_do_this"
    qualifier = None
    steps = Use(list[StepRecord])


class RunRecordFactory(ModelFactory[RunRecord]):
    """Factory for RunRecord."""

    outcomes = Use(list[OutcomeRecord])
