"""Load recorded test runs from YAML files."""

import logging
from pathlib import Path

import yaml

from acceptance_report.models.record import RunRecord

log = logging.getLogger(__name__)


def load_run_record(results_path: Path) -> RunRecord:
    """Load and validate a recorded run.

    Args:
        results_path: Path to the results YAML file

    Returns:
        The validated run record

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the content does not match the schema

    """
    if not results_path.is_file():
        raise FileNotFoundError(f"Results file not found: {results_path}")

    log.debug("Loading recorded run from %s", results_path)
    data = yaml.safe_load(results_path.read_text(encoding="utf-8")) or {}

    return RunRecord.model_validate(data)
