"""Configuration for report naming and verdicts."""

from collections.abc import Sequence

from pydantic import BaseModel

from acceptance_report.naming import ReportType


class ReportConfig(BaseModel):
    """Settings passed explicitly to the reporting commands."""

    report_types: Sequence[ReportType] = (ReportType.HTML, ReportType.XML)
    # Treat a suite that is still pending as a failed build
    fail_on_pending: bool = False
