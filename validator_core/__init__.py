"""Coverage-scoring and gap-analysis engine for assessment validation."""

from validator_core.aggregator import build_unit_reports
from validator_core.coverage import COVERAGE_THRESHOLD, evaluate_coverage
from validator_core.report_builder import (
    build_unit_report,
    no_unit_detected_report,
    unresolved_unit_report,
)
from validator_core.schemas import CoverageResult, ReportCollection, UnitReport
from validator_core.tokenizer import tokenize

__all__ = [
    "COVERAGE_THRESHOLD",
    "CoverageResult",
    "ReportCollection",
    "UnitReport",
    "build_unit_report",
    "build_unit_reports",
    "evaluate_coverage",
    "no_unit_detected_report",
    "tokenize",
    "unresolved_unit_report",
]
