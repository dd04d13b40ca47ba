"""Per-unit validation report builder.

Combines the performance-criteria and knowledge-evidence coverage of one
unit into Rules of Evidence, Principles of Assessment and a list of gaps.
Also owns the two fixed failure reports (no unit detected, unit could not be
resolved) so every report in a collection has the same shape.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from validator_core.coverage import COVERAGE_THRESHOLD, evaluate_coverage, round_half_up
from validator_core.schemas import (
    CoverageResult,
    Gap,
    GapType,
    PrinciplesOfAssessment,
    Priority,
    RequirementItem,
    RulesOfEvidence,
    Status,
    StatusEntry,
    UnitCoverage,
    UnitRef,
    UnitReport,
)
from validator_shared.models import UnitDefinition

logger = logging.getLogger(__name__)

PC_WEIGHT = 0.6
KNOWLEDGE_WEIGHT = 0.4
MAX_GAPS_PER_KIND = 5

# (pass_at, warning_at) lower bounds
VALIDITY_THRESHOLDS = (85, 70)
SUFFICIENCY_THRESHOLDS = (90, 75)

# Placeholders: nothing in the assessment text is checked for these yet.
AUTHENTICITY = StatusEntry(status=Status.PASS, score=100)
CURRENCY = StatusEntry(status=Status.PASS, score=100)
FAIRNESS = StatusEntry(status=Status.PASS, score=95)
FLEXIBILITY = StatusEntry(status=Status.PASS, score=90)
RELIABILITY = StatusEntry(status=Status.PASS, score=92)

PC_GAP_DESCRIPTION = "Performance criterion not clearly evidenced in assessment text."
PC_GAP_RECOMMENDATION = "Add/clarify an assessment task or marking checklist item for this PC."
KNOWLEDGE_GAP_DESCRIPTION = "Knowledge evidence coverage could be strengthened."
KNOWLEDGE_GAP_RECOMMENDATION = (
    "Add a short-answer/scenario question to explicitly test this knowledge."
)

_FAILED = StatusEntry(status=Status.FAIL, score=0)
_UNKNOWN = StatusEntry(status=Status.WARNING, score=50)

UnitPayload = Union[UnitDefinition, Mapping[str, Any]]


def grade(score: int, thresholds: tuple[int, int]) -> StatusEntry:
    pass_at, warning_at = thresholds
    if score >= pass_at:
        status = Status.PASS
    elif score >= warning_at:
        status = Status.WARNING
    else:
        status = Status.FAIL
    return StatusEntry(status=status, score=score)


# ---------------------------------------------------------------------------
# Payload normalisation
# ---------------------------------------------------------------------------

def _as_dict(payload: UnitPayload) -> Mapping[str, Any]:
    if isinstance(payload, UnitDefinition):
        return payload.model_dump(by_alias=True)
    return payload


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _unit_ref(data: Mapping[str, Any]) -> UnitRef:
    """Prefer the nested ``unit`` block, fall back to top-level code/title."""
    nested = data.get("unit")
    if not isinstance(nested, Mapping):
        nested = {}
    if nested.get("code"):
        code, title = nested["code"], nested.get("title") or data.get("title")
    else:
        code, title = data.get("code"), data.get("title")
    url = data.get("url")
    return UnitRef(code=_text(code), title=_text(title), url=None if url is None else str(url))


def _pc_requirements(data: Mapping[str, Any]) -> list[RequirementItem]:
    return [
        RequirementItem(code=f"PC {pc['pcCode']}", text=str(pc["description"]))
        for pc in data.get("elementsAndPC") or []
        if isinstance(pc, Mapping) and pc.get("pcCode") and pc.get("description")
    ]


def _knowledge_requirements(data: Mapping[str, Any]) -> list[RequirementItem]:
    return [
        RequirementItem(code=f"K{i}", text=item if isinstance(item, str) else "")
        for i, item in enumerate(data.get("knowledgeEvidence") or [], start=1)
    ]


# ---------------------------------------------------------------------------
# Report construction
# ---------------------------------------------------------------------------

def _gaps(pc_cov: CoverageResult, ke_cov: CoverageResult) -> list[Gap]:
    gaps = [
        Gap(
            type=GapType.CRITICAL,
            element=label,
            description=PC_GAP_DESCRIPTION,
            recommendation=PC_GAP_RECOMMENDATION,
            priority=Priority.HIGH,
        )
        for label in pc_cov.missing[:MAX_GAPS_PER_KIND]
    ]
    gaps.extend(
        Gap(
            type=GapType.IMPROVEMENT,
            element=label,
            description=KNOWLEDGE_GAP_DESCRIPTION,
            recommendation=KNOWLEDGE_GAP_RECOMMENDATION,
            priority=Priority.MEDIUM,
        )
        for label in ke_cov.missing[:MAX_GAPS_PER_KIND]
    )
    return gaps


def build_unit_report(
    definition: UnitPayload,
    text: Optional[str],
    threshold: float = COVERAGE_THRESHOLD,
) -> UnitReport:
    """Score one resolved unit definition against the assessment text."""
    data = _as_dict(definition)
    unit = _unit_ref(data)

    pc_cov = evaluate_coverage(text, _pc_requirements(data), threshold)
    ke_cov = evaluate_coverage(text, _knowledge_requirements(data), threshold)

    validity = pc_cov.percentage
    sufficiency = round_half_up(
        min(100, pc_cov.percentage * PC_WEIGHT + ke_cov.percentage * KNOWLEDGE_WEIGHT)
    )
    validity_entry = grade(validity, VALIDITY_THRESHOLDS)

    report = UnitReport(
        unit=unit,
        coverage=UnitCoverage(performance_criteria=pc_cov, knowledge=ke_cov),
        rules_of_evidence=RulesOfEvidence(
            validity=validity_entry,
            sufficiency=grade(sufficiency, SUFFICIENCY_THRESHOLDS),
            authenticity=AUTHENTICITY,
            currency=CURRENCY,
        ),
        principles_of_assessment=PrinciplesOfAssessment(
            fairness=FAIRNESS,
            flexibility=FLEXIBILITY,
            validity=validity_entry,
            reliability=RELIABILITY,
        ),
        gaps=_gaps(pc_cov, ke_cov),
    )
    logger.info(
        "Unit %s: PC %d/%d, knowledge %d/%d, sufficiency %d",
        unit.code, pc_cov.assessed, pc_cov.total, ke_cov.assessed, ke_cov.total,
        sufficiency,
        extra={"unit_code": unit.code, "coverage_pct": pc_cov.percentage},
    )
    return report


def _failure_report(unit: UnitRef, gap: Gap) -> UnitReport:
    return UnitReport(
        unit=unit,
        coverage=UnitCoverage(),
        rules_of_evidence=RulesOfEvidence(
            validity=_FAILED,
            sufficiency=_FAILED,
            authenticity=_UNKNOWN,
            currency=_UNKNOWN,
        ),
        principles_of_assessment=PrinciplesOfAssessment(
            fairness=_UNKNOWN,
            flexibility=_UNKNOWN,
            validity=_FAILED,
            reliability=_UNKNOWN,
        ),
        gaps=[gap],
    )


def no_unit_detected_report() -> UnitReport:
    return _failure_report(
        UnitRef(code="N/A", title="No UoC detected"),
        Gap(
            type=GapType.CRITICAL,
            element="UoC",
            description="No valid UoC detected in document.",
            recommendation=(
                "Ensure the assessment references the correct Unit code(s) "
                "per Training.gov.au."
            ),
            priority=Priority.HIGH,
        ),
    )


def unresolved_unit_report(code: str) -> UnitReport:
    return _failure_report(
        UnitRef(code=code, title="No TGA details available"),
        Gap(
            type=GapType.CRITICAL,
            element=code,
            description="Could not fetch details from training.gov.au for this code.",
            recommendation="Check the unit code or try again later.",
            priority=Priority.HIGH,
        ),
    )
