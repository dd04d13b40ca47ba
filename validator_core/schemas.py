"""Pydantic schemas for coverage results and unit validation reports.

Field names are snake_case in Python and serialize with the camelCase keys
the report JSON has always used (``rulesOfEvidence``, ``performanceCriteria``).
Reports are frozen: built once per validation run, never mutated.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

LOOKS_GOOD_PC_PCT = 90
LOOKS_GOOD_KNOWLEDGE_PCT = 85


class Status(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class GapType(str, Enum):
    CRITICAL = "critical"
    IMPROVEMENT = "improvement"


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class _ReportModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RequirementItem(_ReportModel):
    """One performance criterion or knowledge statement to look for."""
    code: Optional[str] = None
    text: str = ""


class CoverageResult(_ReportModel):
    total: int = Field(default=0, ge=0)
    assessed: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)
    missing: list[str] = Field(default_factory=list)


class StatusEntry(_ReportModel):
    status: Status
    score: int = Field(..., ge=0, le=100)


class Gap(_ReportModel):
    type: GapType
    element: str
    description: str
    recommendation: str
    priority: Priority


class UnitRef(_ReportModel):
    code: str
    title: str = ""
    url: Optional[str] = None


class UnitCoverage(_ReportModel):
    performance_criteria: CoverageResult = Field(default_factory=CoverageResult)
    knowledge: CoverageResult = Field(default_factory=CoverageResult)


class RulesOfEvidence(_ReportModel):
    validity: StatusEntry
    sufficiency: StatusEntry
    authenticity: StatusEntry
    currency: StatusEntry


class PrinciplesOfAssessment(_ReportModel):
    fairness: StatusEntry
    flexibility: StatusEntry
    validity: StatusEntry
    reliability: StatusEntry


class UnitReport(_ReportModel):
    unit: UnitRef
    coverage: UnitCoverage
    rules_of_evidence: RulesOfEvidence
    principles_of_assessment: PrinciplesOfAssessment
    gaps: list[Gap] = Field(default_factory=list)

    @computed_field
    @property
    def overall(self) -> str:
        """Headline verdict: "Looks Good" at >=90% PC and >=85% knowledge coverage."""
        pc = self.coverage.performance_criteria.percentage
        ke = self.coverage.knowledge.percentage
        if pc >= LOOKS_GOOD_PC_PCT and ke >= LOOKS_GOOD_KNOWLEDGE_PCT:
            return "Looks Good"
        return "Needs Review"


class ReportCollection(BaseModel):
    """Ordered unit reports from one validation run plus the selected report."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reports: list[UnitReport] = Field(default_factory=list)
    active_index: int = 0

    @model_validator(mode="after")
    def _check_active_index(self) -> "ReportCollection":
        if self.reports:
            if not 0 <= self.active_index < len(self.reports):
                raise ValueError(
                    f"active_index {self.active_index} out of range for "
                    f"{len(self.reports)} reports"
                )
        elif self.active_index != 0:
            raise ValueError("active_index must be 0 for an empty collection")
        return self

    @property
    def active(self) -> Optional[UnitReport]:
        if not self.reports:
            return None
        return self.reports[self.active_index]

    def select(self, index: int) -> UnitReport:
        """Make ``reports[index]`` the active report and return it."""
        if not 0 <= index < len(self.reports):
            raise IndexError(
                f"Report index {index} out of range for {len(self.reports)} reports"
            )
        self.active_index = index
        return self.reports[index]
