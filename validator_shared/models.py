"""Wire models shared by the gateway and the scoring core.

The unit-definition payload keeps the camelCase keys the lookup endpoint
has always returned (``elementsAndPC``, ``knowledgeEvidence``) so existing
clients keep working.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

UnitSource = Literal["live", "fallback"]


class UnitInfo(BaseModel):
    code: str
    title: str = ""


class PerformanceCriterion(BaseModel):
    """One row of the "Elements and Performance Criteria" table."""
    model_config = ConfigDict(populate_by_name=True)

    pc_code: str = Field(default="", alias="pcCode")
    description: str = ""


class UnitDefinition(BaseModel):
    """Resolved definition of a unit of competency."""
    model_config = ConfigDict(populate_by_name=True)

    unit: UnitInfo
    url: Optional[str] = None
    elements_and_pc: list[PerformanceCriterion] = Field(
        default_factory=list, alias="elementsAndPC"
    )
    knowledge_evidence: list[str] = Field(
        default_factory=list, alias="knowledgeEvidence"
    )
    source: UnitSource = "live"


class UnitNotFound(BaseModel):
    """Body returned by the lookup endpoint when a code cannot be resolved."""
    found: bool = False
    code: str
    error: str = "Not found"


class ExtractResponse(BaseModel):
    """Plain text of an uploaded assessment plus the unit codes detected in it."""
    text: str
    detected: list[str] = Field(default_factory=list)


class ValidateRequest(BaseModel):
    """Assessment text and the unit codes to validate it against."""
    text: str = Field(default="", max_length=2_000_000)
    codes: list[str] = Field(default_factory=list)
