"""Token-overlap coverage evaluator.

A requirement counts as covered when at least ``threshold`` of its
significant words appear anywhere in the assessment text. No LLM, no
embeddings: the same inputs always give the same result.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from validator_core.schemas import CoverageResult, RequirementItem
from validator_core.tokenizer import tokenize, word_tokens

COVERAGE_THRESHOLD = 0.35
MISSING_LABEL_CHARS = 60

Requirement = Union[RequirementItem, Mapping[str, Any]]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative scores used here."""
    return int(math.floor(value + 0.5))


def _fields(requirement: Requirement) -> tuple[Optional[str], str]:
    if isinstance(requirement, Mapping):
        code, text = requirement.get("code"), requirement.get("text")
    else:
        code, text = getattr(requirement, "code", None), getattr(requirement, "text", None)
    code = str(code) if code not in (None, "") else None
    text = str(text) if text not in (None, "") else ""
    return code, text


def evaluate_coverage(
    text: Optional[str],
    requirements: Optional[Iterable[Requirement]],
    threshold: float = COVERAGE_THRESHOLD,
) -> CoverageResult:
    """Score how many *requirements* are evidenced in *text*.

    Requirements whose text has no significant words are skipped entirely and
    count toward neither ``total`` nor ``missing``. Missing items are labelled
    by code, or by the first 60 characters of their text when uncoded.
    """
    haystack = tokenize(text)
    total = 0
    assessed = 0
    missing: list[str] = []

    for requirement in requirements or ():
        code, req_text = _fields(requirement)
        needle = word_tokens(req_text)
        if not needle:
            continue
        total += 1

        present = sum(1 for token in needle if token in haystack)
        if present / len(needle) >= threshold:
            assessed += 1
        else:
            missing.append(code or req_text[:MISSING_LABEL_CHARS])

    percentage = round_half_up(assessed * 100 / total) if total else 0
    return CoverageResult(
        total=total,
        assessed=assessed,
        percentage=percentage,
        missing=missing,
    )
