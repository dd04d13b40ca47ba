"""Regex-based unit-of-competency code detector.

Finds tokens that look like unit codes (MARN008, HLTAID011, BSBOPS201) in
free text. Detection is a candidate list only: codes are confirmed when the
provider resolves them.
"""

from __future__ import annotations

import re

UOC_CANDIDATE = re.compile(r"\b([A-Z]{3,10}[A-Z]*\d{2,4})\b")

# Look like unit codes but are document/standard identifiers
BLACKLIST: frozenset[str] = frozenset({
    "PDF2023", "DOCX2021", "COVID19", "ABN2021", "ISO9001",
})

_HAS_LETTER = re.compile(r"[A-Z]")
_HAS_DIGIT = re.compile(r"\d")


def find_uoc_candidates(text: str | None) -> list[str]:
    """Return candidate unit codes in *text*, de-duplicated, first occurrence first."""
    if not text:
        return []
    hits: dict[str, None] = {}
    for match in UOC_CANDIDATE.finditer(text.upper()):
        code = match.group(1)
        if code in BLACKLIST:
            continue
        if _HAS_LETTER.search(code) and _HAS_DIGIT.search(code):
            hits.setdefault(code, None)
    return list(hits)
