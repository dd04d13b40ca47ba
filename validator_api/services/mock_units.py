"""Built-in unit definitions served when training.gov.au is unreachable.

These are plausible examples for exercising validation end to end, not
authoritative unit content. Titles carry a "(Mock)" suffix so reports make
the substitution visible.
"""

from __future__ import annotations

from validator_shared.models import PerformanceCriterion, UnitDefinition, UnitInfo


def _unit(code: str, title: str, pcs: list[tuple[str, str]], knowledge: list[str]) -> dict:
    return {
        "unit": UnitInfo(code=code, title=title),
        "elements_and_pc": [PerformanceCriterion(pc_code=c, description=d) for c, d in pcs],
        "knowledge_evidence": knowledge,
    }


MOCK_UNITS: dict[str, dict] = {
    "MARN008": _unit(
        "MARN008",
        "Apply seamanship skills aboard a vessel up to 12 metres (Mock)",
        [
            ("1.1", "Maintain safe deck practices and housekeeping."),
            ("1.2", "Perform mooring and anchoring operations."),
            ("2.1", "Handle lines, ropes and knots for small vessel operations."),
        ],
        [
            "Basic seamanship terminology and safety practices.",
            "Characteristics and safe use of common knots and splices.",
            "Hazards associated with lines under load and snap-back zones.",
        ],
    ),
    "MARJ006": _unit(
        "MARJ006",
        "Follow environmental work practices (Mock)",
        [
            ("1.1", "Identify environmental requirements in the work area."),
            ("1.2", "Handle waste, spills and emissions correctly."),
        ],
        [
            "Company procedures for waste segregation and disposal.",
            "Reporting requirements for environmental incidents.",
        ],
    ),
    "MARK007": _unit(
        "MARK007",
        "Handle a vessel up to 24 metres (Mock)",
        [
            ("1.1", "Plan and conduct basic manoeuvres considering wind and tide."),
            ("1.2", "Use helm and engine controls to maintain course and speed."),
        ],
        [
            "Effects of wind, tide and current on vessel handling.",
            "Use of propulsion and rudder to pivot and stop a vessel.",
        ],
    ),
    "MARC037": _unit(
        "MARC037",
        "Operate deck machinery (Mock)",
        [
            ("1.1", "Prepare, operate and secure windlass and capstan safely."),
            ("1.2", "Communicate effectively during lifting operations."),
        ],
        [
            "Safe working loads and risk controls for deck machinery.",
            "Lock-out/tag-out procedures.",
        ],
    ),
    "MARI003": _unit(
        "MARI003",
        "Comply with regulations to ensure safe operation (Mock)",
        [
            ("1.1", "Identify applicable maritime regulations and codes."),
            ("1.2", "Apply organisational procedures to maintain compliance."),
        ],
        [
            "Key provisions of local marine safety legislation.",
            "Recordkeeping and reporting obligations.",
        ],
    ),
}


def mock_unit(code: str, url: str) -> UnitDefinition:
    """Return the mock definition for *code*, or a generic one for unknown codes."""
    fields = MOCK_UNITS.get(code) or _unit(
        code,
        f"{code} (Mock Unit for testing)",
        [
            ("1.1", "Example performance criterion."),
            ("1.2", "Another performance criterion."),
        ],
        ["Example knowledge item A.", "Example knowledge item B."],
    )
    return UnitDefinition(**fields, url=url, source="fallback")
