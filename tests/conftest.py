"""Shared fixtures for validator tests."""

import pytest


@pytest.fixture
def seamanship_payload():
    """Unit payload in the nested shape returned by the lookup endpoint."""
    return {
        "unit": {"code": "MARN008", "title": "Apply seamanship skills aboard a vessel up to 12 metres"},
        "url": "https://training.gov.au/Training/Details/MARN008",
        "elementsAndPC": [
            {"pcCode": "1.1", "description": "Maintain safe deck practices and housekeeping."},
            {"pcCode": "1.2", "description": "Perform mooring and anchoring operations."},
            {"pcCode": "2.1", "description": "Handle lines, ropes and knots for small vessel operations."},
        ],
        "knowledgeEvidence": [
            "Basic seamanship terminology and safety practices.",
            "Characteristics and safe use of common knots and splices.",
            "Hazards associated with lines under load and snap-back zones.",
        ],
        "source": "live",
    }


@pytest.fixture
def seamanship_assessment():
    """Assessment text that evidences every MARN008 criterion and knowledge item."""
    return (
        "Task 1: Maintain safe deck practices and keep housekeeping to standard.\n"
        "Task 2: Perform mooring and anchoring operations under supervision.\n"
        "Task 3: Handle lines, ropes and tie knots used in small vessel operations.\n"
        "Questions: explain basic seamanship terminology and safety practices; "
        "describe characteristics and safe use of common knots and splices; "
        "identify hazards of lines under load and snap-back zones."
    )
