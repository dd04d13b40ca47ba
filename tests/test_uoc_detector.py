"""Tests for unit code candidate detection."""

from validator_api.services.uoc_detector import find_uoc_candidates


class TestFindUocCandidates:
    """Tests for find_uoc_candidates()."""

    def test_detects_codes_in_order(self):
        text = "This assessment covers MARN008, MARJ006 and HLTAID011."
        assert find_uoc_candidates(text) == ["MARN008", "MARJ006", "HLTAID011"]

    def test_case_insensitive(self):
        assert find_uoc_candidates("unit bsbops201 workbook") == ["BSBOPS201"]

    def test_deduplicates_keeping_first_occurrence(self):
        text = "MARK007 ... MARN008 ... MARK007 again"
        assert find_uoc_candidates(text) == ["MARK007", "MARN008"]

    def test_blacklisted_identifiers_ignored(self):
        text = "Saved as PDF2023 per ISO9001 during COVID19 for MARI003"
        assert find_uoc_candidates(text) == ["MARI003"]

    def test_rejects_non_code_shapes(self):
        """Too few letters, too many digits or no digits do not match."""
        assert find_uoc_candidates("AB12 ABC12345 ABCDEF 2023") == []

    def test_empty_text(self):
        assert find_uoc_candidates("") == []
        assert find_uoc_candidates(None) == []
