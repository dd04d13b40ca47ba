"""Tests for the training.gov.au client."""

import httpx
import pytest

from validator_api.services.tga_client import TGALookupError, fetch_unit, parse_unit_page, unit_url

UNIT_PAGE = """
<html><body>
  <h1>MARN008 - Apply seamanship skills aboard a vessel up to 12 metres</h1>
  <div>
    <h2>Elements and Performance Criteria</h2>
    <table>
      <tr><th>Element</th><th>Performance criteria</th></tr>
      <tr><td>1.1</td><td>Maintain safe deck practices.</td></tr>
      <tr><td>1.2</td><td> Perform mooring operations. </td></tr>
      <tr><td>Element 2</td></tr>
      <tr><td></td><td>Orphan description</td></tr>
    </table>
  </div>
  <div>
    <h2>Knowledge Evidence</h2>
    <p>The candidate must demonstrate knowledge of:</p>
    <ul><li>Knots and splices.</li><li>  </li><li>Snap-back zones.</li></ul>
  </div>
</body></html>
"""


class TestParseUnitPage:
    """HTML parsing of a unit details page."""

    def test_parses_title_criteria_and_knowledge(self):
        unit = parse_unit_page("MARN008", UNIT_PAGE, "https://tga.test/MARN008")

        assert unit.unit.code == "MARN008"
        assert unit.unit.title.startswith("MARN008 - Apply seamanship")
        assert unit.url == "https://tga.test/MARN008"
        assert unit.source == "live"
        assert [(pc.pc_code, pc.description) for pc in unit.elements_and_pc] == [
            ("1.1", "Maintain safe deck practices."),
            ("1.2", "Perform mooring operations."),
        ]
        assert unit.knowledge_evidence == ["Knots and splices.", "Snap-back zones."]

    def test_missing_sections_give_empty_lists(self):
        unit = parse_unit_page("X", "<h1>Title only</h1>", "u")
        assert unit.elements_and_pc == []
        assert unit.knowledge_evidence == []

    def test_missing_title_raises(self):
        with pytest.raises(TGALookupError):
            parse_unit_page("X", "<html><body><p>maintenance</p></body></html>", "u")


class TestFetchUnit:
    """HTTP behaviour of fetch_unit()."""

    @pytest.mark.asyncio
    async def test_fetch_success(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["lang"] = request.headers.get("accept-language")
            return httpx.Response(200, text=UNIT_PAGE)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            unit = await fetch_unit("MARN008", client=client)

        assert seen["url"] == unit_url("MARN008")
        assert seen["lang"].startswith("en-AU")
        assert len(unit.elements_and_pc) == 2

    @pytest.mark.asyncio
    async def test_non_200_raises_with_status(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404, text="gone"))
        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(TGALookupError) as exc_info:
                await fetch_unit("NOPE001", client=client)
        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)


class TestUnitUrl:
    def test_code_is_escaped(self):
        assert unit_url("A B", base_url="https://tga.test/").endswith("/Training/Details/A%20B")
