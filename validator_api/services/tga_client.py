"""HTTP client for unit details on training.gov.au.

The registry has no public JSON API for unit content, so the unit page is
scraped. Parsing is best-effort: the title is required, performance criteria
and knowledge evidence are read when the expected sections are present.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Optional
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup, Tag

from validator_api.core.config import settings
from validator_shared.models import PerformanceCriterion, UnitDefinition, UnitInfo

logger = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/123 Safari/537.36"
    ),
    "Accept-Language": "en-AU,en;q=0.9",
}

_PC_HEADING = re.compile(r"elements.*performance criteria", re.IGNORECASE)
_KE_HEADING = re.compile(r"knowledge evidence", re.IGNORECASE)


class TGALookupError(RuntimeError):
    """The registry page could not be fetched or had no recognisable content."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def unit_url(code: str, base_url: Optional[str] = None) -> str:
    base = (base_url or settings.TGA_BASE_URL).rstrip("/")
    return f"{base}/Training/Details/{quote(code, safe='')}"


def _first_heading(soup: BeautifulSoup, pattern: re.Pattern) -> Optional[Tag]:
    for heading in soup.find_all(["h2", "h3"]):
        if pattern.search(heading.get_text()):
            return heading
    return None


def _parse_performance_criteria(soup: BeautifulSoup) -> list[PerformanceCriterion]:
    heading = _first_heading(soup, _PC_HEADING)
    if heading is None or heading.parent is None:
        return []
    criteria: list[PerformanceCriterion] = []
    for row in heading.parent.find_all("tr"):
        cols = row.find_all("td")
        if len(cols) < 2:
            continue
        pc_code = cols[0].get_text().strip()
        description = cols[1].get_text().strip()
        if pc_code and description:
            criteria.append(PerformanceCriterion(pc_code=pc_code, description=description))
    return criteria


def _parse_knowledge_evidence(soup: BeautifulSoup) -> list[str]:
    heading = _first_heading(soup, _KE_HEADING)
    if heading is None:
        return []
    items = heading.find_next_sibling("ul")
    if items is None:
        return []
    return [t for t in (li.get_text().strip() for li in items.find_all("li")) if t]


def parse_unit_page(code: str, html: str, url: str) -> UnitDefinition:
    """Parse a unit details page into a UnitDefinition.

    Raises TGALookupError if the page has no title.
    """
    soup = BeautifulSoup(html, "html.parser")
    h1 = soup.find("h1")
    title = h1.get_text().strip() if h1 else ""
    if not title:
        raise TGALookupError("No title on page (unexpected TGA markup)")

    return UnitDefinition(
        unit=UnitInfo(code=code, title=title),
        url=url,
        elements_and_pc=_parse_performance_criteria(soup),
        knowledge_evidence=_parse_knowledge_evidence(soup),
        source="live",
    )


async def fetch_unit(
    code: str,
    client: Optional[httpx.AsyncClient] = None,
) -> UnitDefinition:
    """Fetch and parse one unit from the registry.

    Raises TGALookupError on a non-200 response or unparseable page;
    transport errors propagate as httpx exceptions.
    """
    url = unit_url(code)
    start = time.perf_counter()

    if client is None:
        async with httpx.AsyncClient(
            timeout=settings.TGA_TIMEOUT_SECONDS, follow_redirects=True
        ) as own_client:
            resp = await own_client.get(url, headers=_HEADERS)
    else:
        resp = await client.get(url, headers=_HEADERS)

    latency_ms = (time.perf_counter() - start) * 1000
    if resp.status_code != 200:
        raise TGALookupError(f"TGA returned {resp.status_code}", resp.status_code)

    definition = parse_unit_page(code, resp.text, url)
    logger.info(
        "TGA unit %s: %d PCs, %d knowledge items (%.1f ms)",
        code, len(definition.elements_and_pc), len(definition.knowledge_evidence), latency_ms,
        extra={"unit_code": code, "latency_ms": latency_ms},
    )
    return definition
