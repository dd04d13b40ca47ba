"""Unit definition provider: cache → training.gov.au → mock fallback."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from validator_api.core.config import settings
from validator_api.services.mock_units import mock_unit
from validator_api.services.tga_client import fetch_unit, unit_url
from validator_api.services.unit_cache import UnitCache
from validator_shared.models import UnitDefinition

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[UnitDefinition]]


class UnitNotFoundError(LookupError):
    """A unit code could not be resolved to a definition."""


class UocProvider:
    """Resolves unit codes to definitions, caching every result by code."""

    def __init__(
        self,
        cache: UnitCache,
        fetcher: Fetcher = fetch_unit,
        use_fallback: bool = True,
    ) -> None:
        self._cache = cache
        self._fetch = fetcher
        self._use_fallback = use_fallback

    @property
    def cache(self) -> UnitCache:
        return self._cache

    async def get(self, raw_code: str) -> UnitDefinition:
        """Return the definition for *raw_code* (case-insensitive).

        Raises UnitNotFoundError for an empty code, or when the live lookup
        fails and the mock fallback is disabled.
        """
        code = str(raw_code or "").strip().upper()
        if not code:
            raise UnitNotFoundError("No code")

        cached = self._cache.get(code)
        if cached is not None:
            return cached

        try:
            definition = await self._fetch(code)
        except Exception as exc:
            if not self._use_fallback:
                logger.warning("TGA lookup failed for %s: %s", code, exc, extra={"unit_code": code})
                raise UnitNotFoundError(f"{code}: {exc}") from exc
            logger.warning(
                "TGA lookup failed for %s, serving mock unit: %s", code, exc,
                extra={"unit_code": code, "source": "fallback"},
            )
            definition = mock_unit(code, unit_url(code))

        self._cache.put(code, definition)
        return definition


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_provider: Optional[UocProvider] = None


def get_provider() -> UocProvider:
    global _provider
    if _provider is None:
        _provider = UocProvider(UnitCache(), use_fallback=settings.USE_MOCK_FALLBACK)
    return _provider
