"""In-memory unit definition cache.

One entry per unit code, no eviction, lives for the process. Definitions
are treated as immutable once fetched, so concurrent lookups that race on
the same code simply overwrite each other with equivalent payloads.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from validator_shared.models import UnitDefinition

logger = logging.getLogger(__name__)


class UnitCache:
    """Thread-safe dict of unit code → UnitDefinition."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, UnitDefinition] = {}

    def get(self, code: str) -> Optional[UnitDefinition]:
        return self._entries.get(code)

    def put(self, code: str, definition: UnitDefinition) -> None:
        with self._lock:
            self._entries[code] = definition
        logger.debug("Cached unit %s (source=%s)", code, definition.source)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)
