"""Multi-unit aggregation.

Resolves every detected unit code concurrently through an injected resolver
and builds one report per code, in the order the codes were given. A unit
that cannot be resolved gets a standard failure report; it never stops the
other units from being scored.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Mapping, Sequence
from typing import Any, Callable, Optional, Union

from validator_core.coverage import COVERAGE_THRESHOLD
from validator_core.report_builder import (
    UnitPayload,
    build_unit_report,
    no_unit_detected_report,
    unresolved_unit_report,
)
from validator_core.schemas import ReportCollection, UnitReport

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Union[Optional[UnitPayload], Awaitable[Optional[UnitPayload]]]]


async def _resolve(resolve: Resolver, code: str) -> Optional[UnitPayload]:
    if inspect.iscoroutinefunction(resolve):
        result = resolve(code)
    else:
        # Plain callables may block (cache files, sync HTTP); keep them off the loop
        result = await asyncio.to_thread(resolve, code)
    if inspect.isawaitable(result):
        result = await result
    return result


def _is_not_found(payload: Any) -> bool:
    if payload is None:
        return True
    return isinstance(payload, Mapping) and payload.get("found") is False


def _build_or_fail(
    code: str, payload: UnitPayload, text: Optional[str], threshold: float
) -> UnitReport:
    try:
        return build_unit_report(payload, text, threshold)
    except Exception as exc:
        logger.warning(
            "Malformed definition for unit %s: %s", code, exc,
            extra={"unit_code": code},
        )
        return unresolved_unit_report(code)


async def build_unit_reports(
    text: Optional[str],
    codes: Sequence[str],
    resolve: Resolver,
    threshold: float = COVERAGE_THRESHOLD,
) -> ReportCollection:
    """Build the report collection for *codes* against the assessment *text*.

    ``resolve`` maps a unit code to its definition (sync or async). Sync
    resolvers run in worker threads so lookups still overlap. Raising,
    returning None, or returning a payload with ``found: False`` all mark the
    unit as unresolved.
    """
    if not codes:
        logger.info("No unit codes detected; returning placeholder report")
        return ReportCollection(reports=[no_unit_detected_report()], active_index=0)

    start = time.perf_counter()
    results = await asyncio.gather(
        *(_resolve(resolve, code) for code in codes),
        return_exceptions=True,
    )

    reports: list[UnitReport] = []
    for code, result in zip(codes, results):
        if isinstance(result, BaseException):
            logger.warning(
                "Could not resolve unit %s: %s", code, result,
                extra={"unit_code": code},
            )
            reports.append(unresolved_unit_report(code))
        elif _is_not_found(result):
            logger.warning("Unit %s not found", code, extra={"unit_code": code})
            reports.append(unresolved_unit_report(code))
        else:
            reports.append(_build_or_fail(code, result, text, threshold))

    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Built %d unit reports in %.1f ms", len(reports), latency_ms,
        extra={"latency_ms": latency_ms},
    )
    return ReportCollection(reports=reports, active_index=0)
