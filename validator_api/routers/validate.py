"""Validation endpoint: score assessment text against detected units."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from validator_api.core.config import settings
from validator_api.services.uoc_provider import get_provider
from validator_core import ReportCollection, build_unit_reports
from validator_shared.models import ValidateRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/validate", response_model=ReportCollection)
async def validate(request: ValidateRequest) -> ReportCollection:
    """Build one report per unit code, in the order the codes were given.

    Units are resolved concurrently; a unit that cannot be resolved gets a
    failure report instead of failing the request. With no codes the
    collection holds a single "No UoC detected" report.
    """
    logger.info(
        "Validating %d characters against %d units",
        len(request.text), len(request.codes),
    )
    return await build_unit_reports(
        request.text,
        request.codes,
        get_provider().get,
        threshold=settings.COVERAGE_THRESHOLD,
    )
