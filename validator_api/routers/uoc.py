"""Unit lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from validator_api.services.uoc_provider import UnitNotFoundError, get_provider
from validator_shared.models import UnitDefinition, UnitNotFound

router = APIRouter()


@router.get(
    "/uoc/{code}",
    response_model=UnitDefinition,
    responses={404: {"model": UnitNotFound}},
)
async def get_uoc(code: str):
    """Return the unit definition for *code*.

    Served from the in-memory cache when possible, then training.gov.au,
    then the built-in mock table. Responds 404 with ``found: false`` when
    none of them can resolve the code.
    """
    try:
        return await get_provider().get(code)
    except UnitNotFoundError as exc:
        return JSONResponse(
            status_code=404,
            content=UnitNotFound(code=code, error=str(exc) or "Not found").model_dump(),
        )
