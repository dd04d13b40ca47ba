"""FastAPI application entrypoint for the RTO assessment validator API.

Responsibilities:
  - Extract text and unit codes from uploaded assessments
  - Resolve unit codes to definitions (training.gov.au, mock fallback, cache)
  - Score assessment coverage per unit via validator_core

NOT responsible for:
  - Rendering reports (the client does that from the JSON)
  - Persisting uploads or reports
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from validator_shared.logging_config import setup_logging
from validator_api.core.config import settings
from validator_api.routers import extract, uoc, validate

setup_logging()

app = FastAPI(
    title="RTO Assessment Validator",
    version="1.0.0",
    description="Detects units of competency in assessments and scores their coverage",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(extract.router, prefix="/api", tags=["extract"])
app.include_router(uoc.router, prefix="/api", tags=["uoc"])
app.include_router(validate.router, prefix="/api", tags=["validate"])


@app.on_event("startup")
async def startup_event() -> None:
    logger = logging.getLogger(__name__)

    from validator_api.services.uoc_provider import get_provider
    get_provider()
    logger.info(
        "Unit provider ready: TGA=%s fallback=%s threshold=%.2f",
        settings.TGA_BASE_URL, settings.USE_MOCK_FALLBACK, settings.COVERAGE_THRESHOLD,
    )


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": "rto-validator-api"}
