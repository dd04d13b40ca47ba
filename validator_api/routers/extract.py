"""Assessment upload endpoint.

Extracts plain text from a .docx/.txt/.pdf upload and detects the unit
codes mentioned in it. Nothing is stored; the client posts the text and
codes back to /api/validate.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile

from validator_api.core.config import settings
from validator_api.services.text_extraction import extract_text
from validator_api.services.uoc_detector import find_uoc_candidates
from validator_shared.models import ExtractResponse

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_SIZE = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024


@router.post("/extract", response_model=ExtractResponse)
@router.post("/auto-detect", response_model=ExtractResponse, include_in_schema=False)
async def extract(assessment: Optional[UploadFile] = File(None)) -> ExtractResponse:
    """Upload an assessment (field name ``assessment``) and detect unit codes."""
    if assessment is None:
        raise HTTPException(
            status_code=400,
            detail="No file uploaded (field name must be 'assessment').",
        )

    content = await assessment.read()
    if len(content) > MAX_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max {settings.MAX_UPLOAD_SIZE_MB} MB.",
        )

    filename = assessment.filename or ""
    try:
        text = extract_text(filename, assessment.content_type or "", content)
    except ValueError as e:
        # UnsupportedFileTypeError and unreadable PDFs
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Extract failed for %s", filename)
        raise HTTPException(status_code=500, detail="Failed to process file")

    detected = find_uoc_candidates(text)
    logger.info(
        "Extracted %s: %d characters, %d unit codes detected",
        filename, len(text), len(detected),
    )
    return ExtractResponse(text=text, detected=detected)
