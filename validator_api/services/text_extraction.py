"""Assessment text extraction for .docx, .txt and .pdf uploads."""

from __future__ import annotations

import io
import logging

from docx import Document
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

MAX_PAGES = 100
MAX_TEXT_LENGTH = 500_000

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class UnsupportedFileTypeError(ValueError):
    """Raised for uploads that are neither Word, plain text nor PDF."""


def _kind(filename: str, content_type: str) -> str | None:
    name = filename.lower()
    if "wordprocessingml.document" in content_type or name.endswith(".docx"):
        return "docx"
    if "text/plain" in content_type or name.endswith(".txt"):
        return "txt"
    if content_type == "application/pdf" or name.endswith(".pdf"):
        return "pdf"
    return None


def extract_text_from_docx(content: bytes) -> str:
    """Return the paragraph and table text of a .docx document."""
    document = Document(io.BytesIO(content))
    lines = [p.text for p in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.extend(cell.text for cell in row.cells)
    return "\n".join(lines).strip()


def extract_text_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes.

    Raises ValueError if the PDF is too large or extraction fails.
    """
    reader = PdfReader(io.BytesIO(content))

    if len(reader.pages) > MAX_PAGES:
        raise ValueError(f"PDF has {len(reader.pages)} pages, maximum is {MAX_PAGES}")

    full_text = "\n\n".join(page.extract_text() or "" for page in reader.pages).strip()
    if not full_text:
        raise ValueError("Could not extract any text from PDF")

    logger.info("Extracted %d characters from %d page PDF", len(full_text), len(reader.pages))
    return full_text


def extract_text(filename: str, content_type: str, content: bytes) -> str:
    """Return the plain text of an uploaded assessment file.

    Raises UnsupportedFileTypeError for anything that is not .docx/.txt/.pdf.
    """
    kind = _kind(filename or "", content_type or "")
    if kind is None:
        raise UnsupportedFileTypeError(
            f"Unsupported file type: {content_type or filename}"
        )

    if kind == "docx":
        text = extract_text_from_docx(content)
    elif kind == "pdf":
        text = extract_text_from_pdf(content)
    else:
        text = content.decode("utf-8", errors="replace")

    if len(text) > MAX_TEXT_LENGTH:
        logger.warning("Truncating extracted text from %d to %d chars", len(text), MAX_TEXT_LENGTH)
        text = text[:MAX_TEXT_LENGTH]
    return text
