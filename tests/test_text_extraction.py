"""Tests for assessment text extraction."""

from io import BytesIO

import pytest
from docx import Document

from validator_api.services.text_extraction import (
    DOCX_CONTENT_TYPE,
    UnsupportedFileTypeError,
    extract_text,
)


def _docx_bytes():
    document = Document()
    document.add_paragraph("Assessment tool for MARN008")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "PC 1.1"
    table.rows[0].cells[1].text = "Perform mooring operations"
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class TestExtractText:
    """Dispatch on file name and content type."""

    def test_plain_text(self):
        assert extract_text("task.txt", "text/plain", "Knots & splices".encode()) == "Knots & splices"

    def test_plain_text_by_extension(self):
        assert extract_text("TASK.TXT", "application/octet-stream", b"helm") == "helm"

    def test_invalid_utf8_is_replaced(self):
        assert extract_text("a.txt", "text/plain", b"ok \xff") == "ok \ufffd"

    def test_docx_paragraphs_and_tables(self):
        text = extract_text("tool.docx", DOCX_CONTENT_TYPE, _docx_bytes())
        assert "Assessment tool for MARN008" in text
        assert "Perform mooring operations" in text

    def test_docx_detected_by_extension(self):
        text = extract_text("tool.docx", "", _docx_bytes())
        assert "MARN008" in text

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            extract_text("photo.png", "image/png", b"\x89PNG")
        assert "image/png" in str(exc_info.value)

    def test_unsupported_is_value_error(self):
        """Routers translate ValueError into a 400."""
        assert issubclass(UnsupportedFileTypeError, ValueError)
