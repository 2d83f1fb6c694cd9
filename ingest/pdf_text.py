from __future__ import annotations

import fitz  # PyMuPDF

from resource_ai.exceptions import ExtractionError


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract the embedded text layer of a PDF, page by page.

    No OCR: scanned documents come back empty and are rejected upstream.
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise ExtractionError(f"Could not open PDF: {e}") from e

    try:
        pages = [page.get_text() for page in doc]
    except Exception as e:
        raise ExtractionError(f"Could not read PDF text: {e}") from e
    finally:
        doc.close()

    return "\n".join(pages)
