"""Text acquisition for library resources: download, PDF parsing, fallbacks."""

from .fetcher import HttpObjectFetcher
from .pdf_text import extract_pdf_text
from .text_acquisition import acquire_text, is_pdf

__all__ = [
    "HttpObjectFetcher",
    "extract_pdf_text",
    "acquire_text",
    "is_pdf",
]
