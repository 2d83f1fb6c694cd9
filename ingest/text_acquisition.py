from __future__ import annotations

import logging
from urllib.parse import urlparse

from resource_ai.exceptions import EmptyContentError, MissingFileError
from resource_ai.models.resource import ResourceDescriptor

from .interfaces import ObjectFetcher
from .pdf_text import extract_pdf_text

logger = logging.getLogger(__name__)


def is_pdf(resource: ResourceDescriptor) -> bool:
    mime_type = (resource.file.mime_type or "").lower()
    if "pdf" in mime_type:
        return True
    url = resource.file.url or ""
    return urlparse(url).path.lower().endswith(".pdf")


def acquire_text(resource: ResourceDescriptor, fetcher: ObjectFetcher) -> str:
    """
    Return the plain text the prompts are built from.

    PDFs are downloaded and parsed; any other resource falls back to its
    title and description.

    Raises:
        MissingFileError: PDF resource without a file URL.
        FetchError: download failed.
        ExtractionError: PDF could not be parsed.
        EmptyContentError: nothing readable after trimming.
    """
    if is_pdf(resource):
        if not resource.file.url:
            raise MissingFileError(f"Resource {resource.id} has no file URL")
        data = fetcher.get(resource.file.url)
        text = extract_pdf_text(data)
        logger.info("Extracted %d characters from PDF for resource %s", len(text), resource.id)
    else:
        text = f"{resource.title or ''}\n\n{resource.description or ''}"

    if not text.strip():
        raise EmptyContentError(f"No readable text for resource {resource.id}")
    return text
