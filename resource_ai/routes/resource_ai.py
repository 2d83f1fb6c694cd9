import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ingest.fetcher import HttpObjectFetcher
from resource_ai.config import get_settings
from resource_ai.exceptions import ResourceAIError, describe_error
from resource_ai.infra.catalog_db import PostgresResourceCatalog
from resource_ai.infra.memory_store import InMemoryArtifactStore
from resource_ai.infra.resource_ai_db import PostgresArtifactStore
from resource_ai.schemas import ChatRequest, ErrorEnvelope, SuccessEnvelope
from resource_ai.services.completion import CompletionClient
from resource_ai.services.resource_ai_service import ResourceAIService

router = APIRouter(prefix="/resource-ai", tags=["resource-ai"])
logger = logging.getLogger(__name__)

_memory_store = InMemoryArtifactStore()


def get_artifact_store():
    settings = get_settings()
    if settings.artifact_store_backend == "memory":
        return _memory_store
    return PostgresArtifactStore()


# Dependency Injection helper
def get_resource_ai_service():
    settings = get_settings()
    return ResourceAIService(
        catalog=PostgresResourceCatalog(),
        store=get_artifact_store(),
        fetcher=HttpObjectFetcher(timeout=settings.fetch_timeout),
        completion=CompletionClient(),
        settings=settings,
    )


def _ok(data: Any) -> dict:
    return SuccessEnvelope(data=data).model_dump()


def _error(exc: Exception, fallback: str, resource_id: str) -> JSONResponse:
    if isinstance(exc, ResourceAIError):
        logger.warning("Resource AI request failed for %s: %s: %s", resource_id, type(exc).__name__, exc)
    else:
        logger.exception("Unexpected error for resource %s", resource_id)
    descriptor = describe_error(exc, fallback)
    return JSONResponse(
        status_code=descriptor.status_code,
        content=ErrorEnvelope(error=descriptor.message).model_dump(),
    )


@router.get("/{resource_id}")
def get_resource_ai(resource_id: str, service: ResourceAIService = Depends(get_resource_ai_service)):
    """
    Return the stored AI metadata for a resource, or null if nothing was generated yet.
    """
    try:
        record = service.get_artifacts(resource_id)
        return _ok(record.to_api() if record else None)
    except Exception as e:
        return _error(e, "Failed to load AI metadata.", resource_id)


@router.post("/{resource_id}/summary")
def generate_summary(resource_id: str, service: ResourceAIService = Depends(get_resource_ai_service)):
    try:
        summary = service.generate_summary(resource_id)
        return _ok(summary.model_dump(by_alias=True))
    except Exception as e:
        return _error(e, "Failed to generate summary.", resource_id)


@router.post("/{resource_id}/flashcards")
def generate_flashcards(resource_id: str, service: ResourceAIService = Depends(get_resource_ai_service)):
    try:
        flashcards = service.generate_flashcards(resource_id)
        return _ok({"flashcards": [card.model_dump() for card in flashcards]})
    except Exception as e:
        return _error(e, "Failed to generate flashcards.", resource_id)


@router.post("/{resource_id}/chat")
def chat_with_resource(
    resource_id: str,
    request: Optional[ChatRequest] = None,
    service: ResourceAIService = Depends(get_resource_ai_service),
):
    """
    Answer a question about the resource. chatHistory is used as context only and is not stored.
    """
    try:
        request = request or ChatRequest()
        answer = service.chat(resource_id, request.question, request.chat_history)
        return _ok(answer.model_dump(by_alias=True))
    except Exception as e:
        return _error(e, "Failed to generate a response.", resource_id)
