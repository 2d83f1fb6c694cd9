from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from resource_ai.config import Settings
from resource_ai.infra.memory_store import InMemoryArtifactStore
from resource_ai.models.resource import ResourceDescriptor
from resource_ai.services.resource_ai_service import ResourceAIService
from tests.utils.fakes import FakeCatalog, FakeFetcher, StepClock, make_pdf

PDF_URL = "https://files.example.edu/thermo-3.pdf"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        llm_api_key="test-key",
        llm_model="test-model",
        artifact_store_backend="memory",
    )


@pytest.fixture
def pdf_resource() -> ResourceDescriptor:
    return ResourceDescriptor(
        id="res-1",
        title="Thermodynamics Lecture 3",
        description="Entropy and the second law",
        file={"url": PDF_URL, "mimeType": "application/pdf"},
        college="Engineering",
        department="Mechanical",
        year=2,
        semester=1,
        course="Thermodynamics I",
    )


@pytest.fixture
def note_resource() -> ResourceDescriptor:
    return ResourceDescriptor(
        id="res-2",
        title="Reading list",
        description="Chapters 1-4 of the course textbook",
        file={"url": "https://files.example.edu/list.docx", "mimeType": "application/msword"},
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher({PDF_URL: make_pdf("Entropy always increases.")})


@pytest.fixture
def catalog(pdf_resource, note_resource) -> FakeCatalog:
    return FakeCatalog([pdf_resource, note_resource])


@pytest.fixture
def store() -> InMemoryArtifactStore:
    return InMemoryArtifactStore(clock=StepClock())


@pytest.fixture
def completion() -> MagicMock:
    mock = MagicMock()
    mock.complete.return_value = '{"shortSummary": "short", "longSummary": "long"}'
    return mock


@pytest.fixture
def service(catalog, store, fetcher, completion, settings) -> ResourceAIService:
    return ResourceAIService(
        catalog=catalog,
        store=store,
        fetcher=fetcher,
        completion=completion,
        settings=settings,
    )
