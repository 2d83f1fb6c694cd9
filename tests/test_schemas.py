from datetime import datetime, timezone

import pydantic
import pytest

from resource_ai.models.resource import ResourceDescriptor
from resource_ai.models.resource_ai import ArtifactRecord, SummaryArtifact
from resource_ai.schemas import ChatRequest, ChatTurn


def test_chat_request_defaults():
    req = ChatRequest()
    assert req.question is None
    assert req.chat_history == []

def test_chat_request_camel_case():
    req = ChatRequest.model_validate({"question": "Q", "chatHistory": [{"role": "assistant", "content": "A"}]})
    assert req.chat_history[0].role == "assistant"

def test_chat_turn_rejects_system_role():
    with pytest.raises(pydantic.ValidationError):
        ChatTurn(role="system", content="x")

def test_resource_descriptor_from_catalog_shape():
    resource = ResourceDescriptor.model_validate({
        "id": "r1",
        "title": "Notes",
        "file": {"url": "https://x.test/n.pdf", "mimeType": "application/pdf"},
        "course": "CS101",
    })
    assert resource.file.mime_type == "application/pdf"
    assert resource.classification() == {
        "placement": None, "college": None, "department": None,
        "year": None, "semester": None, "course": "CS101",
    }

def test_summary_artifact_aliases():
    assert SummaryArtifact(summary_short="a", summary_long="b").model_dump(by_alias=True) == {
        "summaryShort": "a", "summaryLong": "b",
    }

def test_artifact_record_api_shape():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    record = ArtifactRecord.model_validate({
        "resourceId": "r1",
        "flashcards": [{"id": "fc-1", "front": "f", "back": "b"}],
        "createdAt": now,
        "updatedAt": now,
    })
    data = record.to_api()
    assert data["resourceId"] == "r1"
    assert data["flashcards"] == [{"id": "fc-1", "front": "f", "back": "b"}]
    assert data["summaryShort"] is None
    assert "createdAt" in data and "updatedAt" in data
