from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ingest.interfaces import ObjectFetcher
from ingest.text_acquisition import acquire_text

from ..config import Settings, get_settings
from ..constants import PromptTask
from ..exceptions import NotFoundError, StoreUnavailableError, ValidationError
from ..interfaces import ArtifactStore, CompletionProvider, ResourceCatalog
from ..models.resource import ResourceDescriptor
from ..models.resource_ai import ArtifactRecord, ChatAnswer, Flashcard, SummaryArtifact
from ..schemas import ChatTurn
from .json_extraction import extract_json
from .normalization import normalize_flashcards, normalize_summary
from .prompts import build_prompt

logger = logging.getLogger(__name__)


class ResourceAIService:
    """
    Summary, flashcard and chat generation for a single library resource.

    Every operation runs the same pipeline: load resource -> acquire text ->
    build prompt -> completion -> extract JSON -> normalize -> merge into the
    store. Failures are raised as typed ResourceAIError subclasses; the API
    layer turns them into responses.

    Concurrent regenerations of the same resource are not serialized: the
    store merge is last-writer-wins per partial update.
    """

    def __init__(
        self,
        catalog: ResourceCatalog,
        store: Optional[ArtifactStore],
        fetcher: ObjectFetcher,
        completion: CompletionProvider,
        settings: Settings = None,
    ):
        self.catalog = catalog
        self.store = store
        self.fetcher = fetcher
        self.completion = completion
        self.settings = settings or get_settings()

    def _require_store(self) -> ArtifactStore:
        if self.store is None:
            raise StoreUnavailableError("Artifact store is not configured")
        return self.store

    def _load_resource(self, resource_id: str) -> ResourceDescriptor:
        resource = self.catalog.get(resource_id)
        if resource is None:
            raise NotFoundError(f"Resource {resource_id} not found")
        return resource

    def _complete(self, prompt: str, max_tokens: int) -> str:
        return self.completion.complete(
            messages=[{"role": "user", "content": prompt}],
            model=self.settings.llm_model,
            temperature=self.settings.llm_temperature,
            max_tokens=max_tokens,
        )

    def get_artifacts(self, resource_id: str) -> Optional[ArtifactRecord]:
        """Current AI metadata for a resource. Never triggers generation."""
        return self._require_store().get(resource_id)

    def generate_summary(self, resource_id: str) -> SummaryArtifact:
        store = self._require_store()
        resource = self._load_resource(resource_id)
        text = acquire_text(resource, self.fetcher)

        logger.info("Generating summary for resource %s", resource_id)
        prompt = build_prompt(PromptTask.SUMMARY, text)
        raw = self._complete(prompt, self.settings.summary_max_tokens)
        summary = normalize_summary(extract_json(raw))

        store.merge(resource_id, {
            **resource.classification(),
            "summaryShort": summary.summary_short,
            "summaryLong": summary.summary_long,
        })
        logger.info("Stored summary for resource %s", resource_id)
        return summary

    def generate_flashcards(self, resource_id: str) -> List[Flashcard]:
        store = self._require_store()
        resource = self._load_resource(resource_id)
        text = acquire_text(resource, self.fetcher)

        logger.info("Generating flashcards for resource %s", resource_id)
        prompt = build_prompt(PromptTask.FLASHCARDS, text)
        raw = self._complete(prompt, self.settings.flashcards_max_tokens)
        flashcards = normalize_flashcards(extract_json(raw))

        store.merge(resource_id, {
            **resource.classification(),
            "flashcards": [card.model_dump() for card in flashcards],
            "flashcardsGeneratedAt": datetime.now(timezone.utc),
        })
        logger.info("Stored %d flashcards for resource %s", len(flashcards), resource_id)
        return flashcards

    def chat(
        self,
        resource_id: str,
        question: Optional[str],
        history: Optional[Iterable[ChatTurn]] = None,
    ) -> ChatAnswer:
        """Answer one question about the resource. The transcript is not stored."""
        self._require_store()
        if not question or not question.strip():
            raise ValidationError("Question required")

        resource = self._load_resource(resource_id)
        text = acquire_text(resource, self.fetcher)

        prompt = build_prompt(
            PromptTask.CHAT,
            text,
            title=resource.title,
            history=history,
            question=question.strip(),
        )
        answer = self._complete(prompt, self.settings.chat_max_tokens)
        return ChatAnswer(answer=answer.strip(), resource_id=resource_id, resource_title=resource.title)
