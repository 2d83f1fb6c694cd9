from __future__ import annotations

from typing import Any, List, Set

from ..constants import MAX_FLASHCARDS
from ..exceptions import EmptyArtifactError
from ..models.resource_ai import Flashcard, SummaryArtifact


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_summary(payload: Any) -> SummaryArtifact:
    """
    Shape a parsed model answer into a SummaryArtifact.

    Reads shortSummary/longSummary (or the summaryShort/summaryLong spelling).
    At least one of them must be non-empty after trimming.
    """
    if not isinstance(payload, dict):
        raise EmptyArtifactError(f"Summary payload is not an object: {type(payload).__name__}")

    short = _clean(payload.get("shortSummary")) or _clean(payload.get("summaryShort"))
    long = _clean(payload.get("longSummary")) or _clean(payload.get("summaryLong"))

    if not short and not long:
        raise EmptyArtifactError("Model did not return summary content")
    return SummaryArtifact(summary_short=short, summary_long=long)


def _raw_cards(payload: Any) -> List[Any]:
    if isinstance(payload, dict) and isinstance(payload.get("flashcards"), list):
        return payload["flashcards"]
    if isinstance(payload, list):
        return payload
    return []


def normalize_flashcards(payload: Any) -> List[Flashcard]:
    """
    Shape a parsed model answer into at most MAX_FLASHCARDS flashcards.

    Accepts {"flashcards": [...]} or a bare list. Entries without a non-empty
    front and back are dropped. Cards without an id get fc-<n>, n being the
    1-based position among the kept cards, so normalizing the output again
    returns the same list. Ids are unique within the deck: a fallback id that
    is already taken moves on to the next free number, and a repeated model id
    is replaced by a fallback one.
    """
    cards: List[Flashcard] = []
    used_ids: Set[str] = set()
    for raw in _raw_cards(payload):
        if len(cards) >= MAX_FLASHCARDS:
            break
        if not isinstance(raw, dict):
            continue

        front = _clean(raw.get("front"))
        back = _clean(raw.get("back"))
        if not front or not back:
            continue

        raw_id = raw.get("id")
        card_id = str(raw_id).strip() if raw_id is not None else ""
        if not card_id or card_id in used_ids:
            card_id = _fallback_id(len(cards) + 1, used_ids)

        used_ids.add(card_id)
        cards.append(Flashcard(id=card_id, front=front, back=back))

    if not cards:
        raise EmptyArtifactError("Model did not return valid flashcards")
    return cards


def _fallback_id(position: int, used_ids: Set[str]) -> str:
    n = position
    while f"fc-{n}" in used_ids:
        n += 1
    return f"fc-{n}"
