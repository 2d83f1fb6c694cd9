from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class Flashcard(BaseModel):
    id: str
    front: str
    back: str


class SummaryArtifact(BaseModel):
    summary_short: str = ""
    summary_long: str = ""

    model_config = CAMEL_CONFIG


class ChatAnswer(BaseModel):
    answer: str
    resource_id: str
    resource_title: str = ""

    model_config = CAMEL_CONFIG


class ArtifactRecord(BaseModel):
    """
    Per-resource AI metadata document. One record per resource id.

    Fields are filled independently by each generation; a summary run never
    clears the flashcards and vice versa.
    """
    resource_id: str

    # Classification snapshot copied from the resource
    placement: Optional[str] = None
    college: Optional[str] = None
    department: Optional[str] = None
    year: Optional[Union[int, str]] = None
    semester: Optional[Union[int, str]] = None
    course: Optional[str] = None

    summary_short: Optional[str] = None
    summary_long: Optional[str] = None
    flashcards: Optional[List[Flashcard]] = None
    flashcards_generated_at: Optional[datetime] = None

    created_at: datetime
    updated_at: datetime

    model_config = {**CAMEL_CONFIG, "extra": "allow"}

    def to_api(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def merge_record(
    existing: Optional[Dict[str, Any]],
    resource_id: str,
    fields: Dict[str, Any],
    now: datetime,
) -> Dict[str, Any]:
    """
    Field-level merge of a partial update into a stored record (camelCase keys).

    A missing record is created with createdAt=now. An existing one keeps its
    createdAt and every field not named in `fields`; updatedAt is always now.
    """
    merged: Dict[str, Any] = dict(existing or {})
    merged.update(fields)
    merged["resourceId"] = resource_id
    merged["createdAt"] = (existing or {}).get("createdAt") or now
    merged["updatedAt"] = now
    return merged
