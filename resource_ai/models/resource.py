from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CLASSIFICATION_FIELDS = ("placement", "college", "department", "year", "semester", "course")


class ResourceFile(BaseModel):
    url: Optional[str] = None
    mime_type: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ResourceDescriptor(BaseModel):
    """
    A classified library resource as stored by the catalog. Read-only here.
    """
    id: str
    title: str = ""
    description: Optional[str] = None
    file: ResourceFile = Field(default_factory=ResourceFile)

    # Classification
    placement: Optional[str] = None
    college: Optional[str] = None
    department: Optional[str] = None
    year: Optional[Union[int, str]] = None
    semester: Optional[Union[int, str]] = None
    course: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def classification(self) -> Dict[str, Any]:
        """Snapshot of the classification fields, stored alongside generated artifacts."""
        return {name: getattr(self, name) for name in CLASSIFICATION_FIELDS}
