from typing import Any, Dict, List, Optional, Protocol

from .models.resource import ResourceDescriptor
from .models.resource_ai import ArtifactRecord


class ResourceCatalog(Protocol):
    """Read access to classified library resources."""

    def get(self, resource_id: str) -> Optional[ResourceDescriptor]:
        """Returns the resource or None when it does not exist."""
        ...


class ArtifactStore(Protocol):
    """Per-resource AI metadata documents with field-level merge."""

    def get(self, resource_id: str) -> Optional[ArtifactRecord]:
        ...

    def merge(self, resource_id: str, fields: Dict[str, Any]) -> ArtifactRecord:
        """
        Creates the record on first write, otherwise merges `fields` over it.
        Keys are camelCase; fields not present in `fields` are kept.
        """
        ...


class CompletionProvider(Protocol):
    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
    ) -> str:
        ...
