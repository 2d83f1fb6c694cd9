from typing import Protocol


class ObjectFetcher(Protocol):
    """Interface for downloading stored resource files."""

    def get(self, url: str) -> bytes:
        """
        Returns the raw bytes at `url`.
        Raises FetchError on non-2xx responses or transport failures.
        """
        ...
