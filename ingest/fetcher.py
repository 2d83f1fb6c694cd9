from __future__ import annotations

import logging

import httpx

from resource_ai.exceptions import FetchError

logger = logging.getLogger(__name__)


class HttpObjectFetcher:
    """Downloads resource files (Cloudinary/S3 URLs) over HTTP."""

    def __init__(self, timeout: float = 30.0, client: httpx.Client = None):
        self.timeout = timeout
        self._client = client

    def get(self, url: str) -> bytes:
        logger.info("Downloading resource file: %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.timeout)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to download {url}: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"Failed to download {url} (status {response.status_code})",
                status=response.status_code,
            )
        return response.content
