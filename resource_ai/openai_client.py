from __future__ import annotations

from functools import lru_cache

from openai import OpenAI

from .config import get_settings
from .exceptions import UpstreamAuthError


@lru_cache()
def get_sync_client() -> OpenAI:
    """
    OpenAI SDK client pointed at the configured OpenAI-compatible provider.

    Built with max_retries=0: a failed completion is surfaced to the caller,
    who decides whether to call again.
    """
    settings = get_settings()
    api_key = (settings.llm_api_key or "").strip()
    if not api_key:
        raise UpstreamAuthError("LLM_API_KEY is not set")
    return OpenAI(
        api_key=api_key,
        base_url=settings.llm_base_url or None,
        timeout=settings.llm_timeout,
        max_retries=0,
    )
