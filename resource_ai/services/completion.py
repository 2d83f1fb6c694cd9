from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from openai import APIConnectionError, APIStatusError, APITimeoutError, OpenAI, OpenAIError

from ..config import get_settings
from ..exceptions import EmptyResponseError, UpstreamHTTPError
from ..openai_client import get_sync_client

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    One chat-completion call against an OpenAI-compatible provider.

    Returns the first choice's message text. No retries: timeouts and HTTP
    failures are raised to the caller as UpstreamHTTPError.
    """

    def __init__(self, client_factory: Callable[[], OpenAI] = get_sync_client, default_model: Optional[str] = None):
        self._client_factory = client_factory
        self.default_model = default_model or get_settings().llm_model

    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
    ) -> str:
        # Raises UpstreamAuthError when no key is configured
        client = self._client_factory()
        model = model or self.default_model

        params = {"model": model, "messages": messages}
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if top_p is not None:
            params["top_p"] = top_p

        logger.info("Sending completion request: model=%s, messages=%d", model, len(messages))
        try:
            completion = client.chat.completions.create(**params)
        except APIStatusError as e:
            raise UpstreamHTTPError(f"Completion provider returned {e.status_code}: {e}", status=e.status_code) from e
        except APITimeoutError as e:
            raise UpstreamHTTPError(f"Completion request timed out: {e}") from e
        except APIConnectionError as e:
            raise UpstreamHTTPError(f"Cannot connect to completion provider: {e}") from e
        except OpenAIError as e:
            raise UpstreamHTTPError(f"Completion provider error: {e}") from e

        choices = getattr(completion, "choices", None) or []
        if not choices:
            raise EmptyResponseError("Completion returned no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None) if message is not None else None
        if not content or not content.strip():
            raise EmptyResponseError("Completion returned empty content")
        return content
