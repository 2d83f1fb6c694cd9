from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ResourceAIError(Exception):
    """
    Base class for every failure raised by the resource AI pipeline.

    Each subclass carries the HTTP status and the public message used when the
    error crosses the API boundary. The exception's own text is for logs only.
    """
    status_code: int = 500
    message: str = "Resource AI request failed."

    @property
    def public_message(self) -> str:
        return self.message


# --- Caller / configuration ---

class ConfigurationError(ResourceAIError):
    status_code = 500
    message = "AI service is not configured."


class NotFoundError(ResourceAIError):
    status_code = 404
    message = "Resource not found."


class StoreUnavailableError(NotFoundError):
    status_code = 503
    message = "Resource AI store is unavailable."


class ValidationError(ResourceAIError):
    """Missing or invalid caller input. The exception text is shown to the caller."""
    status_code = 400
    message = "Invalid request."

    @property
    def public_message(self) -> str:
        return str(self) or self.message


# --- Text acquisition ---

class FetchError(ResourceAIError):
    status_code = 502

    def __init__(self, detail: str = "", status: Optional[int] = None):
        super().__init__(detail or "download failed")
        self.status = status

    @property
    def public_message(self) -> str:
        if self.status is not None:
            return f"Failed to download resource file (status {self.status})."
        return "Failed to download resource file."


class MissingFileError(FetchError):
    status_code = 400

    @property
    def public_message(self) -> str:
        return "Resource file URL is missing."


class ExtractionError(ResourceAIError):
    status_code = 422
    message = "Failed to extract text from resource file."


class EmptyContentError(ResourceAIError):
    status_code = 400
    message = "No readable text could be extracted from this resource."


# --- Completion provider ---

class UpstreamAuthError(ConfigurationError):
    pass


class UpstreamHTTPError(ResourceAIError):
    def __init__(self, detail: str = "", status: Optional[int] = None):
        super().__init__(detail or "upstream request failed")
        self.status = status

    @property
    def status_code(self) -> int:  # type: ignore[override]
        if self.status is not None and 400 <= self.status <= 599:
            return self.status
        return 500

    @property
    def public_message(self) -> str:
        if self.status is not None:
            return f"AI service request failed (status {self.status})."
        return "AI service request failed."


class EmptyResponseError(ResourceAIError):
    status_code = 502
    message = "AI service returned an empty response."


# --- Model output ---

class GenerationError(ResourceAIError):
    """Model output could not be turned into an artifact. Not the caller's fault."""
    status_code = 500
    message = "Failed to generate AI content."


class MalformedModelOutputError(GenerationError):
    pass


class EmptyArtifactError(GenerationError):
    pass


@dataclass(frozen=True)
class ErrorDescriptor:
    status_code: int
    message: str


def describe_error(exc: Exception, fallback: str = "Resource AI request failed.") -> ErrorDescriptor:
    """
    Map any exception to exactly one (status, message) pair for the API boundary.

    Generation failures use the operation's fallback message ("Failed to generate
    summary.") so the caller sees which artifact failed without model internals.
    Unknown exceptions become a plain 500 with the fallback message.
    """
    if isinstance(exc, GenerationError):
        return ErrorDescriptor(exc.status_code, fallback)
    if isinstance(exc, ResourceAIError):
        return ErrorDescriptor(exc.status_code, exc.public_message)
    return ErrorDescriptor(500, fallback)
