import pytest

from resource_ai.exceptions import (
    ConfigurationError,
    EmptyArtifactError,
    EmptyContentError,
    EmptyResponseError,
    ExtractionError,
    FetchError,
    MalformedModelOutputError,
    MissingFileError,
    NotFoundError,
    StoreUnavailableError,
    UpstreamAuthError,
    UpstreamHTTPError,
    ValidationError,
    describe_error,
)


@pytest.mark.parametrize("error, status", [
    (ConfigurationError(), 500),
    (UpstreamAuthError(), 500),
    (NotFoundError(), 404),
    (StoreUnavailableError(), 503),
    (ValidationError("Question required"), 400),
    (MissingFileError(), 400),
    (FetchError(status=404), 502),
    (ExtractionError(), 422),
    (EmptyContentError(), 400),
    (UpstreamHTTPError(status=401), 401),
    (UpstreamHTTPError(status=503), 503),
    (UpstreamHTTPError(status=302), 500),
    (UpstreamHTTPError(), 500),
    (EmptyResponseError(), 502),
    (MalformedModelOutputError(), 500),
    (EmptyArtifactError(), 500),
])
def test_status_per_error_kind(error, status):
    assert describe_error(error).status_code == status


def test_messages_hide_internal_detail():
    descriptor = describe_error(ExtractionError("fitz.FileDataError at 0x7f..."))
    assert descriptor.message == "Failed to extract text from resource file."


def test_fetch_message_mentions_download():
    assert "download" in describe_error(FetchError("boom", status=500)).message
    assert "download" in describe_error(FetchError("boom")).message


def test_validation_message_is_shown():
    assert describe_error(ValidationError("Question required")).message == "Question required"


def test_generation_errors_use_fallback():
    descriptor = describe_error(MalformedModelOutputError("raw"), "Failed to generate flashcards.")
    assert descriptor == describe_error(EmptyArtifactError(), "Failed to generate flashcards.")
    assert descriptor.message == "Failed to generate flashcards."


def test_unknown_errors_use_fallback():
    descriptor = describe_error(KeyError("x"), "Failed to load AI metadata.")
    assert (descriptor.status_code, descriptor.message) == (500, "Failed to load AI metadata.")
