class QuizRelayError(Exception):
    """Base class for errors raised by the relay's collaborators."""


class UnsupportedFileTypeError(QuizRelayError):
    """The uploaded file's media type is neither PDF nor an image."""

    def __init__(self, mime_type: str | None):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type!r}")


class ExtractionError(QuizRelayError):
    """Text could not be extracted from an uploaded document."""


class LLMServiceError(QuizRelayError):
    """The LLM call failed in transport, timed out, or was misconfigured."""


class LLMRateLimitError(LLMServiceError):
    """The LLM provider rejected the call with a rate-limit status."""
