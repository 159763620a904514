"""Custom exceptions for the multimodal proxy."""


class ValidationError(Exception):
    """Raised when a required request input is missing."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class SubmissionError(Exception):
    """Raised when the provider rejects a media upload or job creation."""

    def __init__(self, stage: str, detail: str, cause: Exception | None = None):
        self.stage = stage
        self.detail = detail
        self.cause = cause
        super().__init__(f"Transcription {stage} failed: {detail}")


class TranscriptionFailure(Exception):
    """Raised when the provider reports a job in the terminal error state."""

    def __init__(self, job_id: str, reason: str | None):
        self.job_id = job_id
        self.reason = reason
        super().__init__(f"Transcription failed: {reason}")


class TranscriptionTimeoutError(Exception):
    """Raised when a job does not reach a terminal state within the wait budget."""

    def __init__(self, job_id: str, max_wait_seconds: float):
        self.job_id = job_id
        self.max_wait_seconds = max_wait_seconds
        super().__init__(
            f"Transcription '{job_id}' did not finish within {max_wait_seconds}s"
        )


class PollingCancelledError(Exception):
    """Raised when the caller abandons a job while it is being polled."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Polling for transcription '{job_id}' was cancelled")


class ProviderUnavailableError(Exception):
    """Raised when the provider cannot be reached or answers with a server error."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Transcription provider unavailable during '{operation}'")


class MalformedUpstreamResponse(Exception):
    """Raised when a provider payload lacks a field the pipeline depends on."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Malformed provider response for '{operation}': {reason}")


class LLMServiceError(Exception):
    """Raised when the LLM service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InteractionPersistenceError(Exception):
    """Raised when saving an interaction to the database fails."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to persist interaction to database")
