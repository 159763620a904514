from multimodal_proxy.exceptions import (
    InteractionPersistenceError,
    LLMServiceError,
    MalformedUpstreamResponse,
    PollingCancelledError,
    ProviderUnavailableError,
    SubmissionError,
    TranscriptionFailure,
    TranscriptionTimeoutError,
    ValidationError,
)
from multimodal_proxy.logging import setup_logging

__all__ = [
    "setup_logging",
    "InteractionPersistenceError",
    "LLMServiceError",
    "MalformedUpstreamResponse",
    "PollingCancelledError",
    "ProviderUnavailableError",
    "SubmissionError",
    "TranscriptionFailure",
    "TranscriptionTimeoutError",
    "ValidationError",
]
