"""Infrastructure interface exports."""

from .llm_service import LLMService
from .transcription_provider import TranscriptionProvider

__all__ = ["LLMService", "TranscriptionProvider"]
