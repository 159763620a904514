from .query_handler import QueryHandler
from .transcription_handler import TranscriptionHandler

__all__ = ["QueryHandler", "TranscriptionHandler"]
