"""Domain layer exports."""

from .context_parser import ContextParser
from .models import (
    FileCategory,
    JobOptions,
    LocalMedia,
    ParsedPrompt,
    ParseStatus,
    PromptContext,
    TranscriptionJob,
    TranscriptionResult,
)
from .result_mapper import ResultMapper

__all__ = [
    "ContextParser",
    "FileCategory",
    "JobOptions",
    "LocalMedia",
    "ParsedPrompt",
    "ParseStatus",
    "PromptContext",
    "ResultMapper",
    "TranscriptionJob",
    "TranscriptionResult",
]
