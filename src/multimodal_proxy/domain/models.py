"""Domain models for prompt context and transcription jobs."""

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import assemblyai as aai
from pydantic import BaseModel, Field


class FileCategory(str, Enum):
    """Coarse file kind announced by the front-end in the prompt context."""

    text = "text"
    image = "image"
    audio = "audio"
    video = "video"
    other = "other"


class ParseStatus(str, Enum):
    """Outcome of reconstructing file context from a prompt."""

    no_context = "no_context"
    malformed_block = "malformed_block"
    parsed = "parsed"


class PromptContext(BaseModel, frozen=True):
    """File reference rebuilt from the context block of a prompt."""

    file_name: str
    category: FileCategory
    content: str | None = None


class ParsedPrompt(BaseModel, frozen=True):
    """Result of parsing a prompt: optional file context plus the user query."""

    context: PromptContext | None
    query: str
    status: ParseStatus


class JobOptions(BaseModel, frozen=True):
    """Analysis features requested for every transcription job."""

    sentiment_analysis: bool = True
    summarization: bool = True
    summary_model: aai.SummarizationModel = aai.SummarizationModel.informative
    summary_type: aai.SummarizationType = aai.SummarizationType.bullets


class LocalMedia(BaseModel, frozen=True):
    """An uploaded media file staged on local disk."""

    path: Path
    file_name: str
    size: int


class TranscriptionJob(BaseModel, frozen=True):
    """
    A transcription job as last observed at the provider.

    Only the provider moves a job between states; this object is replaced,
    never mutated, on each observation.
    """

    id: str
    source_ref: str
    status: str = aai.TranscriptStatus.queued.value
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    record: dict[str, Any] = Field(default_factory=dict)


class TranscriptionResult(BaseModel, frozen=True):
    """Normalized output of a completed transcription.

    Provider fields are carried as received; their shape is not checked.
    """

    id: str
    text: str | None = None
    sentiment: Any = None
    summary: str | None = None
