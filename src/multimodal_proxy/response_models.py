"""Request and response models for the proxy API."""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class QueryRequest(BaseModel):
    prompt: str | None = None


class VideoUrlRequest(BaseModel):
    youtubeUrl: str | None = None


class QueryResponse(BaseModel):
    answer: str


class TranscriptionResponse(BaseModel):
    """Completed transcription returned to the front-end."""

    id: str
    text: str | None = None
    sentiment_analysis_results: Any = None
    summary: str | None = None


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Builds the ``{error, message}`` body every failing endpoint returns."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
    )
