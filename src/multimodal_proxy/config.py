"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str = Field(min_length=1)
    base_url: str = "https://api.assemblyai.com"
    http_timeout_seconds: float = 30.0


class PollingConfig(BaseModel, frozen=True):
    """Transcription status polling configuration."""

    interval_seconds: float = Field(default=3.0, gt=0)
    max_wait_seconds: float | None = Field(default=3600.0, gt=0)
    max_transient_errors: int = Field(default=3, ge=0)


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.0-flash"


class DatabaseConfig(BaseModel, frozen=True):
    """Interaction store configuration."""

    url: str = "sqlite:///./interactions.db"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    polling: PollingConfig
    gemini: GeminiConfig
    database: DatabaseConfig
    uploads_dir: Path = Path("uploads")


def _optional_float(value: str) -> float | None:
    """Parses an env value where an empty string means no limit."""
    value = value.strip()
    return float(value) if value else None


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        pydantic.ValidationError: If ASSEMBLYAI_API_KEY is missing or a
            numeric setting is out of range.
    """
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com"),
            http_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_HTTP_TIMEOUT_SECONDS", "30")
            ),
        ),
        polling=PollingConfig(
            interval_seconds=float(os.getenv("POLL_INTERVAL_SECONDS", "3")),
            max_wait_seconds=_optional_float(
                os.getenv("POLL_MAX_WAIT_SECONDS", "3600")
            ),
            max_transient_errors=int(os.getenv("POLL_MAX_TRANSIENT_ERRORS", "3")),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash"),
        ),
        database=DatabaseConfig(
            url=os.getenv("DATABASE_URL", "sqlite:///./interactions.db"),
        ),
        uploads_dir=Path(os.getenv("UPLOADS_DIR", "uploads")),
    )
