"""FastAPI dependency injection configuration."""

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

import requests
from google import genai
from sqlmodel import Session, SQLModel, create_engine

from multimodal_proxy.config import AppConfig, load_config
from multimodal_proxy.domain import ContextParser, JobOptions, ResultMapper
from multimodal_proxy.domain.job_poller import JobPoller
from multimodal_proxy.domain.job_submitter import JobSubmitter
from multimodal_proxy.handlers import QueryHandler, TranscriptionHandler
from multimodal_proxy.infrastructure import AssemblyAIProvider, GeminiLLMService
from multimodal_proxy.logging import setup_logging
from multimodal_proxy.repositories import InteractionRepository

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration, loading it on first use."""
    return load_config()


@lru_cache
def _get_engine():
    url = get_config().database.url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized")
    return engine


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(_get_engine()) as session:
        yield session


@lru_cache
def get_transcription_handler() -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    config = get_config()

    session = requests.Session()
    session.headers.update({"authorization": config.assemblyai.api_key})
    provider = AssemblyAIProvider(
        session,
        config.assemblyai.base_url,
        config.assemblyai.http_timeout_seconds,
    )

    poller = JobPoller(
        provider,
        interval_seconds=config.polling.interval_seconds,
        max_wait_seconds=config.polling.max_wait_seconds,
        max_transient_errors=config.polling.max_transient_errors,
    )
    return TranscriptionHandler(
        JobSubmitter(provider, JobOptions()), poller, ResultMapper()
    )


@lru_cache
def get_query_handler() -> QueryHandler:
    """Returns the configured query handler."""
    config = get_config()
    client = genai.Client(api_key=config.gemini.api_key)
    llm = GeminiLLMService(client, config.gemini.model_name)
    return QueryHandler(ContextParser(), llm, InteractionRepository(_session_factory))


def get_uploads_dir() -> Path:
    """Returns the directory uploads are staged in."""
    return get_config().uploads_dir
