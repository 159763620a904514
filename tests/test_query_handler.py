from contextlib import contextmanager
from unittest.mock import Mock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from fakes import FakeLLM
from multimodal_proxy.db_models import Interaction
from multimodal_proxy.domain import ContextParser, FileCategory, PromptContext
from multimodal_proxy.exceptions import (
    InteractionPersistenceError,
    LLMServiceError,
    ValidationError,
)
from multimodal_proxy.handlers import QueryHandler
from multimodal_proxy.repositories import InteractionRepository

PROMPT = (
    "Context from uploaded files:\nFile: report.pdf (text)\n"
    "Content: Quarterly numbers...\n\nUser Query: Summarize it"
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def repository(engine):
    @contextmanager
    def session_factory():
        with Session(engine) as session:
            yield session

    return InteractionRepository(session_factory)


def stored(engine) -> list[Interaction]:
    with Session(engine) as session:
        return list(session.exec(select(Interaction)).all())


def test_answer_sends_full_prompt_and_stores_parsed_interaction(engine, repository):
    llm = FakeLLM("Revenue grew.")
    handler = QueryHandler(ContextParser(), llm, repository)

    assert handler.answer(PROMPT) == "Revenue grew."

    assert llm.prompts == [PROMPT]
    [row] = stored(engine)
    assert row.query == "Summarize it"
    assert row.response == "Revenue grew."
    assert row.file_name == "report.pdf"
    assert row.file_category == "text"
    assert row.file_content == "Quarterly numbers"
    assert row.timestamp is not None


def test_plain_prompt_is_stored_without_file(engine, repository):
    handler = QueryHandler(ContextParser(), FakeLLM("Hi"), repository)

    handler.answer("Hello there")

    [row] = stored(engine)
    assert row.query == "Hello there"
    assert row.file_name is None
    assert row.file_category is None


def test_empty_model_output_is_replaced(engine, repository):
    handler = QueryHandler(ContextParser(), FakeLLM(None), repository)

    assert handler.answer("Anything?") == "No response generated"
    assert stored(engine)[0].response == "No response generated"


def test_missing_prompt_is_rejected_before_calling_llm(repository):
    llm = FakeLLM()

    with pytest.raises(ValidationError, match="Prompt is required"):
        QueryHandler(ContextParser(), llm, repository).answer("")

    assert llm.prompts == []


def test_llm_failure_is_not_persisted(engine, repository):
    llm = FakeLLM(error=LLMServiceError("Gemini generation failed: 429"))

    with pytest.raises(LLMServiceError):
        QueryHandler(ContextParser(), llm, repository).answer("Hello")

    assert stored(engine) == []


def test_repository_wraps_database_errors():
    def broken_factory():
        raise RuntimeError("database is locked")

    repository = InteractionRepository(broken_factory)

    with pytest.raises(InteractionPersistenceError):
        repository.save(None, "q", "a")


def test_handler_passes_context_to_repository():
    repository = Mock(spec=InteractionRepository)
    handler = QueryHandler(ContextParser(), FakeLLM("ok"), repository)

    handler.answer(
        "Context from uploaded files:\nFile: cat.jpg (image)\n\nUser Query: What animal?"
    )

    repository.save.assert_called_once_with(
        PromptContext(
            file_name="cat.jpg",
            category=FileCategory.image,
            content="Image file uploaded (visual content available)",
        ),
        "What animal?",
        "ok",
    )
