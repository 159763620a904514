"""Prompt endpoint proxying to the LLM."""

from typing import Annotated

from fastapi import APIRouter, Depends

from multimodal_proxy.dependencies import get_query_handler
from multimodal_proxy.exceptions import (
    InteractionPersistenceError,
    LLMServiceError,
    ValidationError,
)
from multimodal_proxy.handlers import QueryHandler
from multimodal_proxy.logging import setup_logging
from multimodal_proxy.response_models import (
    QueryRequest,
    QueryResponse,
    error_response,
)

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["query"])

QueryHandlerDep = Annotated[QueryHandler, Depends(get_query_handler)]


@router.post("/query", response_model=QueryResponse)
def query(handler: QueryHandlerDep, body: QueryRequest | None = None):
    """Answers a prompt, optionally prefixed with uploaded file context."""
    try:
        answer = handler.answer(body.prompt if body else None)
    except ValidationError as e:
        return error_response(400, str(e), f"Missing required field '{e.field}'")
    except LLMServiceError as e:
        return error_response(500, "Failed to get response from AI", str(e))
    except InteractionPersistenceError as e:
        return error_response(500, "Internal server error", str(e))

    return QueryResponse(answer=answer)
