"""Handler for prompts forwarded to the LLM."""

from multimodal_proxy.domain import ContextParser
from multimodal_proxy.exceptions import ValidationError
from multimodal_proxy.infrastructure.interfaces import LLMService
from multimodal_proxy.logging import setup_logging
from multimodal_proxy.repositories import InteractionRepository

logger = setup_logging()

EMPTY_ANSWER = "No response generated"


class QueryHandler:
    """Answers prompts with the LLM and records each interaction."""

    def __init__(
        self,
        parser: ContextParser,
        llm_service: LLMService,
        repository: InteractionRepository,
    ):
        self._parser = parser
        self._llm = llm_service
        self._repository = repository

    def answer(self, prompt: str | None) -> str:
        """
        Forwards the full prompt to the LLM and stores the exchange.

        The stored query is the user's question without the file context;
        the file context is stored alongside it when the prompt carried one.

        Raises:
            ValidationError: If the prompt is empty.
            LLMServiceError: If the LLM call fails.
            InteractionPersistenceError: If the interaction cannot be saved.
        """
        if not prompt:
            raise ValidationError("prompt", "Prompt is required")

        parsed = self._parser.parse(prompt)
        logger.info(
            "Received query",
            extra={"query": parsed.query[:100], "context_status": parsed.status.value},
        )

        answer = self._llm.generate(prompt) or EMPTY_ANSWER

        self._repository.save(parsed.context, parsed.query, answer)
        logger.info("Response generated")
        return answer
