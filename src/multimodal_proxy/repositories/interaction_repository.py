"""Repository for interaction persistence."""

from multimodal_proxy.db_models import Interaction
from multimodal_proxy.domain.models import PromptContext
from multimodal_proxy.exceptions import InteractionPersistenceError
from multimodal_proxy.logging import setup_logging

logger = setup_logging()


class InteractionRepository:
    """
    Stores question and answer pairs together with the file they referred to.

    Keeps session and transaction handling out of the handler layer.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def save(
        self, context: PromptContext | None, query: str, response: str
    ) -> Interaction:
        """
        Persists one interaction.

        Raises:
            InteractionPersistenceError: If the write fails.
        """
        interaction = Interaction(
            file_name=context.file_name if context else None,
            file_category=context.category.value if context else None,
            file_content=context.content if context else None,
            query=query,
            response=response,
        )
        try:
            with self._session_factory() as db_session:
                db_session.add(interaction)
                db_session.commit()
                db_session.refresh(interaction)
        except Exception as e:
            logger.exception("Failed to persist interaction")
            raise InteractionPersistenceError(cause=e) from e

        logger.info("Interaction persisted", extra={"interaction_id": interaction.id})
        return interaction
