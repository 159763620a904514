"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def generate(self, prompt: str) -> str | None:
        """
        Generates an answer for a prompt.

        Args:
            prompt: The full prompt, including any file context.

        Returns:
            The generated text, or None when the model produced nothing.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass
