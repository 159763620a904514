"""Gemini LLM service implementation."""

from google import genai

from multimodal_proxy.exceptions import LLMServiceError
from multimodal_proxy.logging import setup_logging

from .interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def generate(self, prompt: str) -> str | None:
        """
        Sends the prompt to Gemini as a single user turn.

        Raises:
            LLMServiceError: If the Gemini API call fails.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
            )
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e

        logger.info("Gemini response received", extra={"model": self._model_name})
        return response.text
