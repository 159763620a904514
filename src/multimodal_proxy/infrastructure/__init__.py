"""Infrastructure layer exports."""

from .assemblyai_provider import AssemblyAIProvider
from .gemini_llm import GeminiLLMService

__all__ = ["AssemblyAIProvider", "GeminiLLMService"]
