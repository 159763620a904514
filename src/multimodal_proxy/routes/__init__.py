from .health import router as health_router
from .query import router as query_router
from .transcription import router as transcription_router

__all__ = ["health_router", "query_router", "transcription_router"]
