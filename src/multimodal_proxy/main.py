"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from multimodal_proxy.dependencies import get_config
from multimodal_proxy.logging import setup_logging
from multimodal_proxy.routes import health_router, query_router, transcription_router

load_dotenv()
patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fails startup early when required configuration is missing."""
    config = get_config()
    config.uploads_dir.mkdir(parents=True, exist_ok=True)
    logger.info(
        "Multimodal proxy started",
        extra={
            "uploads_dir": str(config.uploads_dir),
            "poll_interval_seconds": config.polling.interval_seconds,
            "poll_max_wait_seconds": config.polling.max_wait_seconds,
        },
    )
    yield


app = FastAPI(title="Multimodal Proxy", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(query_router)
app.include_router(transcription_router)


def run():
    """Serves the app with uvicorn on port 5000."""
    uvicorn.run(app, host="0.0.0.0", port=5000)


if __name__ == "__main__":
    run()
