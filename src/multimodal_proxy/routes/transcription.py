"""Media transcription endpoints."""

import asyncio
import threading
from pathlib import Path
from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from multimodal_proxy.dependencies import get_transcription_handler, get_uploads_dir
from multimodal_proxy.domain import LocalMedia, TranscriptionResult
from multimodal_proxy.exceptions import (
    MalformedUpstreamResponse,
    PollingCancelledError,
    ProviderUnavailableError,
    SubmissionError,
    TranscriptionFailure,
    TranscriptionTimeoutError,
    ValidationError,
)
from multimodal_proxy.handlers import TranscriptionHandler
from multimodal_proxy.logging import setup_logging
from multimodal_proxy.response_models import (
    TranscriptionResponse,
    VideoUrlRequest,
    error_response,
)
from multimodal_proxy.utils import stage_upload

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]
UploadsDirDep = Annotated[Path, Depends(get_uploads_dir)]

DISCONNECT_CHECK_SECONDS = 1.0
CLIENT_CLOSED_REQUEST = 499

PIPELINE_ERRORS = (
    SubmissionError,
    TranscriptionFailure,
    TranscriptionTimeoutError,
    ProviderUnavailableError,
    MalformedUpstreamResponse,
)


@router.post("/upload-audio", response_model=TranscriptionResponse)
async def upload_audio(
    request: Request,
    handler: HandlerDep,
    uploads_dir: UploadsDirDep,
    file: UploadFile | None = File(default=None),
):
    """Transcribes an uploaded audio file with sentiment and summary."""

    def prepare() -> LocalMedia | None:
        if file is None:
            return None
        media = stage_upload(file, uploads_dir)
        logger.info(
            "Received audio upload",
            extra={"file_name": media.file_name, "size": media.size},
        )
        return media

    return await _transcribe(
        request, prepare, handler.transcribe_upload, "Failed to process audio"
    )


@router.post("/process-youtube", response_model=TranscriptionResponse)
async def process_youtube(
    request: Request,
    handler: HandlerDep,
    body: VideoUrlRequest | None = None,
):
    """Transcribes a remote video by URL with sentiment and summary."""
    url = body.youtubeUrl if body else None
    return await _transcribe(
        request,
        lambda: url,
        handler.transcribe_url,
        "Failed to process YouTube video",
    )


async def _transcribe(
    request: Request,
    prepare: Callable[[], Any],
    run: Callable[[Any, threading.Event], TranscriptionResult],
    failure_label: str,
):
    """
    Runs one transcription flow and maps its failures to error responses.

    ``prepare`` produces the flow input (a staged upload or a URL) and runs
    inside the same error mapping as the pipeline itself.
    """
    cancel_event = threading.Event()
    watcher = asyncio.create_task(_watch_disconnect(request, cancel_event))
    try:
        source = await run_in_threadpool(prepare)
        result = await run_in_threadpool(run, source, cancel_event)
    except ValidationError as e:
        return error_response(400, str(e), f"Missing required field '{e.field}'")
    except PollingCancelledError as e:
        logger.info("Client disconnected before transcription finished")
        return error_response(CLIENT_CLOSED_REQUEST, failure_label, str(e))
    except PIPELINE_ERRORS as e:
        logger.error(failure_label, extra={"error": str(e)})
        return error_response(500, failure_label, str(e))
    except Exception as e:
        logger.exception(failure_label)
        return error_response(500, failure_label, str(e))
    finally:
        watcher.cancel()

    return TranscriptionResponse(
        id=result.id,
        text=result.text,
        sentiment_analysis_results=result.sentiment,
        summary=result.summary,
    )


async def _watch_disconnect(request: Request, cancel_event: threading.Event) -> None:
    """Sets ``cancel_event`` once the client has gone away."""
    while not cancel_event.is_set():
        if await request.is_disconnected():
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_CHECK_SECONDS)
