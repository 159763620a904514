"""Handler orchestrating media transcription requests."""

import threading
from typing import Callable

from multimodal_proxy.domain import (
    LocalMedia,
    ResultMapper,
    TranscriptionJob,
    TranscriptionResult,
)
from multimodal_proxy.domain.job_poller import JobPoller
from multimodal_proxy.domain.job_submitter import JobSubmitter
from multimodal_proxy.exceptions import ValidationError
from multimodal_proxy.logging import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Runs submit, poll and map for uploaded audio and remote video links."""

    def __init__(
        self,
        submitter: JobSubmitter,
        poller: JobPoller,
        mapper: ResultMapper,
    ):
        self._submitter = submitter
        self._poller = poller
        self._mapper = mapper

    def transcribe_upload(
        self,
        media: LocalMedia | None,
        cancel_event: threading.Event | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes a staged audio upload.

        Raises:
            ValidationError: If no file was uploaded.
            SubmissionError: If the provider rejects the upload or the job.
            TranscriptionFailure: If the provider fails the job.
            TranscriptionTimeoutError: If the job outlives the wait budget.
            PollingCancelledError: If the caller goes away while polling.
        """
        if media is None:
            raise ValidationError("file", "No file uploaded")

        logger.info(
            "Processing audio upload",
            extra={"file_name": media.file_name, "size": media.size},
        )
        return self._run(lambda: self._submitter.submit_local(media), cancel_event)

    def transcribe_url(
        self,
        url: str | None,
        cancel_event: threading.Event | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes media behind a provider-reachable URL.

        Raises:
            ValidationError: If no URL was supplied.
            SubmissionError: If the provider rejects the job.
            TranscriptionFailure: If the provider fails the job.
            TranscriptionTimeoutError: If the job outlives the wait budget.
            PollingCancelledError: If the caller goes away while polling.
        """
        if not url or not url.strip():
            raise ValidationError("youtubeUrl", "YouTube URL is required")

        logger.info("Processing media URL", extra={"url": url})
        return self._run(lambda: self._submitter.submit_url(url.strip()), cancel_event)

    def _run(
        self,
        submit: Callable[[], TranscriptionJob],
        cancel_event: threading.Event | None,
    ) -> TranscriptionResult:
        job = submit()
        completed = self._poller.poll(job, cancel_event)
        result = self._mapper.map(completed)

        logger.info(
            "Transcription processed",
            extra={"job_id": result.id, "source_ref": job.source_ref},
        )
        return result
