"""Polls the transcription provider until a job reaches a terminal state."""

import threading
import time
from typing import Callable

import assemblyai as aai

from multimodal_proxy.exceptions import (
    MalformedUpstreamResponse,
    PollingCancelledError,
    ProviderUnavailableError,
    TranscriptionFailure,
    TranscriptionTimeoutError,
)
from multimodal_proxy.infrastructure.interfaces import TranscriptionProvider
from multimodal_proxy.logging import setup_logging

from .models import TranscriptionJob

logger = setup_logging()


class JobPoller:
    """
    Waits for a submitted job to complete.

    Every wait happens on the caller's cancellation event, so setting the
    event stops the loop at the next delay. ``max_wait_seconds=None`` polls
    until the provider reports a terminal state, however long that takes.
    """

    def __init__(
        self,
        provider: TranscriptionProvider,
        interval_seconds: float = 3.0,
        max_wait_seconds: float | None = 3600.0,
        max_transient_errors: int = 3,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._provider = provider
        self._interval = interval_seconds
        self._max_wait = max_wait_seconds
        self._max_transient_errors = max_transient_errors
        self._clock = clock

    def poll(
        self, job: TranscriptionJob, cancel_event: threading.Event | None = None
    ) -> TranscriptionJob:
        """
        Polls ``job`` until the provider reports ``completed``.

        Returns:
            The job with its completed status and provider record.

        Raises:
            TranscriptionFailure: If the provider reports ``error``.
            TranscriptionTimeoutError: If the wait budget runs out first.
            PollingCancelledError: If ``cancel_event`` is set.
            ProviderUnavailableError: If status requests keep failing.
            MalformedUpstreamResponse: If a status payload has no ``status``.
        """
        cancel_event = cancel_event or threading.Event()
        deadline = None if self._max_wait is None else self._clock() + self._max_wait
        failures = 0
        attempt = 0

        while True:
            if cancel_event.is_set():
                raise PollingCancelledError(job.id)

            attempt += 1
            try:
                record = self._provider.get_job(job.id)
            except ProviderUnavailableError:
                failures += 1
                if failures > self._max_transient_errors:
                    logger.error(
                        "Giving up on unreachable provider",
                        extra={"job_id": job.id, "failures": failures},
                    )
                    raise
                delay = self._interval * 2 ** (failures - 1)
            else:
                failures = 0
                delay = self._interval
                status = record.get("status")

                if status == aai.TranscriptStatus.completed:
                    logger.info(
                        "Transcription completed",
                        extra={"job_id": job.id, "attempts": attempt},
                    )
                    return job.model_copy(update={"status": status, "record": record})

                if status == aai.TranscriptStatus.error:
                    logger.error(
                        "Transcription failed",
                        extra={"job_id": job.id, "reason": record.get("error")},
                    )
                    raise TranscriptionFailure(job.id, record.get("error"))

                if status is None:
                    raise MalformedUpstreamResponse(
                        "status", record.get("error") or "missing 'status'"
                    )

            if deadline is not None and self._clock() + delay > deadline:
                logger.error(
                    "Transcription wait budget exhausted",
                    extra={"job_id": job.id, "max_wait_seconds": self._max_wait},
                )
                raise TranscriptionTimeoutError(job.id, self._max_wait)

            if cancel_event.wait(delay):
                logger.info("Polling cancelled", extra={"job_id": job.id})
                raise PollingCancelledError(job.id)
