"""AssemblyAI implementation of the TranscriptionProvider interface."""

from typing import Any, BinaryIO

import requests

from multimodal_proxy.domain.models import JobOptions
from multimodal_proxy.exceptions import (
    MalformedUpstreamResponse,
    ProviderUnavailableError,
    SubmissionError,
)
from multimodal_proxy.logging import setup_logging

from .interfaces import TranscriptionProvider

logger = setup_logging()


class AssemblyAIProvider(TranscriptionProvider):
    """
    Talks to the AssemblyAI v2 REST API.

    Jobs are created and observed through explicit upload, create and status
    calls so the caller controls the polling loop. The session is expected to
    carry the ``authorization`` header.
    """

    def __init__(self, session: requests.Session, base_url: str, timeout: float):
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def upload(self, stream: BinaryIO, size: int) -> str:
        try:
            response = self._session.post(
                f"{self._base_url}/v2/upload",
                data=stream,
                headers={
                    "content-type": "application/octet-stream",
                    "content-length": str(size),
                },
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI upload request failed")
            raise SubmissionError("upload", str(e), cause=e) from e

        if not response.ok:
            logger.error(
                "AssemblyAI rejected upload",
                extra={"status_code": response.status_code, "size": size},
            )
            raise SubmissionError("upload", response.text)

        upload_url = self._json(response, "upload").get("upload_url")
        if not upload_url:
            raise MalformedUpstreamResponse("upload", "missing 'upload_url'")

        logger.info("Media uploaded to AssemblyAI", extra={"size": size})
        return upload_url

    def create_job(self, audio_url: str, options: JobOptions) -> str:
        body = {"audio_url": audio_url, **options.model_dump(mode="json")}
        try:
            response = self._session.post(
                f"{self._base_url}/v2/transcript",
                json=body,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI transcript request failed")
            raise SubmissionError("create", str(e), cause=e) from e

        if not response.ok:
            logger.error(
                "AssemblyAI rejected transcript request",
                extra={"status_code": response.status_code},
            )
            raise SubmissionError("create", response.text)

        job_id = self._json(response, "create").get("id")
        if not job_id:
            raise MalformedUpstreamResponse("create", "missing 'id'")

        logger.info("Transcription job created", extra={"job_id": job_id})
        return job_id

    def get_job(self, job_id: str) -> dict[str, Any]:
        try:
            response = self._session.get(
                f"{self._base_url}/v2/transcript/{job_id}",
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning(
                "AssemblyAI status request failed",
                extra={"job_id": job_id, "error": str(e)},
            )
            raise ProviderUnavailableError("status", cause=e) from e

        if response.status_code >= 500:
            logger.warning(
                "AssemblyAI status request returned server error",
                extra={"job_id": job_id, "status_code": response.status_code},
            )
            raise ProviderUnavailableError("status")

        return self._json(response, "status")

    def _json(self, response: requests.Response, operation: str) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedUpstreamResponse(operation, "body is not JSON") from e
        if not isinstance(payload, dict):
            raise MalformedUpstreamResponse(operation, "body is not a JSON object")
        return payload
