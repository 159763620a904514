"""Submits media to the transcription provider."""

from multimodal_proxy.exceptions import SubmissionError
from multimodal_proxy.infrastructure.interfaces import TranscriptionProvider
from multimodal_proxy.logging import setup_logging

from .models import JobOptions, LocalMedia, TranscriptionJob

logger = setup_logging()


class JobSubmitter:
    """Creates transcription jobs from staged uploads or remote media URLs."""

    def __init__(self, provider: TranscriptionProvider, options: JobOptions):
        self._provider = provider
        self._options = options

    def submit_local(self, media: LocalMedia) -> TranscriptionJob:
        """
        Uploads a staged file, then creates a job for the hosted copy.

        The staged file is deleted once the upload attempt ends, whether the
        provider accepted it or not.

        Raises:
            SubmissionError: If the upload or the job creation is rejected.
        """
        try:
            with open(media.path, "rb") as stream:
                upload_url = self._provider.upload(stream, media.size)
        except OSError as e:
            logger.exception(
                "Staged upload could not be read", extra={"path": str(media.path)}
            )
            raise SubmissionError("upload", str(e), cause=e) from e
        finally:
            self._discard(media)

        return self._create(upload_url)

    def submit_url(self, url: str) -> TranscriptionJob:
        """
        Creates a job for media the provider can fetch itself.

        Raises:
            SubmissionError: If the job creation is rejected.
        """
        return self._create(url)

    def _create(self, source_ref: str) -> TranscriptionJob:
        job_id = self._provider.create_job(source_ref, self._options)
        logger.info("Transcription submitted", extra={"job_id": job_id})
        return TranscriptionJob(id=job_id, source_ref=source_ref)

    def _discard(self, media: LocalMedia) -> None:
        try:
            media.path.unlink()
        except FileNotFoundError:
            logger.warning(
                "Staged upload already removed", extra={"path": str(media.path)}
            )
        except OSError:
            logger.exception(
                "Staged upload could not be removed", extra={"path": str(media.path)}
            )
