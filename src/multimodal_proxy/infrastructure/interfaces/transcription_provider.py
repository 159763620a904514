"""Abstract interface for the external transcription provider."""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from multimodal_proxy.domain.models import JobOptions


class TranscriptionProvider(ABC):
    """Abstract base class for asynchronous transcription backends."""

    @abstractmethod
    def upload(self, stream: BinaryIO, size: int) -> str:
        """
        Streams media bytes to the provider's upload endpoint.

        Args:
            stream: Readable binary stream positioned at the start.
            size: Number of bytes in the stream.

        Returns:
            The provider-hosted URL of the uploaded media.

        Raises:
            SubmissionError: If the provider rejects the upload.
        """
        pass

    @abstractmethod
    def create_job(self, audio_url: str, options: JobOptions) -> str:
        """
        Creates a transcription job for media reachable at ``audio_url``.

        Returns:
            The provider-issued job identifier.

        Raises:
            SubmissionError: If the provider rejects the job.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> dict[str, Any]:
        """
        Fetches the current job record.

        Returns:
            The raw job payload, including its ``status``.

        Raises:
            ProviderUnavailableError: If the provider cannot be reached.
        """
        pass
