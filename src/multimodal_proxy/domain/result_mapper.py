"""Maps completed provider records to transcription results."""

from .models import TranscriptionJob, TranscriptionResult


class ResultMapper:
    """Copies the fields callers need out of a completed job record."""

    def map(self, job: TranscriptionJob) -> TranscriptionResult:
        record = job.record
        return TranscriptionResult(
            id=record.get("id", job.id),
            text=record.get("text"),
            sentiment=record.get("sentiment_analysis_results"),
            summary=record.get("summary"),
        )
