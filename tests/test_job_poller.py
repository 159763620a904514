import threading

import pytest

from fakes import FakeEvent, FakeProvider, completed, processing
from multimodal_proxy.domain import TranscriptionJob
from multimodal_proxy.domain.job_poller import JobPoller
from multimodal_proxy.exceptions import (
    MalformedUpstreamResponse,
    PollingCancelledError,
    ProviderUnavailableError,
    TranscriptionFailure,
    TranscriptionTimeoutError,
)


@pytest.fixture
def job():
    return TranscriptionJob(id="job-1", source_ref="https://example.com/a.mp3")


def test_polls_until_completed_with_delay_between_requests(job, clock, event):
    provider = FakeProvider([processing(), processing(), completed()])
    poller = JobPoller(provider, interval_seconds=3.0, clock=clock)

    result = poller.poll(job, event)

    assert provider.status_calls == 3
    assert event.waits == [3.0, 3.0]
    assert result.status == "completed"
    assert result.record["text"] == "Hello from the recording."
    assert result.source_ref == job.source_ref


def test_error_status_raises_failure_without_further_requests(job, clock, event):
    provider = FakeProvider([{"id": "job-1", "status": "error", "error": "bad audio"}])
    poller = JobPoller(provider, clock=clock)

    with pytest.raises(TranscriptionFailure, match="bad audio") as excinfo:
        poller.poll(job, event)

    assert excinfo.value.job_id == "job-1"
    assert provider.status_calls == 1
    assert event.waits == []


def test_queued_is_treated_as_non_terminal(job, clock, event):
    provider = FakeProvider([{"id": "job-1", "status": "queued"}, completed()])

    JobPoller(provider, clock=clock).poll(job, event)

    assert provider.status_calls == 2


def test_times_out_when_wait_budget_is_exhausted(job, clock, event):
    provider = FakeProvider([processing() for _ in range(10)])
    poller = JobPoller(
        provider, interval_seconds=3.0, max_wait_seconds=10.0, clock=clock
    )

    with pytest.raises(TranscriptionTimeoutError):
        poller.poll(job, event)

    assert provider.status_calls == 4
    assert event.waits == [3.0, 3.0, 3.0]


def test_unbounded_wait_keeps_polling(job, clock, event):
    provider = FakeProvider([processing() for _ in range(50)] + [completed()])
    poller = JobPoller(provider, max_wait_seconds=None, clock=clock)

    result = poller.poll(job, event)

    assert result.status == "completed"
    assert provider.status_calls == 51


def test_cancellation_during_wait_stops_polling(job, clock):
    provider = FakeProvider([processing(), processing(), completed()])
    event = FakeEvent(clock, cancel_after=1)

    with pytest.raises(PollingCancelledError):
        JobPoller(provider, clock=clock).poll(job, event)

    assert provider.status_calls == 1


def test_already_cancelled_event_makes_no_requests(job, clock):
    provider = FakeProvider([completed()])
    cancel_event = threading.Event()
    cancel_event.set()

    with pytest.raises(PollingCancelledError):
        JobPoller(provider, clock=clock).poll(job, cancel_event)

    assert provider.calls == []


def test_transient_failures_are_retried_with_backoff(job, clock, event):
    provider = FakeProvider(
        [
            ProviderUnavailableError("status"),
            ProviderUnavailableError("status"),
            completed(),
        ]
    )
    poller = JobPoller(provider, interval_seconds=2.0, clock=clock)

    result = poller.poll(job, event)

    assert result.status == "completed"
    assert event.waits == [2.0, 4.0]


def test_gives_up_after_too_many_transient_failures(job, clock, event):
    provider = FakeProvider(
        [ProviderUnavailableError("status"), ProviderUnavailableError("status")]
    )
    poller = JobPoller(provider, max_transient_errors=1, clock=clock)

    with pytest.raises(ProviderUnavailableError):
        poller.poll(job, event)

    assert provider.status_calls == 2


def test_payload_without_status_is_malformed(job, clock, event):
    provider = FakeProvider([{"error": "Transcript not found"}])

    with pytest.raises(MalformedUpstreamResponse, match="Transcript not found"):
        JobPoller(provider, clock=clock).poll(job, event)
