import pytest

from fakes import UPLOAD_URL, FakeProvider, build_handler, completed, processing
from multimodal_proxy.domain import LocalMedia
from multimodal_proxy.exceptions import TranscriptionFailure, ValidationError


def test_missing_file_fails_validation_without_provider_calls(event):
    provider = FakeProvider()

    with pytest.raises(ValidationError, match="No file uploaded"):
        build_handler(provider).transcribe_upload(None, event)

    assert provider.calls == []


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url_fails_validation_without_provider_calls(event, url):
    provider = FakeProvider()

    with pytest.raises(ValidationError, match="YouTube URL is required"):
        build_handler(provider).transcribe_url(url, event)

    assert provider.calls == []


def test_audio_upload_flow_returns_mapped_result(tmp_path, clock, event):
    path = tmp_path / "memo.wav"
    path.write_bytes(b"RIFF....WAVE")
    media = LocalMedia(path=path, file_name="memo.wav", size=12)
    provider = FakeProvider([processing(), completed()])

    result = build_handler(provider, clock).transcribe_upload(media, event)

    assert result.id == "job-1"
    assert result.text == "Hello from the recording."
    assert result.summary == "- A greeting"
    assert provider.calls[:2] == [("upload", 12), ("create", UPLOAD_URL)]
    assert provider.status_calls == 2
    assert not path.exists()


def test_video_url_flow_shares_the_polling_pipeline(clock, event):
    provider = FakeProvider([processing(), processing(), completed()])

    result = build_handler(provider, clock).transcribe_url(
        " https://youtu.be/abc123 ", event
    )

    assert provider.calls[0] == ("create", "https://youtu.be/abc123")
    assert provider.status_calls == 3
    assert result.sentiment[0]["sentiment"] == "POSITIVE"


def test_terminal_error_surfaces_as_failure(clock, event):
    provider = FakeProvider([{"id": "job-1", "status": "error", "error": "bad audio"}])

    with pytest.raises(TranscriptionFailure, match="bad audio"):
        build_handler(provider, clock).transcribe_url("https://youtu.be/x", event)
