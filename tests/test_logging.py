import json
import logging

from pythonjsonlogger import jsonlogger

from multimodal_proxy.logging import setup_logging


def json_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h.formatter, jsonlogger.JsonFormatter)]


def test_repeated_setup_keeps_a_single_json_handler():
    first = setup_logging()
    second = setup_logging()

    assert first is second is logging.getLogger()
    assert len(json_handlers(first)) == 1
    assert json_handlers(logging.getLogger("uvicorn.access")) == json_handlers(first)


def test_records_are_rendered_as_json_with_extra_fields():
    [handler] = json_handlers(setup_logging())
    record = logging.LogRecord(
        "multimodal_proxy", logging.INFO, __file__, 1, "Transcription submitted", None, None
    )
    record.job_id = "job-1"

    payload = json.loads(handler.formatter.format(record))

    assert payload["message"] == "Transcription submitted"
    assert payload["level"] == "INFO"
    assert payload["job_id"] == "job-1"
    assert "timestamp" in payload
