"""Structured JSON logging shared by every module of the proxy."""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_handler: logging.Handler | None = None


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            LOG_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )
    return handler


def setup_logging() -> logging.Logger:
    """
    Routes the root and uvicorn loggers through one JSON handler on stdout.

    Modules call this at import time to get their logger, so the handler is
    installed on the first call only. LOG_LEVEL sets the level (default INFO).
    trace_id and span_id are filled in when ddtrace log injection is on.

    Returns:
        logging.Logger: The root logger.
    """
    global _handler
    root_logger = logging.getLogger()
    if _handler is not None:
        return root_logger

    _handler = _build_handler()
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    root_logger.setLevel(level)
    root_logger.handlers = [_handler]
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = [_handler]
        server_logger.propagate = False

    return root_logger
