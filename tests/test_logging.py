"""Tests for logging configuration."""

import logging

import pytest

import hexkit.logging as hexkit_logging


class RecordingHandler(logging.Handler):
    """Stand-in for the trace handler that keeps its source name."""

    def __init__(self, source: str):
        super().__init__()
        self.source = source

    def emit(self, record: logging.LogRecord) -> None:
        pass


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers


def test_set_log_level(root_logger):
    """The root logger level follows set_log_level."""
    hexkit_logging.set_log_level(logging.WARNING)
    assert root_logger.level == logging.WARNING


def test_configure_logging_without_trace(root_logger, monkeypatch):
    """No trace handler is attached unless requested."""
    monkeypatch.setattr(hexkit_logging, "TraceLoggingHandler", RecordingHandler)

    hexkit_logging.configure_logging(logging.DEBUG)

    assert root_logger.level == logging.DEBUG
    assert not any(isinstance(h, RecordingHandler) for h in root_logger.handlers)


def test_configure_logging_with_trace(root_logger, monkeypatch):
    """Trace forwarding attaches a DEBUG-level handler to the root logger."""
    monkeypatch.setattr(hexkit_logging, "TraceLoggingHandler", RecordingHandler)

    hexkit_logging.configure_logging(logging.INFO, trace=True)

    trace_handlers = [h for h in root_logger.handlers if isinstance(h, RecordingHandler)]
    assert len(trace_handlers) == 1
    assert trace_handlers[0].source == "hexkit_log"
    assert trace_handlers[0].level == logging.DEBUG
    assert root_logger.level == logging.INFO
