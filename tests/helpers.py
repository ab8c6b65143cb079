"""Test helpers for capturing log records."""

from __future__ import annotations

import logging

from hypothesis import HealthCheck, settings

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


class RecordingHandler(logging.Handler):
    """Keep every emitted record in memory."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self) -> list[str]:
        return [r.getMessage() for r in self.records]


def make_recording_logger(name: str) -> tuple[logging.Logger, RecordingHandler]:
    """Return an isolated logger that does not propagate, plus its handler."""
    log = logging.getLogger(name)
    log.handlers.clear()
    log.propagate = False
    log.setLevel(logging.DEBUG)
    handler = RecordingHandler()
    log.addHandler(handler)
    return log, handler
