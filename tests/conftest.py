"""Shared test fixtures for all test modules."""

import uuid
from collections.abc import Generator
from datetime import datetime, timezone

import pytest

from insightspy.core import clock, ids
from insightspy.core.context import TelemetryContext


@pytest.fixture
def fixed_time() -> Generator[datetime]:
    """Pin the clock to 2019-01-02T03:04:05.800Z for the duration of a test."""
    value = datetime(2019, 1, 2, 3, 4, 5, 800000, tzinfo=timezone.utc)
    clock.set(value)
    yield value
    clock.reset()


@pytest.fixture
def fixed_id() -> Generator[uuid.UUID]:
    """Make the id generator return one well-known UUID."""
    value = uuid.UUID("0e1f2a3b-4c5d-4e6f-8a9b-0c1d2e3f4a5b")
    ids.set_generator(lambda: value)
    yield value
    ids.reset_generator()


@pytest.fixture
def context() -> TelemetryContext:
    """Empty telemetry context with an instrumentation key."""
    return TelemetryContext("instrumentation")


@pytest.fixture
def log_record():
    """Factory fixture for creating stdlib log records."""
    import logging

    def _record(
        msg: str = "test message",
        level: int = logging.INFO,
        exc_info=None,
    ) -> logging.LogRecord:
        return logging.LogRecord(
            name="myapp.service",
            level=level,
            pathname="/app/service.py",
            lineno=42,
            msg=msg,
            args=(),
            exc_info=exc_info,
            func="process_request",
        )

    return _record
