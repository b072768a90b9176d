"""Python logging handler adapter for insightspy.

This adapter bridges Python's standard library logging module to a
TransportPort: every log record becomes a trace envelope, or an exception
envelope when the record carries exception info.
"""

import asyncio
import logging
from datetime import datetime, timezone

from insightspy.core.assembler import to_envelope
from insightspy.core.context import TelemetryContext
from insightspy.core.ports import TransportPort
from insightspy.core.telemetry import (
    ExceptionTelemetry,
    SeverityLevel,
    Telemetry,
    TraceTelemetry,
)

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to copy into custom properties
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno", "pathname"]


class InsightsHandler(logging.Handler):
    """Logging handler that sends log records through a TransportPort.

    Example:
        ```python
        from insightspy import InMemoryTransport, InsightsHandler, TelemetryContext

        transport = InMemoryTransport()
        handler = InsightsHandler(TelemetryContext("<key>"), transport)
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        context: TelemetryContext,
        transport: TransportPort,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            context: Telemetry context merged into every envelope.
            transport: Transport receiving the envelopes.
            include_attrs: LogRecord attributes copied into properties. Defaults
                to ["module", "funcName", "lineno", "pathname"].
        """
        super().__init__()
        self._context = context
        self._transport = transport
        self._include_attrs = include_attrs or _DEFAULT_INCLUDE_ATTRS
        self._tasks: set[asyncio.Task[None]] = set()

    def to_telemetry(self, record: logging.LogRecord) -> Telemetry:
        """Build the telemetry item for a log record."""
        attr_mapping: dict[str, str] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": str(record.lineno),
            "pathname": record.pathname,
        }

        severity = SeverityLevel.from_log_level(record.levelno)
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)

        telemetry: Telemetry
        exc = record.exc_info[1] if record.exc_info else None
        if exc is not None:
            telemetry = ExceptionTelemetry(exc, severity=severity, timestamp=timestamp)
            telemetry.properties["message"] = record.getMessage()
        else:
            telemetry = TraceTelemetry(
                record.getMessage(), severity=severity, timestamp=timestamp
            )

        for key in self._include_attrs:
            if key in attr_mapping:
                telemetry.properties[key] = attr_mapping[key]

        # Extra attributes passed via the logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                telemetry.properties[key] = str(value)

        return telemetry

    def emit(self, record: logging.LogRecord) -> None:
        """Convert a log record and send its envelope.

        Args:
            record: The log record to emit.
        """
        try:
            envelope = to_envelope(self._context, self.to_telemetry(record))
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                asyncio.run(self._transport.send(envelope))
            else:
                # Inside an event loop: send in the background
                task = loop.create_task(self._transport.send(envelope))
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)
        except Exception:
            self.handleError(record)
