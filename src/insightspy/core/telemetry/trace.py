"""Trace (log message) telemetry."""

import logging
from dataclasses import dataclass
from enum import Enum

from insightspy.core.telemetry.base import Telemetry


class SeverityLevel(Enum):
    """Severity of a trace or exception, serialized by name."""

    VERBOSE = "Verbose"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"

    @classmethod
    def from_log_level(cls, levelno: int) -> "SeverityLevel":
        """Map a stdlib ``logging`` level number to a severity."""
        if levelno >= logging.CRITICAL:
            return cls.CRITICAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFORMATION
        return cls.VERBOSE


@dataclass
class TraceTelemetry(Telemetry):
    """A printf-style trace message. Traces carry no measurements."""

    message: str
    severity: SeverityLevel = SeverityLevel.INFORMATION
