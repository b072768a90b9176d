"""Exception hierarchy for insightspy.

Validation errors are raised while telemetry items are being constructed.
Once an item exists, converting it to an envelope cannot fail.
"""


class InsightsError(Exception):
    """Base class for all insightspy errors."""


class InvalidUrlError(InsightsError, ValueError):
    """Raised when a URL-typed field is not an absolute URL."""


class InvalidDurationError(InsightsError, ValueError):
    """Raised when a duration is negative or not a timedelta."""


class UnsupportedTelemetryError(InsightsError, TypeError):
    """Raised when no envelope converter is registered for a telemetry type."""


class TransmissionError(InsightsError):
    """Raised by transports when the backend rejects a submission.

    Attributes:
        status_code: HTTP status returned by the backend, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
