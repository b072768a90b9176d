"""Remote dependency telemetry."""

import uuid
from dataclasses import dataclass
from datetime import timedelta

from insightspy.core import clock
from insightspy.core.telemetry.base import MeasuredTelemetry


@dataclass
class RemoteDependencyTelemetry(MeasuredTelemetry):
    """An outgoing call from the application, e.g. SQL or HTTP.

    Attributes:
        name: Name of the command, e.g. ``"GET /users"``.
        dependency_type: Dependency kind, e.g. ``"HTTP"`` or ``"SQL"``.
        duration: Time the call took.
        target: Target site of the call, e.g. a host name.
        success: Whether the call succeeded.
        id: Optional correlation id, omitted on the wire when unset.
        result_code: Result code, e.g. an HTTP status.
        data: Command text, e.g. a full URL or SQL statement.
    """

    name: str
    dependency_type: str
    duration: timedelta
    target: str
    success: bool = True
    id: uuid.UUID | None = None
    result_code: str | None = None
    data: str | None = None

    def __post_init__(self) -> None:
        clock.validate_duration(self.duration)
