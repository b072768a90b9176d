"""Availability test telemetry."""

import uuid
from dataclasses import dataclass
from datetime import timedelta

from insightspy.core import clock
from insightspy.core.telemetry.base import MeasuredTelemetry


@dataclass
class AvailabilityTelemetry(MeasuredTelemetry):
    """Result of an availability test such as a periodic ping."""

    name: str
    duration: timedelta
    success: bool
    id: uuid.UUID | None = None
    run_location: str | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        clock.validate_duration(self.duration)
