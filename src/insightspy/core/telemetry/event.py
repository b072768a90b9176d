"""Custom event telemetry."""

from dataclasses import dataclass

from insightspy.core.telemetry.base import MeasuredTelemetry


@dataclass
class EventTelemetry(MeasuredTelemetry):
    """A custom event, e.g. a user action or a business milestone.

    Example:
        ```python
        event = EventTelemetry("order placed")
        event.properties["region"] = "eu-west"
        event.measurements["items"] = 3
        ```
    """

    name: str
