"""Shared capabilities of all telemetry items."""

from dataclasses import dataclass, field
from datetime import datetime

from insightspy.core import clock
from insightspy.core.containers import Measurements, Properties
from insightspy.core.tags import ContextTags


@dataclass(kw_only=True)
class Telemetry:
    """Base class for telemetry items.

    Every item carries the time it was measured and two containers that
    override the telemetry context on conversion: custom properties and
    context tags.

    Attributes:
        timestamp: When the item was measured. Defaults to ``clock.now()``.
        properties: Custom properties; win over context properties.
        tags: Context tags; win over context tags.
    """

    timestamp: datetime = field(default_factory=clock.now)
    properties: Properties = field(default_factory=Properties)
    tags: ContextTags = field(default_factory=ContextTags)


@dataclass(kw_only=True)
class MeasuredTelemetry(Telemetry):
    """Telemetry item that also carries custom measurements."""

    measurements: Measurements = field(default_factory=Measurements)
