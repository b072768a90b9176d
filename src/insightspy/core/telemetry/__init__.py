"""Telemetry item types."""

from insightspy.core.telemetry.availability import AvailabilityTelemetry
from insightspy.core.telemetry.base import MeasuredTelemetry, Telemetry
from insightspy.core.telemetry.dependency import RemoteDependencyTelemetry
from insightspy.core.telemetry.event import EventTelemetry
from insightspy.core.telemetry.exception import ExceptionTelemetry
from insightspy.core.telemetry.metric import (
    AggregateMetricTelemetry,
    MetricTelemetry,
    Stats,
)
from insightspy.core.telemetry.page_view import PageViewTelemetry
from insightspy.core.telemetry.request import RequestTelemetry
from insightspy.core.telemetry.trace import SeverityLevel, TraceTelemetry

__all__ = [
    "AggregateMetricTelemetry",
    "AvailabilityTelemetry",
    "EventTelemetry",
    "ExceptionTelemetry",
    "MeasuredTelemetry",
    "MetricTelemetry",
    "PageViewTelemetry",
    "RemoteDependencyTelemetry",
    "RequestTelemetry",
    "SeverityLevel",
    "Stats",
    "Telemetry",
    "TraceTelemetry",
]
