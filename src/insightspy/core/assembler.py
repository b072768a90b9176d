"""Conversion of telemetry items into envelopes.

Each telemetry type has one converter in the table below. A converter
merges the item with the telemetry context and maps its fields onto the
wire payload. Tags and properties from the item win over the context;
measurements come from the item alone.
"""

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import TypeVar

from insightspy.core import clock
from insightspy.core.containers import Properties
from insightspy.core.context import TelemetryContext
from insightspy.core.errors import UnsupportedTelemetryError
from insightspy.core.ids import format_id
from insightspy.core.models import (
    AvailabilityData,
    Data,
    DataPoint,
    Envelope,
    EventData,
    ExceptionData,
    MessageData,
    MetricData,
    PageViewData,
    Payload,
    RemoteDependencyData,
    RequestData,
)
from insightspy.core.tags import ContextTags
from insightspy.core.telemetry import (
    AggregateMetricTelemetry,
    AvailabilityTelemetry,
    EventTelemetry,
    ExceptionTelemetry,
    MetricTelemetry,
    PageViewTelemetry,
    RemoteDependencyTelemetry,
    RequestTelemetry,
    Telemetry,
    TraceTelemetry,
)
from insightspy.core.telemetry.exception import exception_details

logger = logging.getLogger(__name__)

EVENT_NAME = "Microsoft.ApplicationInsights.Event"
PAGE_VIEW_NAME = "Microsoft.ApplicationInsights.PageView"
REQUEST_NAME = "Microsoft.ApplicationInsights.Request"
MESSAGE_NAME = "Microsoft.ApplicationInsights.Message"
REMOTE_DEPENDENCY_NAME = "Microsoft.ApplicationInsights.RemoteDependency"
METRIC_NAME = "Microsoft.ApplicationInsights.Metric"
EXCEPTION_NAME = "Microsoft.ApplicationInsights.Exception"
AVAILABILITY_NAME = "Microsoft.ApplicationInsights.Availability"

T = TypeVar("T", bound=Telemetry)

# Maps a telemetry class to (envelope name, payload builder)
_converters: dict[type, tuple[str, Callable[[TelemetryContext, Telemetry], Payload]]] = {}


def register_converter(
    telemetry_type: type[T], envelope_name: str
) -> Callable[
    [Callable[[TelemetryContext, T], Payload]],
    Callable[[TelemetryContext, T], Payload],
]:
    """Register a payload builder for a telemetry type.

    Args:
        telemetry_type: The telemetry class handled by the builder.
        envelope_name: Fixed wire name of envelopes of this type.

    Raises:
        ValueError: If the type already has a converter.
    """

    def decorator(
        builder: Callable[[TelemetryContext, T], Payload],
    ) -> Callable[[TelemetryContext, T], Payload]:
        if telemetry_type in _converters:
            raise ValueError(f"{telemetry_type.__name__} already registered")
        _converters[telemetry_type] = (envelope_name, builder)  # type: ignore[assignment]
        return builder

    return decorator


def to_envelope(context: TelemetryContext, telemetry: Telemetry) -> Envelope:
    """Convert a telemetry item into an envelope.

    Neither argument is modified and the envelope keeps no reference to
    their containers.

    Args:
        context: Client-wide defaults.
        telemetry: The item to convert.

    Returns:
        A new immutable Envelope.

    Raises:
        UnsupportedTelemetryError: If no converter is registered for the type.
    """
    try:
        envelope_name, builder = _converters[type(telemetry)]
    except KeyError:
        raise UnsupportedTelemetryError(
            f"no envelope converter for {type(telemetry).__name__}"
        ) from None

    envelope = Envelope(
        name=envelope_name,
        time=clock.format_time(telemetry.timestamp),
        i_key=context.i_key or None,
        tags=dict(ContextTags.combine(context.tags, telemetry.tags)),
        data=Data(builder(context, telemetry)),
    )
    logger.debug("converted %s into %s envelope", type(telemetry).__name__, envelope_name)
    return envelope


def _properties(context: TelemetryContext, telemetry: Telemetry) -> dict[str, str]:
    return dict(Properties.combine(context.properties, telemetry.properties))


def _duration(value: timedelta | None) -> str | None:
    return clock.format_duration(value) if value is not None else None


@register_converter(EventTelemetry, EVENT_NAME)
def _event(context: TelemetryContext, telemetry: EventTelemetry) -> EventData:
    return EventData(
        name=telemetry.name,
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )


@register_converter(PageViewTelemetry, PAGE_VIEW_NAME)
def _page_view(context: TelemetryContext, telemetry: PageViewTelemetry) -> PageViewData:
    return PageViewData(
        name=telemetry.name,
        url=telemetry.url,
        duration=_duration(telemetry.duration),
        # id is a required string field: "" rather than omitted
        id=format_id(telemetry.id),
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )


@register_converter(RequestTelemetry, REQUEST_NAME)
def _request(context: TelemetryContext, telemetry: RequestTelemetry) -> RequestData:
    return RequestData(
        id=format_id(telemetry.id),
        name=telemetry.name,
        duration=clock.format_duration(telemetry.duration),
        response_code=telemetry.response_code,
        success=bool(telemetry.success),
        source=telemetry.source,
        url=telemetry.url,
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )


@register_converter(TraceTelemetry, MESSAGE_NAME)
def _trace(context: TelemetryContext, telemetry: TraceTelemetry) -> MessageData:
    return MessageData(
        message=telemetry.message,
        severity_level=telemetry.severity.value,
        properties=_properties(context, telemetry),
    )


@register_converter(RemoteDependencyTelemetry, REMOTE_DEPENDENCY_NAME)
def _remote_dependency(
    context: TelemetryContext, telemetry: RemoteDependencyTelemetry
) -> RemoteDependencyData:
    return RemoteDependencyData(
        name=telemetry.name,
        # optional here, unlike page views
        id=format_id(telemetry.id) if telemetry.id is not None else None,
        result_code=telemetry.result_code,
        duration=clock.format_duration(telemetry.duration),
        success=telemetry.success,
        data=telemetry.data,
        target=telemetry.target,
        type=telemetry.dependency_type,
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )


@register_converter(MetricTelemetry, METRIC_NAME)
def _metric(context: TelemetryContext, telemetry: MetricTelemetry) -> MetricData:
    point = DataPoint(
        name=telemetry.name,
        kind="Measurement",
        value=float(telemetry.value),
        count=1,
    )
    return MetricData(metrics=(point,), properties=_properties(context, telemetry))


@register_converter(AggregateMetricTelemetry, METRIC_NAME)
def _aggregate_metric(
    context: TelemetryContext, telemetry: AggregateMetricTelemetry
) -> MetricData:
    stats = telemetry.stats
    point = DataPoint(
        name=telemetry.name,
        kind="Aggregation",
        value=stats.value,
        count=stats.count,
        min=stats.min,
        max=stats.max,
        std_dev=stats.std_dev,
    )
    return MetricData(metrics=(point,), properties=_properties(context, telemetry))


@register_converter(ExceptionTelemetry, EXCEPTION_NAME)
def _exception(context: TelemetryContext, telemetry: ExceptionTelemetry) -> ExceptionData:
    return ExceptionData(
        exceptions=exception_details(telemetry.exception),
        severity_level=telemetry.severity.value if telemetry.severity else None,
        problem_id=telemetry.problem_id,
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )


@register_converter(AvailabilityTelemetry, AVAILABILITY_NAME)
def _availability(
    context: TelemetryContext, telemetry: AvailabilityTelemetry
) -> AvailabilityData:
    return AvailabilityData(
        id=format_id(telemetry.id),
        name=telemetry.name,
        duration=clock.format_duration(telemetry.duration),
        success=telemetry.success,
        run_location=telemetry.run_location,
        message=telemetry.message,
        properties=_properties(context, telemetry),
        measurements=dict(telemetry.measurements),
    )
