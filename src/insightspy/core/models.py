"""Wire contracts for telemetry envelopes.

These frozen dataclasses mirror the ingestion schema. Field names are
pythonic here; ``insightspy.core.encoding.wire`` maps them to the
camelCase names used on the wire. Optional fields default to ``None`` and
are omitted when serialized.
"""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class EventData:
    """Payload of a custom event.

    Attributes:
        name: Event name.
        properties: Merged custom properties.
        measurements: Custom measurements.
        ver: Schema version.
    """

    BASE_TYPE: ClassVar[str] = "EventData"

    name: str
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class PageViewData:
    """Payload of a page view.

    ``id`` is a required string on the wire and is ``""`` when unset.
    """

    BASE_TYPE: ClassVar[str] = "PageViewData"

    name: str
    id: str = ""
    url: str | None = None
    duration: str | None = None
    referrer_uri: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class RequestData:
    """Payload of an incoming request handled by the application."""

    BASE_TYPE: ClassVar[str] = "RequestData"

    id: str
    duration: str
    response_code: str
    success: bool
    name: str | None = None
    source: str | None = None
    url: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class MessageData:
    """Payload of a trace message."""

    BASE_TYPE: ClassVar[str] = "MessageData"

    message: str
    severity_level: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class RemoteDependencyData:
    """Payload of an outgoing call to a remote dependency.

    Unlike page views and requests, ``id`` is optional and omitted when unset.
    """

    BASE_TYPE: ClassVar[str] = "RemoteDependencyData"

    name: str
    duration: str
    id: str | None = None
    result_code: str | None = None
    success: bool | None = True
    data: str | None = None
    target: str | None = None
    type: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class DataPoint:
    """A single metric value or an aggregation of several values."""

    name: str
    value: float
    ns: str | None = None
    kind: str | None = None
    count: int | None = None
    min: float | None = None
    max: float | None = None
    std_dev: float | None = None


@dataclass(frozen=True)
class MetricData:
    """Payload of one or more metric data points."""

    BASE_TYPE: ClassVar[str] = "MetricData"

    metrics: tuple[DataPoint, ...]
    properties: dict[str, str] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class ExceptionDetails:
    """One exception in a chain of exceptions."""

    type_name: str
    message: str
    has_full_stack: bool = True
    id: int | None = None
    outer_id: int | None = None
    stack: str | None = None


@dataclass(frozen=True)
class ExceptionData:
    """Payload of a handled or unhandled exception."""

    BASE_TYPE: ClassVar[str] = "ExceptionData"

    exceptions: tuple[ExceptionDetails, ...]
    severity_level: str | None = None
    problem_id: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


@dataclass(frozen=True)
class AvailabilityData:
    """Payload of an availability (ping or web) test result."""

    BASE_TYPE: ClassVar[str] = "AvailabilityData"

    name: str
    duration: str
    success: bool
    id: str = ""
    run_location: str | None = None
    message: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)
    ver: int = 2


Payload = (
    EventData
    | PageViewData
    | RequestData
    | MessageData
    | RemoteDependencyData
    | MetricData
    | ExceptionData
    | AvailabilityData
)


@dataclass(frozen=True)
class Data:
    """Typed payload wrapper; holds exactly one payload record.

    The ``base_type`` discriminator is derived from the payload class, so
    it cannot disagree with the payload.
    """

    base_data: Payload

    @property
    def base_type(self) -> str:
        return self.base_data.BASE_TYPE


@dataclass(frozen=True)
class Envelope:
    """A telemetry item ready to be handed to a transport.

    Attributes:
        name: Wire type of the item, e.g. ``Microsoft.ApplicationInsights.PageView``.
        time: RFC 3339 UTC timestamp with millisecond precision and ``Z`` suffix.
        i_key: Instrumentation key, or None when the context has none.
        tags: Merged context tags.
        data: The typed payload.
        ver: Envelope schema version.
        sample_rate: Sampling rate in percent.
        seq: Sequence field, unset by this library.
        flags: Flags field, unset by this library.
    """

    name: str
    time: str
    i_key: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    data: Data | None = None
    ver: int = 1
    sample_rate: float = 100.0
    seq: str | None = None
    flags: int | None = None
