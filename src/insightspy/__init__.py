"""insightspy - telemetry envelopes for an Application Insights style backend.

Build telemetry items, merge them with a client-wide context and hand the
resulting envelopes to a transport.

Example:
    ```python
    from insightspy import PageViewTelemetry, TelemetryContext, to_envelope

    context = TelemetryContext("<instrumentation key>")
    view = PageViewTelemetry("home", "https://example.com/")
    envelope = to_envelope(context, view)
    ```
"""

from insightspy._version import __version__
from insightspy.adapters.logging import InsightsHandler
from insightspy.adapters.transport import InMemoryTransport, RingBufferTransport
from insightspy.core.assembler import register_converter, to_envelope
from insightspy.core.config import TelemetryConfig
from insightspy.core.containers import Measurements, Properties
from insightspy.core.context import TelemetryContext
from insightspy.core.encoding import (
    encode_envelope,
    encode_envelopes,
    encode_ndjson,
    envelope_to_dict,
)
from insightspy.core.errors import (
    InsightsError,
    InvalidDurationError,
    InvalidUrlError,
    TransmissionError,
    UnsupportedTelemetryError,
)
from insightspy.core.models import Data, Envelope
from insightspy.core.ports import IdGenerator, TimeSource, TransportPort
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
    SeverityLevel,
    Stats,
    Telemetry,
    TraceTelemetry,
)

__all__ = [
    "AggregateMetricTelemetry",
    "AvailabilityTelemetry",
    "ContextTags",
    "Data",
    "Envelope",
    "EventTelemetry",
    "ExceptionTelemetry",
    "IdGenerator",
    "InMemoryTransport",
    "InsightsError",
    "InsightsHandler",
    "InvalidDurationError",
    "InvalidUrlError",
    "Measurements",
    "MetricTelemetry",
    "PageViewTelemetry",
    "Properties",
    "RemoteDependencyTelemetry",
    "RequestTelemetry",
    "RingBufferTransport",
    "SeverityLevel",
    "Stats",
    "Telemetry",
    "TelemetryConfig",
    "TelemetryContext",
    "TimeSource",
    "TraceTelemetry",
    "TransmissionError",
    "TransportPort",
    "UnsupportedTelemetryError",
    "__version__",
    "encode_envelope",
    "encode_envelopes",
    "encode_ndjson",
    "envelope_to_dict",
    "register_converter",
    "to_envelope",
]
