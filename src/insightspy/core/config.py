"""Client configuration."""

from dataclasses import dataclass

DEFAULT_ENDPOINT = "https://dc.services.visualstudio.com/v2/track"


@dataclass(frozen=True)
class TelemetryConfig:
    """Settings shared by the telemetry context and transports.

    Attributes:
        i_key: Instrumentation key routing telemetry to an account.
        endpoint: Ingestion endpoint URL.
        timeout: Transport request timeout in seconds.
    """

    i_key: str
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 10.0
