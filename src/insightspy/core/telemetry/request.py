"""Incoming request telemetry."""

import uuid
from dataclasses import dataclass, field
from datetime import timedelta

from insightspy.core import clock, ids
from insightspy.core.telemetry.base import MeasuredTelemetry
from insightspy.core.urls import parse_url, url_path


def is_success_code(response_code: str) -> bool:
    """Return True for codes below 400 and for 401.

    401 is part of the normal authentication handshake. Non-numeric codes
    are treated as failures.
    """
    try:
        code = int(response_code)
    except ValueError:
        return False
    return code < 400 or code == 401


@dataclass
class RequestTelemetry(MeasuredTelemetry):
    """A request handled by the application.

    The request id is generated on construction. ``name`` defaults to
    ``"<METHOD> <path>"`` and ``success`` is derived from ``response_code``
    unless given explicitly.

    Example:
        ```python
        request = RequestTelemetry(
            "GET", "https://api.example.com/orders/42", timedelta(milliseconds=87), "200"
        )
        ```
    """

    method: str
    url: str
    duration: timedelta
    response_code: str
    name: str | None = None
    success: bool | None = None
    source: str | None = None
    id: uuid.UUID = field(default_factory=ids.new_id)

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        self.url = parse_url(self.url)
        clock.validate_duration(self.duration)
        self.response_code = str(self.response_code)
        if self.name is None:
            self.name = f"{self.method} {url_path(self.url)}"
        if self.success is None:
            self.success = is_success_code(self.response_code)
