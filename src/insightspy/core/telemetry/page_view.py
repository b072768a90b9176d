"""Page view telemetry."""

import uuid
from dataclasses import dataclass
from datetime import timedelta

from insightspy.core import clock
from insightspy.core.telemetry.base import MeasuredTelemetry
from insightspy.core.urls import parse_url


@dataclass
class PageViewTelemetry(MeasuredTelemetry):
    """A page (or screen) shown to a user.

    Example:
        ```python
        view = PageViewTelemetry("check repo page", "https://example.com/repo")
        view.properties["component"] = "data_processor"
        view.tags.device.os_version = "linux x86_64"
        view.measurements["body_size"] = 115.0
        ```

    Attributes:
        name: Page name.
        url: Page URL with all query string parameters.
        duration: Time taken to load the page, if known.
        id: Correlates the page view with telemetry generated by the service.

    Raises:
        InvalidUrlError: If ``url`` is not an absolute URL.
        InvalidDurationError: If ``duration`` is negative.
    """

    name: str
    url: str
    duration: timedelta | None = None
    id: uuid.UUID | None = None

    def __post_init__(self) -> None:
        self.url = parse_url(self.url)
        if self.duration is not None:
            clock.validate_duration(self.duration)
