"""Client-wide telemetry context.

The context holds defaults applied to every telemetry item on conversion:
the instrumentation key, context tags and custom properties. Values on a
telemetry item always win over the context.
"""

import platform

from insightspy._version import __version__
from insightspy.core.config import TelemetryConfig
from insightspy.core.containers import Properties
from insightspy.core.tags import ContextTags


class TelemetryContext:
    """Defaults merged into every outgoing envelope.

    The context is not synchronized. Callers sharing it across threads should
    convert against a ``snapshot()``.

    Example:
        ```python
        context = TelemetryContext("<instrumentation key>")
        context.tags.cloud.role = "checkout"
        context.properties["deployment"] = "blue"
        ```
    """

    def __init__(
        self,
        i_key: str,
        tags: ContextTags | None = None,
        properties: Properties | None = None,
    ) -> None:
        self._i_key = i_key
        self._tags = ContextTags(tags or {})
        self._properties = Properties(properties or {})

    @classmethod
    def from_config(cls, config: TelemetryConfig) -> "TelemetryContext":
        """Create a context with the SDK version and OS version tags set."""
        context = cls(config.i_key)
        context.tags.internal.sdk_version = f"python:{__version__}"
        context.tags.device.os_version = f"{platform.system()} {platform.release()}".strip()
        return context

    @property
    def i_key(self) -> str:
        """Instrumentation key; empty when telemetry is not routed anywhere."""
        return self._i_key

    @i_key.setter
    def i_key(self, value: str) -> None:
        self._i_key = value

    @property
    def tags(self) -> ContextTags:
        """Default context tags, mutable in place."""
        return self._tags

    @property
    def properties(self) -> Properties:
        """Default custom properties, mutable in place."""
        return self._properties

    def snapshot(self) -> "TelemetryContext":
        """Return an independent copy of this context."""
        return TelemetryContext(self._i_key, self._tags.copy(), self._properties.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TelemetryContext):
            return NotImplemented
        return (
            self._i_key == other._i_key
            and self._tags == other._tags
            and self._properties == other._properties
        )

    def __repr__(self) -> str:
        return (
            f"TelemetryContext(i_key={self._i_key!r}, tags={self._tags!r}, "
            f"properties={self._properties!r})"
        )
