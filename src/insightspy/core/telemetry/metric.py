"""Metric telemetry: single measurements and pre-aggregated statistics."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from insightspy.core.telemetry.base import Telemetry


@dataclass
class MetricTelemetry(Telemetry):
    """A single measured value. Metrics carry no measurements container."""

    name: str
    value: float


@dataclass
class Stats:
    """Aggregated statistics of a series of values.

    Attributes:
        value: Sum of all values.
        count: Number of values.
        min: Smallest value.
        max: Largest value.
        std_dev: Population standard deviation.
    """

    value: float = 0.0
    count: int = 0
    min: float = 0.0
    max: float = 0.0
    std_dev: float = 0.0
    _sum_squares: float = field(default=0.0, repr=False, compare=False)

    def add_data(self, values: Iterable[float]) -> None:
        """Fold raw values into the statistics."""
        for raw in values:
            x = float(raw)
            if self.count == 0:
                self.min = self.max = x
            else:
                self.min = min(self.min, x)
                self.max = max(self.max, x)
            self.count += 1
            self.value += x
            self._sum_squares += x * x

        if self.count:
            mean = self.value / self.count
            variance = self._sum_squares / self.count - mean * mean
            self.std_dev = math.sqrt(max(variance, 0.0))


@dataclass
class AggregateMetricTelemetry(Telemetry):
    """A metric pre-aggregated on the client.

    Example:
        ```python
        metric = AggregateMetricTelemetry("queue_depth")
        metric.stats.add_data([4, 8, 15, 16, 23, 42])
        ```
    """

    name: str
    stats: Stats = field(default_factory=Stats)
