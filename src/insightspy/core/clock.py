"""Time source used to stamp telemetry items.

Tests can pin the clock process-wide with ``set()`` and restore it with
``reset()``.
"""

from datetime import datetime, timedelta, timezone

from insightspy.core.errors import InvalidDurationError
from insightspy.core.ports import TimeSource

_source: TimeSource | None = None


class FixedTimeSource:
    """Time source that always returns the same instant."""

    def __init__(self, value: datetime) -> None:
        self._value = _as_utc(value)

    def now(self) -> datetime:
        return self._value


def now() -> datetime:
    """Return the current UTC time from the active time source."""
    if _source is not None:
        return _as_utc(_source.now())
    return datetime.now(timezone.utc)


def use(source: TimeSource) -> None:
    """Replace the time source process-wide."""
    global _source
    _source = source


def set(value: datetime) -> None:  # noqa: A001
    """Pin the clock to ``value`` for every subsequent ``now()`` call.

    Naive datetimes are interpreted as UTC.
    """
    use(FixedTimeSource(value))


def reset() -> None:
    """Return to the wall clock."""
    global _source
    _source = None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_time(value: datetime) -> str:
    """Format a timestamp as millisecond RFC 3339 with a ``Z`` suffix.

    Sub-millisecond digits are truncated, not rounded.

    Example:
        >>> format_time(datetime(2019, 1, 2, 3, 4, 5, 800000, tzinfo=timezone.utc))
        '2019-01-02T03:04:05.800Z'
    """
    utc = _as_utc(value)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def validate_duration(value: timedelta) -> timedelta:
    """Return ``value`` unchanged if it is a non-negative timedelta.

    Raises:
        InvalidDurationError: If ``value`` is not a timedelta or is negative.
    """
    if not isinstance(value, timedelta):
        raise InvalidDurationError(f"duration must be a timedelta, got {value!r}")
    if value < timedelta(0):
        raise InvalidDurationError(f"duration must not be negative, got {value!r}")
    return value


def format_duration(value: timedelta) -> str:
    """Format a duration as ``d.hh:mm:ss.fffffff``.

    The fractional part is expressed in 100ns ticks, so it always has
    seven digits.
    """
    total_seconds = value.days * 86400 + value.seconds
    ticks = value.microseconds * 10
    days, rest = divmod(total_seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{days}.{hours:02d}:{minutes:02d}:{seconds:02d}.{ticks:07d}"
