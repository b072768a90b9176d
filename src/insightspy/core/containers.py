"""Key-value containers attached to telemetry items and the telemetry context.

All three containers are plain dicts with a ``combine`` operation. Combining
is a right-biased union: values from ``overlay`` win on key collisions.
"""

from collections.abc import Mapping
from typing import Generic, Self, TypeVar

_V = TypeVar("_V")


class _Container(dict[str, _V], Generic[_V]):
    """Dict with a right-biased ``combine`` and value-copy semantics."""

    @classmethod
    def combine(cls, base: Mapping[str, _V], overlay: Mapping[str, _V]) -> Self:
        """Merge two containers into a new one.

        Starts from a copy of ``base`` and inserts every key of ``overlay``,
        overwriting on collision. Neither operand is modified.

        Args:
            base: Default values, e.g. from the telemetry context.
            overlay: Values that take precedence, e.g. from a telemetry item.

        Returns:
            A new container of the same class.
        """
        merged = cls(base)
        merged.update(overlay)
        return merged

    def copy(self) -> Self:
        return type(self)(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


class Properties(_Container[str]):
    """Custom string properties."""


class Measurements(_Container[float]):
    """Custom numeric measurements."""
