"""Port interfaces for the collaborators of the envelope core.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

import uuid
from collections.abc import AsyncIterable
from datetime import datetime
from typing import Protocol, runtime_checkable

from insightspy.core.models import Envelope


@runtime_checkable
class TimeSource(Protocol):
    """Port for the clock used to stamp telemetry items."""

    def now(self) -> datetime:
        """Return the current UTC time with at least millisecond resolution."""
        ...


@runtime_checkable
class IdGenerator(Protocol):
    """Port for correlation id generation."""

    def __call__(self) -> uuid.UUID:
        """Return a new unique identifier."""
        ...


@runtime_checkable
class TransportPort(Protocol):
    """Port for envelope submission.

    Adapters implementing this protocol accept finished envelopes.
    Examples: InMemoryTransport, RingBufferTransport, HttpTransport.
    """

    async def send(self, envelope: Envelope) -> None:
        """Accept an envelope for submission."""
        ...

    def drain(self) -> AsyncIterable[Envelope]:
        """Yield and remove all envelopes accepted but not yet submitted.

        Returns:
            AsyncIterable of Envelope objects, in submission order.
        """
        ...
