"""Ring buffer transport adapter.

Provides bounded in-memory buffering that automatically evicts the oldest
envelopes when the buffer is full. Useful for services that need
predictable memory usage while the backend is unreachable.
"""

import logging
from collections import deque
from collections.abc import AsyncIterable

from insightspy.core.models import Envelope

logger = logging.getLogger(__name__)


class RingBufferTransport:
    """Ring buffer implementation of TransportPort.

    Args:
        max_size: Maximum number of envelopes to keep.
    """

    def __init__(self, max_size: int) -> None:
        self._buffer: deque[Envelope] = deque(maxlen=max_size)

    async def send(self, envelope: Envelope) -> None:
        """Accept an envelope, evicting the oldest one when full."""
        if len(self._buffer) == self._buffer.maxlen:
            logger.debug("ring buffer full, dropping oldest %s", self._buffer[0].name)
        self._buffer.append(envelope)

    async def drain(self) -> AsyncIterable[Envelope]:
        """Yield buffered envelopes, oldest first, and empty the buffer."""
        while self._buffer:
            yield self._buffer.popleft()

    def __len__(self) -> int:
        return len(self._buffer)
