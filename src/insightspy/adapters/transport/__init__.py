"""Transport adapters implementing TransportPort."""

from insightspy.adapters.transport.in_memory import InMemoryTransport
from insightspy.adapters.transport.ring_buffer import RingBufferTransport

__all__ = [
    "InMemoryTransport",
    "RingBufferTransport",
]
