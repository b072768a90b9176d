"""In-memory transport adapter."""

from collections.abc import AsyncIterable

from insightspy.core.models import Envelope


class InMemoryTransport:
    """In-memory implementation of TransportPort.

    Keeps accepted envelopes in a list until drained. Suitable for testing
    and for embedding clients that submit envelopes themselves.
    """

    def __init__(self) -> None:
        self._envelopes: list[Envelope] = []

    async def send(self, envelope: Envelope) -> None:
        """Accept an envelope."""
        self._envelopes.append(envelope)

    async def drain(self) -> AsyncIterable[Envelope]:
        """Yield accepted envelopes in order and forget them."""
        envelopes, self._envelopes = self._envelopes, []
        for envelope in envelopes:
            yield envelope

    def __len__(self) -> int:
        return len(self._envelopes)
