"""HTTP transport adapter using httpx.

Posts envelopes to the ingestion endpoint as a JSON array. Each call to
``submit`` is a single request: there is no retry and no batching policy.
"""

import logging
from collections.abc import AsyncIterable, Iterable
from dataclasses import dataclass, field

import httpx

from insightspy.core.config import TelemetryConfig
from insightspy.core.encoding.wire import encode_envelopes
from insightspy.core.errors import TransmissionError
from insightspy.core.models import Envelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransmissionResult:
    """Backend response to a submission.

    Attributes:
        items_received: Number of envelopes the backend received.
        items_accepted: Number of envelopes the backend accepted.
        errors: Per-item error objects returned by the backend.
    """

    items_received: int
    items_accepted: int
    errors: list[dict[str, object]] = field(default_factory=list)


class HttpTransport:
    """TransportPort that submits envelopes to the ingestion endpoint.

    ``send`` only queues an envelope; ``flush`` posts everything queued in
    one request.

    Example:
        ```python
        config = TelemetryConfig("<instrumentation key>")
        async with httpx.AsyncClient() as client:
            transport = HttpTransport(config, client)
            await transport.send(envelope)
            result = await transport.flush()
        ```
    """

    def __init__(
        self,
        config: TelemetryConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._pending: list[Envelope] = []

    async def send(self, envelope: Envelope) -> None:
        """Queue an envelope for the next ``flush``."""
        self._pending.append(envelope)

    async def drain(self) -> AsyncIterable[Envelope]:
        """Yield queued envelopes without submitting them."""
        pending, self._pending = self._pending, []
        for envelope in pending:
            yield envelope

    async def flush(self) -> TransmissionResult:
        """Submit all queued envelopes in a single request.

        Returns:
            TransmissionResult parsed from the backend response.

        Raises:
            TransmissionError: If the request fails or the backend answers
                with a non-2xx status. Queued envelopes are discarded either way.
        """
        pending, self._pending = self._pending, []
        if not pending:
            return TransmissionResult(items_received=0, items_accepted=0)
        return await self.submit(pending)

    async def submit(self, envelopes: Iterable[Envelope]) -> TransmissionResult:
        """Post ``envelopes`` to the endpoint in one request."""
        body = encode_envelopes(envelopes)
        headers = {"content-type": "application/json"}
        try:
            if self._client is not None:
                response = await self._client.post(
                    self._config.endpoint,
                    content=body,
                    headers=headers,
                    timeout=self._config.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.post(
                        self._config.endpoint, content=body, headers=headers
                    )
        except httpx.HTTPError as exc:
            raise TransmissionError(f"submission failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "backend rejected submission with status %d", response.status_code
            )
            raise TransmissionError(
                f"backend responded with {response.status_code}",
                status_code=response.status_code,
            )

        payload = response.json() if response.content else {}
        result = TransmissionResult(
            items_received=int(payload.get("itemsReceived", 0)),
            items_accepted=int(payload.get("itemsAccepted", 0)),
            errors=list(payload.get("errors", [])),
        )
        logger.debug(
            "submitted %d envelopes, %d accepted",
            result.items_received,
            result.items_accepted,
        )
        return result
