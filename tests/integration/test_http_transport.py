"""Integration tests for HttpTransport against a mocked ingestion endpoint."""

import json

import httpx
import pytest

from insightspy.adapters.transport.http import HttpTransport, TransmissionResult
from insightspy.core.assembler import to_envelope
from insightspy.core.config import TelemetryConfig
from insightspy.core.context import TelemetryContext
from insightspy.core.errors import TransmissionError
from insightspy.core.models import Envelope
from insightspy.core.telemetry import EventTelemetry

pytestmark = [pytest.mark.integration, pytest.mark.transport, pytest.mark.tier(1)]

ENDPOINT = "https://ingest.example.com/v2/track"


def _envelope(name: str) -> Envelope:
    return to_envelope(TelemetryContext("key"), EventTelemetry(name))


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpTransport:
    """Tests for HttpTransport submission."""

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.Flush")
    async def test_flush_posts_json_array(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json={"itemsReceived": 2, "itemsAccepted": 2, "errors": []}
            )

        async with _client(handler) as client:
            transport = HttpTransport(TelemetryConfig("key", endpoint=ENDPOINT), client)
            await transport.send(_envelope("a"))
            await transport.send(_envelope("b"))
            result = await transport.flush()

        assert result == TransmissionResult(items_received=2, items_accepted=2)
        assert len(requests) == 1
        assert str(requests[0].url) == ENDPOINT
        assert requests[0].method == "POST"
        assert requests[0].headers["content-type"] == "application/json"
        body = json.loads(requests[0].content)
        assert [item["data"]["baseData"]["name"] for item in body] == ["a", "b"]
        assert body[0]["iKey"] == "key"

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.Empty")
    async def test_flush_with_nothing_queued_skips_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with _client(handler) as client:
            transport = HttpTransport(TelemetryConfig("key"), client)
            result = await transport.flush()

        assert result == TransmissionResult(items_received=0, items_accepted=0)

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.PartialErrors")
    async def test_partial_acceptance_reports_errors(self) -> None:
        errors = [{"index": 1, "statusCode": 400, "message": "invalid"}]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                206, json={"itemsReceived": 2, "itemsAccepted": 1, "errors": errors}
            )

        async with _client(handler) as client:
            transport = HttpTransport(TelemetryConfig("key"), client)
            result = await transport.submit([_envelope("a"), _envelope("b")])

        assert result.items_accepted == 1
        assert result.errors == errors

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.Rejected")
    async def test_non_success_status_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")

        async with _client(handler) as client:
            transport = HttpTransport(TelemetryConfig("key"), client)
            await transport.send(_envelope("a"))
            with pytest.raises(TransmissionError) as excinfo:
                await transport.flush()

        assert excinfo.value.status_code == 500
        assert [e async for e in transport.drain()] == []

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.NetworkError")
    async def test_network_error_raises_transmission_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            transport = HttpTransport(TelemetryConfig("key"), client)
            with pytest.raises(TransmissionError, match="connection refused"):
                await transport.submit([_envelope("a")])

    @pytest.mark.asyncio
    @pytest.mark.tra("Transport.Http.Drain")
    async def test_drain_returns_queued_without_sending(self) -> None:
        transport = HttpTransport(TelemetryConfig("key"))
        await transport.send(_envelope("a"))

        drained = [e async for e in transport.drain()]

        assert [e.data.base_data.name for e in drained] == ["a"]
