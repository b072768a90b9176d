"""Example: build telemetry items and submit them over HTTP.

Run with:
    INSIGHTS_IKEY=<instrumentation key> python examples/track_example.py

Prints the envelopes as NDJSON before submitting them. Without
INSIGHTS_IKEY the envelopes are only printed.
"""

import asyncio
import logging
import os
from datetime import timedelta

from insightspy import (
    EventTelemetry,
    InMemoryTransport,
    InsightsHandler,
    PageViewTelemetry,
    RequestTelemetry,
    TelemetryConfig,
    TelemetryContext,
    encode_ndjson,
    to_envelope,
)
from insightspy.adapters.transport.http import HttpTransport


async def main() -> None:
    config = TelemetryConfig(os.environ.get("INSIGHTS_IKEY", ""))
    context = TelemetryContext.from_config(config)
    context.tags.cloud.role = "example"
    context.properties["deployment"] = "local"

    view = PageViewTelemetry("home", "https://example.com/")
    view.measurements["body_size"] = 115.0

    event = EventTelemetry("order placed")
    event.properties["region"] = "eu-west"

    request = RequestTelemetry(
        "GET", "https://example.com/orders/42", timedelta(milliseconds=87), "200"
    )

    # Log records become trace envelopes
    buffered = InMemoryTransport()
    logger = logging.getLogger("example")
    logger.setLevel(logging.INFO)
    logger.addHandler(InsightsHandler(context, buffered))
    logger.info("example started")
    await asyncio.sleep(0)

    envelopes = [to_envelope(context, item) for item in (view, event, request)]
    envelopes += [e async for e in buffered.drain()]
    print(encode_ndjson(envelopes), end="")

    if config.i_key:
        result = await HttpTransport(config).submit(envelopes)
        print(f"accepted {result.items_accepted}/{result.items_received}")


if __name__ == "__main__":
    asyncio.run(main())
