"""Tests for converting page views into envelopes."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from insightspy.core import clock
from insightspy.core.assembler import to_envelope
from insightspy.core.context import TelemetryContext
from insightspy.core.models import Data, Envelope, PageViewData
from insightspy.core.telemetry import PageViewTelemetry

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


class TestPageViewEnvelope:
    """Tests for the page view converter."""

    @pytest.mark.tra("Assembler.PageView.OverrideProperties")
    def test_overrides_properties_from_context(self, fixed_time: datetime) -> None:
        """Item properties win over context properties; measurements pass through."""
        context = TelemetryContext("instrumentation")
        context.properties["test"] = "ok"
        context.properties["no-write"] = "fail"

        telemetry = PageViewTelemetry("page updated", "https://example.com/main.html")
        telemetry.properties["no-write"] = "ok"
        telemetry.measurements["latency"] = 200.0

        envelope = to_envelope(context, telemetry)

        assert envelope == Envelope(
            name="Microsoft.ApplicationInsights.PageView",
            time="2019-01-02T03:04:05.800Z",
            i_key="instrumentation",
            tags={},
            data=Data(
                PageViewData(
                    name="page updated",
                    url="https://example.com/main.html",
                    properties={"test": "ok", "no-write": "ok"},
                    measurements={"latency": 200.0},
                )
            ),
        )

    @pytest.mark.tra("Assembler.PageView.OverrideTags")
    def test_overrides_tags_from_context(self) -> None:
        """Item tags win over context tags; properties and measurements stay empty."""
        clock.set(datetime(2019, 1, 2, 3, 4, 5, 700000, tzinfo=timezone.utc))
        try:
            context = TelemetryContext("instrumentation")
            context.tags["test"] = "ok"
            context.tags["no-write"] = "fail"

            telemetry = PageViewTelemetry("page updated", "https://example.com/main.html")
            telemetry.tags["no-write"] = "ok"

            envelope = to_envelope(context, telemetry)
        finally:
            clock.reset()

        assert envelope == Envelope(
            name="Microsoft.ApplicationInsights.PageView",
            time="2019-01-02T03:04:05.700Z",
            i_key="instrumentation",
            tags={"test": "ok", "no-write": "ok"},
            data=Data(
                PageViewData(
                    name="page updated",
                    url="https://example.com/main.html",
                    properties={},
                    measurements={},
                )
            ),
        )

    @pytest.mark.tra("Assembler.PageView.DefaultId")
    def test_unset_id_renders_empty_string(self, context: TelemetryContext) -> None:
        envelope = to_envelope(
            context, PageViewTelemetry("home", "https://example.com/")
        )

        assert envelope.data is not None
        assert envelope.data.base_data.id == ""

    @pytest.mark.tra("Assembler.PageView.IdAndDuration")
    def test_id_and_duration_are_formatted(self, context: TelemetryContext) -> None:
        telemetry = PageViewTelemetry(
            "home",
            "https://example.com/",
            duration=timedelta(seconds=2, milliseconds=250),
            id=uuid.UUID("0E1F2A3B-4C5D-4E6F-8A9B-0C1D2E3F4A5B"),
        )

        payload = to_envelope(context, telemetry).data.base_data  # type: ignore[union-attr]

        assert payload.id == "0e1f2a3b-4c5d-4e6f-8a9b-0c1d2e3f4a5b"
        assert payload.duration == "0.00:00:02.2500000"
        assert payload.referrer_uri is None

    @pytest.mark.tra("Assembler.PageView.NoKey")
    def test_empty_instrumentation_key_is_absent(self) -> None:
        envelope = to_envelope(
            TelemetryContext(""), PageViewTelemetry("home", "https://example.com/")
        )

        assert envelope.i_key is None

    @pytest.mark.tra("Assembler.PageView.Defaults")
    def test_envelope_defaults(self, context: TelemetryContext) -> None:
        envelope = to_envelope(context, PageViewTelemetry("home", "https://example.com/"))

        assert envelope.ver == 1
        assert envelope.sample_rate == 100.0
        assert envelope.seq is None
        assert envelope.flags is None
        assert envelope.data is not None
        assert envelope.data.base_type == "PageViewData"
        assert envelope.data.base_data.ver == 2
