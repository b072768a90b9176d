"""Pure domain core: containers, telemetry items, context and envelopes."""
