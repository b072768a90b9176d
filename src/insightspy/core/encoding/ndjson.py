"""NDJSON encoder for envelopes."""

from collections.abc import Iterable

from insightspy.core.encoding.wire import encode_envelope
from insightspy.core.models import Envelope


def encode_ndjson(envelopes: Iterable[Envelope]) -> str:
    """Encode envelopes to newline-delimited JSON.

    Args:
        envelopes: An iterable of Envelope objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no envelopes.
    """
    lines = [encode_envelope(envelope) for envelope in envelopes]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
