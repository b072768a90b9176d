"""Wire encoders for envelopes."""

from insightspy.core.encoding.ndjson import encode_ndjson
from insightspy.core.encoding.wire import (
    encode_envelope,
    encode_envelopes,
    envelope_to_dict,
)

__all__ = [
    "encode_envelope",
    "encode_envelopes",
    "encode_ndjson",
    "envelope_to_dict",
]
