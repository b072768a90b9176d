"""JSON wire encoding for envelopes.

Field names are converted from snake_case to the camelCase names of the
ingestion schema. Optional fields that are None are omitted; mappings such
as tags, properties and measurements are always written, even when empty.
"""

import json
from collections.abc import Iterable
from dataclasses import fields, is_dataclass
from typing import Any

from insightspy.core.models import Data, Envelope


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_wire(value: Any) -> Any:
    if isinstance(value, Data):
        return {"baseType": value.base_type, "baseData": _to_wire(value.base_data)}
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(f.name): _to_wire(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, dict):
        return {str(k): _to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_wire(v) for v in value]
    return value


def envelope_to_dict(envelope: Envelope) -> dict[str, Any]:
    """Convert an envelope into a JSON-compatible dict with wire field names.

    Args:
        envelope: The envelope to convert.

    Returns:
        Dict ready for ``json.dumps``.
    """
    result: dict[str, Any] = _to_wire(envelope)
    return result


def encode_envelope(envelope: Envelope) -> str:
    """Encode a single envelope as compact JSON.

    Keys are sorted, so equal envelopes always produce identical text.
    """
    return json.dumps(envelope_to_dict(envelope), sort_keys=True, separators=(",", ":"))


def encode_envelopes(envelopes: Iterable[Envelope]) -> str:
    """Encode envelopes as a JSON array, the body accepted by the track endpoint."""
    return json.dumps(
        [envelope_to_dict(e) for e in envelopes],
        sort_keys=True,
        separators=(",", ":"),
    )
