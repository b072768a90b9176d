"""Identifier generation for correlation ids."""

import uuid

from insightspy.core.ports import IdGenerator

_generator: IdGenerator = uuid.uuid4


def new_id() -> uuid.UUID:
    """Return a fresh identifier from the active generator."""
    return _generator()


def set_generator(generator: IdGenerator) -> None:
    """Replace the identifier generator process-wide."""
    global _generator
    _generator = generator


def reset_generator() -> None:
    """Restore the default random (uuid4) generator."""
    global _generator
    _generator = uuid.uuid4


def format_id(value: uuid.UUID | None) -> str:
    """Render an id as lowercase hyphenated text, or ``""`` when unset."""
    if value is None:
        return ""
    return str(value)
