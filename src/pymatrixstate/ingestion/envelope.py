"""Envelope normalization and validation.

:func:`normalize_envelope` reads the envelope fields of a raw event and
applies the typing rewrite; :func:`validate_envelope` enforces the required
fields and builds the :class:`StateEvent` to store. The state table is the
only caller that turns a rejection into a no-op.
"""

from __future__ import annotations

from typing import Any

from pymatrixstate.config import StateTableConfig
from pymatrixstate.exceptions import StateEventRejectedError
from pymatrixstate.models.event import StateEvent, StateEventEnvelope


def normalize_envelope(raw: dict[str, Any], config: StateTableConfig) -> StateEventEnvelope:
    """Read the envelope of *raw*, rewriting typing notifications.

    Typing notifications get the synthetic state key and an empty sender
    regardless of what the payload carries, giving each room a single
    typing slot.
    """
    envelope = StateEventEnvelope.model_validate(raw if isinstance(raw, dict) else {})
    if config.is_typing_type(envelope.type):
        envelope = envelope.model_copy(update={"state_key": config.typing_state_key, "sender": ""})
    return envelope


def missing_fields(envelope: StateEventEnvelope, config: StateTableConfig) -> tuple[str, ...]:
    """Return the names of the required envelope fields that are absent.

    ``state_key`` may be empty (singleton state). ``type`` must be
    non-empty. ``sender`` must be non-empty except for typing
    notifications, whose sender was blanked by :func:`normalize_envelope`.
    """
    missing: list[str] = []
    if not envelope.type:
        missing.append("type")
    if envelope.state_key is None:
        missing.append("state_key")
    if envelope.sender is None or (not envelope.sender and not config.is_typing_type(envelope.type)):
        missing.append("sender")
    if envelope.content is None:
        missing.append("content")
    return tuple(missing)


def validate_envelope(envelope: StateEventEnvelope, config: StateTableConfig) -> StateEvent:
    """Build the event to store, or raise :class:`StateEventRejectedError`."""
    missing = missing_fields(envelope, config)
    if missing:
        raise StateEventRejectedError(f"State event missing fields: {', '.join(missing)}", missing=missing)
    return StateEvent(event_type=envelope.type, sender=envelope.sender, content=envelope.content)
