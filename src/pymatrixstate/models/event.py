"""State event models."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import Field, field_validator, model_validator

from pymatrixstate.ingestion.normalize import json_object, json_string
from pymatrixstate.models._base import MatrixBaseModel


def _freeze(value: Any) -> Any:
    """Read-only deep copy: objects become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return copy.deepcopy(value)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class StateEvent(MatrixBaseModel):
    """The current value of one (type, state key) slot of a room.

    Instances are never mutated once stored; an update replaces the whole
    value. ``content`` is a read-only deep copy of the payload: JSON objects
    are exposed as mapping proxies and arrays as tuples, so neither readers
    nor update hooks can rewrite stored state in place.
    """

    event_type: str
    """Matrix event type, e.g. ``m.room.name``."""

    sender: str = ""
    """User ID of the event author. Empty for synthetic typing entries."""

    content: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    """Event content document (read-only)."""

    @field_validator("content", mode="after")
    @classmethod
    def _freeze_content(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(value)

    def get_string(self, key: str) -> str | None:
        """Return ``content[key]`` if it is a string."""
        return json_string(self.content.get(key))

    def content_json(self) -> dict[str, Any]:
        """Return a mutable plain-JSON copy of ``content``."""
        return _thaw(self.content)


class StateEventEnvelope(MatrixBaseModel):
    """Tolerant view of the envelope fields of a raw event.

    Absent members and members of the wrong JSON type are both ``None``.
    """

    type: str | None = None
    state_key: str | None = None
    sender: str | None = None
    content: dict[str, Any] | None = None
    raw: dict[str, Any] = Field(default_factory=dict)
    """The payload the envelope was read from."""

    @model_validator(mode="before")
    @classmethod
    def _attach_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # A payload member named "raw" is not part of the envelope.
        merged = dict(values)
        merged["raw"] = values
        return merged

    @field_validator("type", "state_key", "sender", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> str | None:
        return json_string(value)

    @field_validator("content", mode="before")
    @classmethod
    def _object_or_none(cls, value: Any) -> dict[str, Any] | None:
        return json_object(value)
