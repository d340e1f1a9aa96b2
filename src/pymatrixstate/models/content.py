"""Content models for the state events the room name resolver reads."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pymatrixstate.ingestion.normalize import first_string_element, json_array, json_string
from pymatrixstate.models._base import MatrixBaseModel


class RoomNameContent(MatrixBaseModel):
    """Content of ``m.room.name``."""

    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> str | None:
        return json_string(value)


class CanonicalAliasContent(MatrixBaseModel):
    """Content of ``m.room.canonical_alias``."""

    alias: str | None = None
    """Preferred alias. An empty string is kept as-is, it is not ``None``."""

    @field_validator("alias", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> str | None:
        return json_string(value)


class RoomAliasesContent(MatrixBaseModel):
    """Content of ``m.room.aliases`` (one event per contributing server)."""

    aliases: list[Any] | None = None

    @field_validator("aliases", mode="before")
    @classmethod
    def _array_or_none(cls, value: Any) -> list[Any] | None:
        return json_array(value)

    @property
    def first_alias(self) -> str | None:
        """First alias of the list, if the list is non-empty and it is a string."""
        return first_string_element(self.aliases)
