"""Base model for Matrix event payloads.

Every envelope and content model inherits from :class:`MatrixBaseModel`,
which is frozen, ignores unknown keys, and accepts snake_case field names
both as attributes and as payload keys. Payload members with the wrong
JSON type are dropped by per-field ``mode="before"`` validators so the
field default (``None``) is used instead of raising.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MatrixBaseModel(BaseModel):
    """Base for Matrix payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
