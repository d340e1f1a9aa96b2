"""Data models for Matrix room state."""

from pymatrixstate.models._base import MatrixBaseModel
from pymatrixstate.models.content import CanonicalAliasContent, RoomAliasesContent, RoomNameContent
from pymatrixstate.models.event import StateEvent, StateEventEnvelope

__all__ = [
    "CanonicalAliasContent",
    "MatrixBaseModel",
    "RoomAliasesContent",
    "RoomNameContent",
    "StateEvent",
    "StateEventEnvelope",
]
