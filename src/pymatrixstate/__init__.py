"""pymatrixstate - Matrix room state table and room name resolution."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymatrixstate")
except PackageNotFoundError:
    __version__ = "0+local"
from pymatrixstate._constants import TYPING_STATE_KEY, EventType
from pymatrixstate.config import StateTableConfig
from pymatrixstate.exceptions import (
    MatrixStateConfigError,
    MatrixStateError,
    StateEventRejectedError,
    StateTableClosedError,
    StateTableError,
    StateTableReentrancyError,
)
from pymatrixstate.ingestion.sync import apply_room_sync
from pymatrixstate.models import StateEvent
from pymatrixstate.state import (
    StateTable,
    StateUpdate,
    StateUpdateObserver,
    get_room_alias,
    resolve_room_name,
)

__all__ = [
    "__version__",
    "EventType",
    "MatrixStateConfigError",
    "MatrixStateError",
    "StateEvent",
    "StateEventRejectedError",
    "StateTable",
    "StateTableClosedError",
    "StateTableConfig",
    "StateTableError",
    "StateTableReentrancyError",
    "StateUpdate",
    "StateUpdateObserver",
    "TYPING_STATE_KEY",
    "apply_room_sync",
    "get_room_alias",
    "resolve_room_name",
]
