"""State/store layer.

This package holds the per-room state table, the single source of truth
for the current value of every (event type, state key) slot of a room, and
the queries derived from it.
"""

from pymatrixstate.state.room_name import get_room_alias, resolve_room_name
from pymatrixstate.state.table import StateTable, StateUpdate, StateUpdateObserver, UpdateHook

__all__ = [
    "StateTable",
    "StateUpdate",
    "StateUpdateObserver",
    "UpdateHook",
    "get_room_alias",
    "resolve_room_name",
]
