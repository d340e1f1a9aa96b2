"""Room display name resolution.

Precedence, highest first:

1. ``m.room.name`` (state key ``""``) with a non-empty ``name``
   (skipped when ``alias_only`` is set);
2. ``m.room.canonical_alias`` (state key ``""``) with an ``alias`` string,
   even an empty one;
3. the first alias of any ``m.room.aliases`` event with a non-empty
   ``aliases`` list.

``m.room.aliases`` events are keyed by contributing server and are scanned
in no particular order. When several servers publish aliases, which one
wins is not defined; callers must not rely on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymatrixstate._constants import SINGLETON_STATE_KEY, EventType
from pymatrixstate.models.content import CanonicalAliasContent, RoomAliasesContent, RoomNameContent

if TYPE_CHECKING:
    from pymatrixstate.state.table import StateTable


def resolve_room_name(table: StateTable, alias_only: bool = False) -> str | None:
    """Return the room's name or alias, or ``None`` if it has neither.

    If *alias_only* is true, only aliases are considered.
    """
    if not alias_only:
        event = table.get_event(EventType.ROOM_NAME, SINGLETON_STATE_KEY)
        if event is not None:
            name = RoomNameContent.model_validate(event.content_json()).name
            if name:
                return name

    event = table.get_event(EventType.ROOM_CANONICAL_ALIAS, SINGLETON_STATE_KEY)
    if event is not None:
        alias = CanonicalAliasContent.model_validate(event.content_json()).alias
        if alias is not None:
            return alias

    for event in table.events_of_type(EventType.ROOM_ALIASES).values():
        first = RoomAliasesContent.model_validate(event.content_json()).first_alias
        if first is not None:
            return first

    return None


def get_room_alias(table: StateTable) -> str | None:
    """Return the room's official name or, failing that, an alias."""
    return resolve_room_name(table, alias_only=False)
