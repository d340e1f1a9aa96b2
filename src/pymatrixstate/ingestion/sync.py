"""``/sync`` ingestion helpers.

This module picks the state-bearing events out of a joined-room section of
a ``/sync`` response and feeds them into a :class:`StateTable`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from pymatrixstate.ingestion.normalize import json_array, json_object

if TYPE_CHECKING:
    from pymatrixstate.state.table import StateTable, StateUpdate, UpdateHook


def _section_events(room_payload: dict[str, Any], section: str) -> list[dict[str, Any]]:
    block = json_object(room_payload.get(section)) or {}
    events = json_array(block.get("events")) or []
    return [event for event in events if isinstance(event, dict)]


def iter_room_sync_state_events(
    room_payload: dict[str, Any],
    *,
    typing_event_types: frozenset[str],
) -> Iterator[dict[str, Any]]:
    """Yield the events of a joined-room payload that update room state.

    Order matches how the room evolved: the ``state`` block (state at the
    start of the timeline), then timeline events carrying a ``state_key``,
    then typing notifications from the ``ephemeral`` block.
    """
    yield from _section_events(room_payload, "state")

    for event in _section_events(room_payload, "timeline"):
        if "state_key" in event:
            yield event

    for event in _section_events(room_payload, "ephemeral"):
        if event.get("type") in typing_event_types:
            yield event


def apply_room_sync(
    table: StateTable,
    room_payload: dict[str, Any],
    notify: UpdateHook | None = None,
) -> list[StateUpdate]:
    """Apply the state-bearing events of *room_payload* to *table*.

    Rejected events are skipped (and logged by the table).

    Returns
    -------
    list[StateUpdate]
        The accepted transitions, in application order.
    """
    updates: list[StateUpdate] = []
    for raw_event in iter_room_sync_state_events(
        room_payload,
        typing_event_types=table.config.typing_event_types,
    ):
        update = table.update(raw_event, notify)
        if update is not None:
            updates.append(update)
    return updates
