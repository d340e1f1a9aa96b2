"""Per-room state table.

This is the only component allowed to write room state. Each (event type,
state key) pair holds the most recently accepted event for that slot;
older values are dropped as soon as they are replaced.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from pymatrixstate._redact import summarize_event_for_log
from pymatrixstate.config import StateTableConfig
from pymatrixstate.exceptions import (
    StateEventRejectedError,
    StateTableClosedError,
    StateTableError,
    StateTableReentrancyError,
)
from pymatrixstate.ingestion.envelope import normalize_envelope, validate_envelope
from pymatrixstate.models.event import StateEvent

_logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, StateEvent] = MappingProxyType({})


@runtime_checkable
class StateUpdateObserver(Protocol):
    """Receives every accepted transition before it is committed.

    ``old`` and ``new`` are only valid for the duration of the call. The
    observer may read the table but must not update it.
    """

    def on_state_update(
        self,
        event_type: str,
        state_key: str,
        old: StateEvent | None,
        new: StateEvent,
    ) -> None: ...


UpdateCallback = Callable[[str, str, StateEvent | None, StateEvent], Any]
UpdateHook = StateUpdateObserver | UpdateCallback


@dataclasses.dataclass(frozen=True)
class StateUpdate:
    """An accepted transition of one state slot."""

    event_type: str
    state_key: str
    old: StateEvent | None
    new: StateEvent

    @property
    def is_new_slot(self) -> bool:
        return self.old is None


class StateTable:
    """Two-level store of the current state of one room.

    Layout is ``{event_type: {state_key: StateEvent}}``. Inner mappings are
    created lazily on the first accepted event of a type and never
    vivified by lookups.
    """

    def __init__(self, config: StateTableConfig | None = None) -> None:
        self._config = config or StateTableConfig()
        self._events: dict[str, dict[str, StateEvent]] = {}
        self._updating = False
        self._closed = False

    @classmethod
    def new(cls, config: StateTableConfig | None = None) -> StateTable:
        """Create an empty table (at room join)."""
        return cls(config)

    @property
    def config(self) -> StateTableConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def destroy(self) -> None:
        """Drop every stored event (at room leave or shutdown).

        Lookups and updates raise :class:`StateTableClosedError` afterwards.
        Calling it again is a no-op.
        """
        if self._closed:
            return
        for entries in self._events.values():
            entries.clear()
        self._events.clear()
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise StateTableClosedError("state table has been destroyed")

    def get_event(self, event_type: str, state_key: str) -> StateEvent | None:
        """Look up the current event of a slot; ``None`` if it is unknown."""
        self._check_open()
        entries = self._events.get(event_type)
        if entries is None:
            return None
        return entries.get(state_key)

    def events_of_type(self, event_type: str) -> Mapping[str, StateEvent]:
        """Read-only view of ``{state_key: event}`` for one event type.

        The view is live; iteration order carries no meaning.
        """
        self._check_open()
        entries = self._events.get(event_type)
        if entries is None:
            return _EMPTY
        return MappingProxyType(entries)

    def event_types(self) -> list[str]:
        self._check_open()
        return list(self._events)

    def update(self, raw_event: dict[str, Any], notify: UpdateHook | None = None) -> StateUpdate | None:
        """Apply a raw event to the table.

        Events missing a required envelope field are rejected: a warning is
        logged, the table is left untouched and *notify* is not called.

        *notify* (an observer or a plain callable) is invoked with the old
        and new value after the new event is built and before it is
        committed. A failing hook is logged and does not stop the commit.

        Returns
        -------
        StateUpdate | None
            The committed transition, or ``None`` if the event was rejected.
        """
        self._check_open()
        if self._updating:
            raise StateTableReentrancyError("update called from inside a state update hook")

        envelope = normalize_envelope(raw_event, self._config)
        try:
            event = validate_envelope(envelope, self._config)
        except StateEventRejectedError as exc:
            _logger.warning("%s", exc)
            if self._config.trace_updates:
                _logger.debug("Rejected state event: %s", summarize_event_for_log(raw_event))
            return None

        event_type = event.event_type
        state_key = envelope.state_key or ""

        entries = self._events.get(event_type)
        if entries is None:
            entries = {}
            self._events[event_type] = entries
        old = entries.get(state_key)

        if notify is not None:
            self._notify(notify, event_type, state_key, old, event)

        entries[state_key] = event
        if self._config.trace_updates:
            _logger.debug(
                "State updated type=%s state_key=%r sender=%s replaced=%s",
                event_type,
                state_key,
                event.sender,
                old is not None,
            )
        return StateUpdate(event_type=event_type, state_key=state_key, old=old, new=event)

    def _notify(
        self,
        notify: UpdateHook,
        event_type: str,
        state_key: str,
        old: StateEvent | None,
        new: StateEvent,
    ) -> None:
        self._updating = True
        try:
            if isinstance(notify, StateUpdateObserver):
                notify.on_state_update(event_type, state_key, old, new)
            else:
                notify(event_type, state_key, old, new)
        except StateTableError:
            _logger.warning(
                "State update hook misused the table for type=%s state_key=%r", event_type, state_key, exc_info=True
            )
        except Exception:
            _logger.debug("State update hook failed for type=%s state_key=%r", event_type, state_key, exc_info=True)
        finally:
            self._updating = False

    def room_name(self, alias_only: bool = False) -> str | None:
        """See :func:`pymatrixstate.state.room_name.resolve_room_name`."""
        from pymatrixstate.state.room_name import resolve_room_name

        return resolve_room_name(self, alias_only=alias_only)

    def room_alias(self) -> str | None:
        """See :func:`pymatrixstate.state.room_name.get_room_alias`."""
        from pymatrixstate.state.room_name import get_room_alias

        return get_room_alias(self)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._events.values())

    def __contains__(self, slot: object) -> bool:
        if not isinstance(slot, tuple) or len(slot) != 2:
            return False
        event_type, state_key = slot
        entries = self._events.get(event_type)
        return entries is not None and state_key in entries

    def __iter__(self) -> Iterator[tuple[str, str, StateEvent]]:
        """Enumerate ``(event_type, state_key, event)`` for every stored slot.

        Still usable after :meth:`destroy`, when it yields nothing.
        """
        for event_type, entries in list(self._events.items()):
            for state_key, event in list(entries.items()):
                yield event_type, state_key, event
