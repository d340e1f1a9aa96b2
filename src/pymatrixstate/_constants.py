"""Internal constants shared across the library."""

from enum import StrEnum


class EventType(StrEnum):
    """Matrix event types the library interprets."""

    ROOM_NAME = "m.room.name"
    ROOM_CANONICAL_ALIAS = "m.room.canonical_alias"
    ROOM_ALIASES = "m.room.aliases"
    TYPING = "m.typing"


# Typing notifications are not keyed by the protocol; every one of them is
# stored in this single synthetic slot.
TYPING_STATE_KEY = "typing"
DEFAULT_TYPING_EVENT_TYPES: frozenset[str] = frozenset({EventType.TYPING.value})

# State key of singleton room attributes (name, canonical alias, ...).
SINGLETON_STATE_KEY = ""
