"""Helpers for safe debug logging of rejected events.

A rejected event is logged as a summary of its envelope rather than the
payload itself: content values can hold private room data, federation
events carry signatures and hashes, and ``unsigned`` blocks handed to
clients may carry tokens.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_ENVELOPE_KEYS: tuple[str, ...] = ("type", "state_key", "sender", "event_id", "room_id", "origin_server_ts")

# Top-level members only listed by name, never by value.
_WITHHELD_KEYS: frozenset[str] = frozenset({"signatures", "hashes", "auth_events", "prev_events"})


def _scalar_for_log(value: Any, max_string: int) -> Any:
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value
    return f"<{type(value).__name__}>"


def _is_token_key(key: str) -> bool:
    return "token" in key.lower()


def summarize_event_for_log(raw: Any, *, max_string: int = 128) -> dict[str, Any]:
    """Return a log-safe summary of a raw event.

    Envelope members are kept (non-scalars replaced by their type name),
    ``content`` and ``unsigned`` are reduced to their key names, withheld
    members are listed under ``"redacted"``, and ``unsigned`` keys naming a
    token are dropped.
    """
    if not isinstance(raw, Mapping):
        return {"payload": f"<{type(raw).__name__}>"}

    summary: dict[str, Any] = {}
    for key in _ENVELOPE_KEYS:
        if key in raw:
            summary[key] = _scalar_for_log(raw[key], max_string)

    if "content" in raw:
        content = raw["content"]
        if isinstance(content, Mapping):
            summary["content_keys"] = sorted(str(key) for key in content)
        else:
            summary["content"] = f"<{type(content).__name__}>"

    unsigned = raw.get("unsigned")
    if isinstance(unsigned, Mapping):
        summary["unsigned_keys"] = sorted(str(key) for key in unsigned if not _is_token_key(str(key)))

    withheld = sorted(str(key) for key in raw if key in _WITHHELD_KEYS)
    if withheld:
        summary["redacted"] = withheld
    return summary
