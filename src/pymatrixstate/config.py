"""State table configuration for pymatrixstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pymatrixstate._constants import DEFAULT_TYPING_EVENT_TYPES, TYPING_STATE_KEY
from pymatrixstate.exceptions import MatrixStateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_csv(value: str) -> frozenset[str]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class StateTableConfig:
    """State table configuration.

    Parameters
    ----------
    typing_event_types : frozenset[str]
        Event types treated as typing notifications. Events of these types
        are stored under ``typing_state_key`` with an empty sender, whatever
        the payload carries.
    typing_state_key : str
        Synthetic state key of the per-room typing slot. Must be non-empty.
    trace_updates : bool
        Log every accepted update, and the redacted payload of every
        rejected one, at DEBUG level.
    """

    typing_event_types: frozenset[str] = DEFAULT_TYPING_EVENT_TYPES
    typing_state_key: str = TYPING_STATE_KEY
    trace_updates: bool = False

    def __post_init__(self) -> None:
        if not self.typing_state_key:
            raise MatrixStateConfigError("typing_state_key must be non-empty")
        # Accept any iterable of strings but store a frozenset.
        if not isinstance(self.typing_event_types, frozenset):
            object.__setattr__(self, "typing_event_types", frozenset(self.typing_event_types))

    def is_typing_type(self, event_type: str | None) -> bool:
        return event_type is not None and event_type in self.typing_event_types

    @classmethod
    def from_env(cls, **overrides: Any) -> StateTableConfig:
        """Create configuration from environment variables.

        Reads ``MATRIX_STATE_TYPING_TYPES`` (comma separated),
        ``MATRIX_STATE_TYPING_KEY`` and ``MATRIX_STATE_TRACE_UPDATES``.
        Explicit keyword arguments override environment values.

        Returns
        -------
        StateTableConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        types_env = env.get("MATRIX_STATE_TYPING_TYPES")
        if types_env is not None and "typing_event_types" not in overrides:
            config_kwargs["typing_event_types"] = _env_csv(types_env)

        key_env = env.get("MATRIX_STATE_TYPING_KEY")
        if key_env is not None and "typing_state_key" not in overrides:
            config_kwargs["typing_state_key"] = key_env

        if "trace_updates" not in overrides:
            config_kwargs["trace_updates"] = _env_bool(env.get("MATRIX_STATE_TRACE_UPDATES"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
