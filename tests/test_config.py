from __future__ import annotations

import pytest

from pymatrixstate.config import StateTableConfig
from pymatrixstate.exceptions import MatrixStateConfigError
from pymatrixstate.state.table import StateTable


def test_defaults() -> None:
    config = StateTableConfig()

    assert config.typing_event_types == frozenset({"m.typing"})
    assert config.typing_state_key == "typing"
    assert config.trace_updates is False


def test_empty_typing_state_key_rejected() -> None:
    with pytest.raises(MatrixStateConfigError):
        StateTableConfig(typing_state_key="")


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MATRIX_STATE_TYPING_TYPES", "m.typing, org.example.typing ,")
    monkeypatch.setenv("MATRIX_STATE_TYPING_KEY", "composing")
    monkeypatch.setenv("MATRIX_STATE_TRACE_UPDATES", "yes")

    config = StateTableConfig.from_env()

    assert config.typing_event_types == frozenset({"m.typing", "org.example.typing"})
    assert config.typing_state_key == "composing"
    assert config.trace_updates is True


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MATRIX_STATE_TYPING_KEY", "composing")
    monkeypatch.setenv("MATRIX_STATE_TRACE_UPDATES", "true")

    config = StateTableConfig.from_env(typing_state_key="typing", trace_updates=False)

    assert config.typing_state_key == "typing"
    assert config.trace_updates is False


def test_unparseable_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MATRIX_STATE_TRACE_UPDATES", "maybe")

    assert StateTableConfig.from_env().trace_updates is False


def test_custom_typing_type_and_key_are_applied() -> None:
    table = StateTable.new(StateTableConfig(typing_event_types=["org.example.typing"], typing_state_key="composing"))

    table.update({"type": "org.example.typing", "state_key": "x", "sender": "@x:y", "content": {}})

    event = table.get_event("org.example.typing", "composing")
    assert event is not None
    assert event.sender == ""
    assert table.config.typing_event_types == frozenset({"org.example.typing"})
