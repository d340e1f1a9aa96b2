from __future__ import annotations

from typing import Any

from pymatrixstate.state.room_name import get_room_alias, resolve_room_name
from pymatrixstate.state.table import StateTable


def _event(event_type: str, state_key: str = "", sender: str = "@a:x", **content: Any) -> dict[str, Any]:
    return {"type": event_type, "state_key": state_key, "sender": sender, "content": content}


def test_empty_table_has_no_name() -> None:
    table = StateTable.new()

    assert resolve_room_name(table) is None
    assert resolve_room_name(table, alias_only=True) is None


def test_room_name_wins() -> None:
    table = StateTable.new()
    table.update(_event("m.room.name", name="Demo Room"))
    table.update(_event("m.room.canonical_alias", alias="#demo:x"))
    table.update(_event("m.room.aliases", state_key="x", aliases=["#other:x"]))

    assert resolve_room_name(table) == "Demo Room"
    assert table.room_name() == "Demo Room"
    assert get_room_alias(table) == "Demo Room"
    assert table.room_alias() == "Demo Room"


def test_empty_room_name_falls_through_to_nothing() -> None:
    table = StateTable.new()
    table.update(_event("m.room.name", name="Demo Room"))
    table.update(_event("m.room.name", name=""))

    assert resolve_room_name(table) is None


def test_alias_only_skips_room_name() -> None:
    table = StateTable.new()
    table.update(_event("m.room.name", name="Demo Room"))
    table.update(_event("m.room.canonical_alias", alias="#demo:x"))

    assert resolve_room_name(table, alias_only=True) == "#demo:x"


def test_non_string_name_falls_through() -> None:
    table = StateTable.new()
    table.update(_event("m.room.name", name=42))
    table.update(_event("m.room.canonical_alias", alias="#demo:x"))

    assert resolve_room_name(table) == "#demo:x"


def test_canonical_alias_wins_over_aliases() -> None:
    table = StateTable.new()
    table.update(_event("m.room.canonical_alias", alias="#canonical:x"))
    table.update(_event("m.room.aliases", state_key="x", aliases=["#other:x"]))

    assert resolve_room_name(table) == "#canonical:x"


def test_empty_canonical_alias_is_returned_as_is() -> None:
    table = StateTable.new()
    table.update(_event("m.room.canonical_alias", alias=""))
    table.update(_event("m.room.aliases", state_key="x", aliases=["#other:x"]))

    assert resolve_room_name(table) == ""


def test_canonical_alias_without_alias_field_falls_through() -> None:
    table = StateTable.new()
    table.update(_event("m.room.canonical_alias"))
    table.update(_event("m.room.aliases", state_key="x", aliases=["#other:x"]))

    assert resolve_room_name(table) == "#other:x"


def test_only_non_empty_aliases_entry_is_used() -> None:
    table = StateTable.new()
    table.update(_event("m.room.aliases", state_key="x", aliases=[]))
    table.update(_event("m.room.aliases", state_key="y", sender="@b:y", aliases=["#demo:y"]))

    assert resolve_room_name(table, alias_only=True) == "#demo:y"


def test_aliases_with_non_string_first_element_are_skipped() -> None:
    table = StateTable.new()
    table.update(_event("m.room.aliases", state_key="x", aliases=[None, "#late:x"]))
    table.update(_event("m.room.aliases", state_key="z", aliases="#not-a-list:z"))

    assert resolve_room_name(table) is None


def test_one_of_several_server_aliases_is_returned() -> None:
    table = StateTable.new()
    table.update(_event("m.room.aliases", state_key="x", aliases=["#a:x", "#b:x"]))
    table.update(_event("m.room.aliases", state_key="y", aliases=["#c:y"]))

    assert resolve_room_name(table) in {"#a:x", "#c:y"}
