from __future__ import annotations

from pymatrixstate._redact import summarize_event_for_log


def test_summary_keeps_envelope_and_withholds_federation_material() -> None:
    payload = {
        "type": "m.room.member",
        "state_key": "@a:x",
        "sender": "@a:x",
        "event_id": "$abc",
        "content": {"membership": "join", "displayname": "Alice"},
        "signatures": {"example.org": {"ed25519:1": "SIG"}},
        "hashes": {"sha256": "HASH"},
        "unsigned": {"age": 5, "access_token": "TOKEN"},
    }

    summary = summarize_event_for_log(payload)

    assert summary["type"] == "m.room.member"
    assert summary["state_key"] == "@a:x"
    assert summary["event_id"] == "$abc"
    assert summary["content_keys"] == ["displayname", "membership"]
    assert summary["unsigned_keys"] == ["age"]
    assert summary["redacted"] == ["hashes", "signatures"]
    assert "SIG" not in repr(summary)
    assert "TOKEN" not in repr(summary)
    assert "Alice" not in repr(summary)


def test_summary_of_malformed_members() -> None:
    summary = summarize_event_for_log({"type": ["m.room.name"], "content": "text", "sender": "x" * 600}, max_string=10)

    assert summary["type"] == "<list>"
    assert summary["content"] == "<str>"
    assert summary["sender"].startswith("x" * 10)
    assert "<truncated>" in summary["sender"]
    assert "redacted" not in summary


def test_summary_of_non_mapping_payload() -> None:
    assert summarize_event_for_log(None) == {"payload": "<NoneType>"}
