"""Ingestion layer.

This package turns raw Matrix event dicts (already parsed from JSON by the
caller) into validated :class:`pymatrixstate.models.StateEvent` values, and
picks the state-bearing events out of ``/sync`` room payloads.
"""

__all__: list[str] = []
