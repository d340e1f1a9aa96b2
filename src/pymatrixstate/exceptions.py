"""Custom exception hierarchy for pymatrixstate."""

from __future__ import annotations


class MatrixStateError(Exception):
    """Base exception for all pymatrixstate errors."""


class MatrixStateConfigError(MatrixStateError):
    """Invalid or missing configuration."""


class StateEventRejectedError(MatrixStateError):
    """A raw event lacks one or more required envelope fields.

    Raised by the ingestion layer only. :meth:`StateTable.update` turns it
    into a logged warning and a no-op, so callers of the table never see it.
    """

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)


class StateTableError(MatrixStateError):
    """A state table was used incorrectly."""


class StateTableClosedError(StateTableError):
    """The table was used after :meth:`StateTable.destroy`."""


class StateTableReentrancyError(StateTableError):
    """``update`` was called on a table from inside its own update hook."""
