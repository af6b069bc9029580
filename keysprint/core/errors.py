"""Error types surfaced at the application boundary."""

from __future__ import annotations


class KeysprintError(Exception):
    """Fatal error carrying a human-readable message."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class SourceError(KeysprintError):
    """Word source is empty, unreadable or not configured."""


class AdapterError(KeysprintError):
    """The terminal could not be read from or written to."""
