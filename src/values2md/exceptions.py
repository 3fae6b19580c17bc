"""Custom exceptions for values2md."""

from __future__ import annotations


class Values2mdError(Exception):
    """Base exception for values2md operations."""


class ParseError(Values2mdError):
    """Key/value nodes could not be paired into documentation nodes."""

    def __init__(self, message: str, *, parent_anchor: str = "", curr_anchor: str = "") -> None:
        self.parent_anchor = parent_anchor
        self.curr_anchor = curr_anchor
        self.message = message
        super().__init__(
            f"failed to parse key {curr_anchor!r} under {parent_anchor or '<root>'!r}: {message}"
        )


class ValidationError(Values2mdError):
    """A documentation node violates the tree invariants."""

    def __init__(self, message: str, *, anchor: str) -> None:
        self.anchor = anchor
        self.message = message
        super().__init__(f"invalid node at anchor {anchor!r}: {message}")


class SerializationError(Values2mdError):
    """A scalar sequence could not be rendered in flow style."""


class MarkerNotFoundError(Values2mdError):
    """Codegen markers are missing from the target document."""
