from __future__ import annotations


class PrismError(Exception):
    """Base class for errors surfaced to API callers."""


class InvalidQueryError(PrismError, ValueError):
    """The search query is missing or blank."""

    def __init__(self, message: str = "Query parameter required") -> None:
        super().__init__(message)
        self.message = message
