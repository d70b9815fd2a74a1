"""Error taxonomy shared by use cases and the interface layer."""

from __future__ import annotations


class BoardingFinderError(Exception):
    """Base class for failures local to a single user action."""


class TransientFetchError(BoardingFinderError):
    """A query, insert or update against the data service failed."""

    def __init__(self, operation: str, table: str, detail: str | None = None) -> None:
        self.operation = operation
        self.table = table
        self.detail = detail
        message = f"Failed to {operation} {table}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AuthorizationError(BoardingFinderError):
    """The row access policy rejected the operation."""


class NotFoundError(BoardingFinderError):
    """A referenced row does not exist or is not visible to the caller."""


class ValidationError(BoardingFinderError, ValueError):
    """Input rejected before any data service round trip."""


__all__ = [
    "AuthorizationError",
    "BoardingFinderError",
    "NotFoundError",
    "TransientFetchError",
    "ValidationError",
]
