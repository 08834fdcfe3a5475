"""Custom exception hierarchy for pytstore."""

from __future__ import annotations

from typing import Any


class TStoreError(Exception):
    """Base exception for all pytstore errors."""


class TStoreConfigError(TStoreError):
    """Invalid proxy configuration."""


class InvalidHandlerIdentity(TStoreError, ValueError):
    """No usable identifier could be derived for a handler.

    Raised for anonymous handlers (lambdas, partials), identifiers that are
    not non-empty strings, and identifiers that would shadow the proxy
    objects' own attributes.
    """

    def __init__(self, message: str, *, identifier: Any = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class DuplicateKey(TStoreError, ValueError):
    """Two handlers in one map qualify to the same dispatch key."""

    def __init__(self, key: str, *, identifiers: tuple[str, str]) -> None:
        self.key = key
        self.identifiers = identifiers
        first, second = identifiers
        super().__init__(f"Handlers {first!r} and {second!r} both qualify to {key!r}")


class ReadOnlyPropertyError(TStoreError, AttributeError):
    """Write or delete attempted on a wrapped proxy attribute."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Attribute {name!r} is read-only")
