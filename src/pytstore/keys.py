"""Qualified dispatch keys.

Every wrapped handler is addressed on the store by a *qualified key*: the
module namespace joined to the handler identifier. Identifiers come from an
explicit ``(identifier, handler)`` pairing supplied by the caller; reading a
function's ``__name__`` is only a convenience for bare callables.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

from pytstore.exceptions import DuplicateKey, InvalidHandlerIdentity

Handler: TypeAlias = Callable[..., Any]
HandlerMap: TypeAlias = Mapping[str, Handler] | Iterable[tuple[str, Handler]] | Iterable[Handler]

# Names the proxy objects keep for themselves.
_RESERVED_PREFIX = "_"


def qualify_key(identifier: str, namespace: str, *, separator: str = "/") -> str:
    """Return the fully qualified dispatch key for *identifier*.

    An empty namespace means the store root, so the identifier is returned
    unchanged.
    """
    if not namespace:
        return identifier
    return f"{namespace}{separator}{identifier}"


def handler_identity(handler: Handler) -> str:
    """Derive an identifier from a bare handler's declared name."""
    name = getattr(handler, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        raise InvalidHandlerIdentity(
            f"Cannot derive an identifier for anonymous handler {handler!r}; pass an explicit (name, handler) pair",
            identifier=name,
        )
    return name


def _check_identifier(identifier: Any) -> str:
    if not isinstance(identifier, str) or not identifier:
        raise InvalidHandlerIdentity(
            f"Handler identifier must be a non-empty string, got {identifier!r}",
            identifier=identifier,
        )
    if identifier.startswith(_RESERVED_PREFIX):
        raise InvalidHandlerIdentity(
            f"Handler identifier {identifier!r} is reserved (leading underscore)",
            identifier=identifier,
        )
    return identifier


def iter_handlers(handlers: HandlerMap) -> list[tuple[str, Handler]]:
    """Normalize a handler map into explicit ``(identifier, handler)`` pairs.

    Accepted shapes:

    * a mapping of identifier to handler;
    * an iterable of ``(identifier, handler)`` pairs;
    * an iterable of named callables.

    Order is preserved so that duplicate detection reports the first
    clashing entry.
    """
    if isinstance(handlers, Mapping):
        return [(_check_identifier(name), handler) for name, handler in handlers.items()]

    pairs: list[tuple[str, Handler]] = []
    for entry in handlers:
        if isinstance(entry, tuple) and len(entry) == 2:
            name, handler = entry
            pairs.append((_check_identifier(name), handler))
        else:
            pairs.append((_check_identifier(handler_identity(entry)), entry))
    return pairs


def qualify_handlers(
    handlers: HandlerMap,
    namespace: str,
    *,
    separator: str = "/",
) -> dict[str, tuple[str, Handler]]:
    """Map each identifier to its ``(qualified_key, handler)``.

    Raises :class:`DuplicateKey` as soon as two entries qualify to the same
    key, before anything is dispatched.
    """
    qualified: dict[str, tuple[str, Handler]] = {}
    owners: dict[str, str] = {}
    for identifier, handler in iter_handlers(handlers):
        key = qualify_key(identifier, namespace, separator=separator)
        owner = owners.get(key)
        if owner is not None:
            raise DuplicateKey(key, identifiers=(owner, identifier))
        owners[key] = identifier
        qualified[identifier] = (key, handler)
    return qualified
