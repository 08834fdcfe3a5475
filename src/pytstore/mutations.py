"""Mutation proxies.

:func:`wrap_mutations` turns a map of raw mutation handlers
``(context, payload=None) -> None`` into a :class:`CombinedCommitter`:

* calling the committer itself is a passthrough to ``store.commit``;
* each handler identifier becomes an attribute holding a
  :class:`MutationAccessor`, which commits its qualified key as an absolute
  (root) key and can listen for commits of that key.

The handler bodies are never called here; dispatching a key to its handler
is the store's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pytstore._proxy import ReadOnlyProxy
from pytstore._redact import redact_for_log
from pytstore.config import DEFAULT_CONFIG, ProxyConfig
from pytstore.exceptions import ReadOnlyPropertyError
from pytstore.keys import HandlerMap, qualify_handlers
from pytstore.store import CommitOptions, Disposer, MutationEvent, StoreLike

_logger = logging.getLogger(__name__)

MutationListener = Callable[[Any], None]


class MutationAccessor:
    """Payload-only call site for one mutation.

    The qualified key is fixed at construction; assignments raise
    :class:`~pytstore.exceptions.ReadOnlyPropertyError`.
    """

    __slots__ = ("_store", "_trace", "identifier", "qualified_key")

    _store: StoreLike
    _trace: bool
    identifier: str
    qualified_key: str

    def __init__(self, store: StoreLike, identifier: str, qualified_key: str, *, trace: bool = False) -> None:
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_trace", trace)
        object.__setattr__(self, "identifier", identifier)
        object.__setattr__(self, "qualified_key", qualified_key)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ReadOnlyPropertyError(name)

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyPropertyError(name)

    def __call__(self, payload: Any = None) -> None:
        if self._trace and _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Commit %s payload=%s", self.qualified_key, redact_for_log(payload))
        self._store.commit(self.qualified_key, payload, CommitOptions.absolute())

    def listen(self, callback: MutationListener) -> Disposer:
        """Call *callback* with the payload of every commit of this key.

        Stores may deliver events as :class:`MutationEvent` (or any object with
        ``type``/``payload`` attributes) or as ``{"type": ..., "payload": ...}``
        mappings. Returns the store's disposer for the underlying subscription;
        calling it removes only this listener.
        """
        key = self.qualified_key

        def _filter(event: MutationEvent | Mapping[str, Any]) -> None:
            if isinstance(event, Mapping):
                if event.get("type") == key:
                    callback(event.get("payload"))
            elif event.type == key:
                callback(event.payload)

        _logger.debug("Listening for commits of %s", key)
        return self._store.subscribe(_filter)

    def __repr__(self) -> str:
        return f"MutationAccessor({self.qualified_key!r})"


class CombinedCommitter(ReadOnlyProxy):
    """Raw ``commit`` passthrough carrying one accessor per mutation."""

    __slots__ = ("_accessors",)

    _accessors: dict[str, MutationAccessor]

    def __init__(self, store: StoreLike, namespace: str, accessors: dict[str, MutationAccessor]) -> None:
        super().__init__(store, namespace, {name: accessor.qualified_key for name, accessor in accessors.items()})
        object.__setattr__(self, "_accessors", accessors)

    def __call__(self, key: str, payload: Any = None, options: CommitOptions | None = None) -> None:
        self._store.commit(key, payload, options)

    def _resolve(self, identifier: str) -> MutationAccessor:
        return self._accessors[identifier]


def wrap_mutations(
    namespace: str,
    store: StoreLike,
    handlers: HandlerMap,
    *,
    config: ProxyConfig | None = None,
) -> CombinedCommitter:
    """Build a :class:`CombinedCommitter` for *handlers* under *namespace*.

    Raises :class:`~pytstore.exceptions.InvalidHandlerIdentity` or
    :class:`~pytstore.exceptions.DuplicateKey` eagerly, before anything is
    committed.

    ```python
    def add_item(state, item): ...

    cart = wrap_mutations("cart", store, {"add_item": add_item})
    cart.add_item({"id": 1})  # store.commit("cart/add_item", {"id": 1}, CommitOptions(root=True))
    unlisten = cart.add_item.listen(print)
    ```
    """
    cfg = config or DEFAULT_CONFIG
    qualified = qualify_handlers(handlers, namespace, separator=cfg.separator)
    accessors = {
        identifier: MutationAccessor(store, identifier, key, trace=cfg.trace_commits)
        for identifier, (key, _handler) in qualified.items()
    }
    _logger.debug("Wrapped %d mutation(s) in namespace %r", len(accessors), namespace)
    return CombinedCommitter(store, namespace, accessors)
