"""Live getter proxies.

Each wrapped getter is a read-only attribute that looks up the store's getter
registry on every access. Nothing is cached here; freshness is entirely the
store's concern.
"""

from __future__ import annotations

import logging
from typing import Any

from pytstore._proxy import ReadOnlyProxy
from pytstore.config import DEFAULT_CONFIG, ProxyConfig
from pytstore.keys import HandlerMap, qualify_handlers
from pytstore.store import StoreLike

_logger = logging.getLogger(__name__)


class WrappedGetters(ReadOnlyProxy):
    """One read-only attribute per getter identifier."""

    __slots__ = ()

    def _resolve(self, identifier: str) -> Any:
        # A key missing from the registry reads as None rather than raising.
        return self._store.getters.get(self._keys[identifier])


def wrap_getters(
    store: StoreLike,
    handlers: HandlerMap,
    namespace: str,
    *,
    config: ProxyConfig | None = None,
) -> WrappedGetters:
    """Build :class:`WrappedGetters` for *handlers* under *namespace*.

    ```python
    getters = wrap_getters(store, {"total": lambda state, root: state["sum"]}, "")
    getters.total  # store.getters["total"], re-read on every access
    ```
    """
    cfg = config or DEFAULT_CONFIG
    qualified = qualify_handlers(handlers, namespace, separator=cfg.separator)
    keys = {identifier: key for identifier, (key, _handler) in qualified.items()}
    _logger.debug("Wrapped %d getter(s) in namespace %r", len(keys), namespace)
    return WrappedGetters(store, namespace, keys)
