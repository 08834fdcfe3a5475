"""Per-module facade bundling mutation and getter proxies."""

from __future__ import annotations

from dataclasses import dataclass

from pytstore.config import ProxyConfig
from pytstore.getters import WrappedGetters, wrap_getters
from pytstore.keys import HandlerMap
from pytstore.mutations import CombinedCommitter, wrap_mutations
from pytstore.store import StoreLike


@dataclass(frozen=True)
class ModuleProxy:
    """Wrapped view of one store module."""

    namespace: str
    commit: CombinedCommitter
    getters: WrappedGetters


def wrap_module(
    namespace: str,
    store: StoreLike,
    *,
    mutations: HandlerMap | None = None,
    getters: HandlerMap | None = None,
    config: ProxyConfig | None = None,
) -> ModuleProxy:
    """Wrap a module's mutations and getters in one call.

    Both maps are validated before the proxy is returned, so a bad
    identifier in either raises here.
    """
    return ModuleProxy(
        namespace=namespace,
        commit=wrap_mutations(namespace, store, mutations or {}, config=config),
        getters=wrap_getters(store, getters or {}, namespace, config=config),
    )
