"""pytstore - Typed proxies over a shared mutable-state store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytstore")
except PackageNotFoundError:
    __version__ = "0+local"
from pytstore._proxy import qualified_keys
from pytstore.config import ProxyConfig
from pytstore.exceptions import (
    DuplicateKey,
    InvalidHandlerIdentity,
    ReadOnlyPropertyError,
    TStoreConfigError,
    TStoreError,
)
from pytstore.getters import WrappedGetters, wrap_getters
from pytstore.keys import handler_identity, qualify_key
from pytstore.module import ModuleProxy, wrap_module
from pytstore.mutations import CombinedCommitter, MutationAccessor, wrap_mutations
from pytstore.store import CommitOptions, DispatchScope, MutationEvent, StoreLike

__all__ = [
    "__version__",
    "CombinedCommitter",
    "CommitOptions",
    "DispatchScope",
    "DuplicateKey",
    "InvalidHandlerIdentity",
    "ModuleProxy",
    "MutationAccessor",
    "MutationEvent",
    "ProxyConfig",
    "ReadOnlyPropertyError",
    "StoreLike",
    "TStoreConfigError",
    "TStoreError",
    "WrappedGetters",
    "handler_identity",
    "qualified_keys",
    "qualify_key",
    "wrap_getters",
    "wrap_module",
    "wrap_mutations",
]
