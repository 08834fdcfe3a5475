"""Read-only attribute proxy shared by the mutation and getter wrappers.

Proxies expose no public methods: every public attribute name belongs to a
wrapped handler identifier. Internal state lives in ``__slots__`` whose
names start with an underscore, which identifiers are not allowed to use.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pytstore.exceptions import ReadOnlyPropertyError
from pytstore.store import StoreLike


class ReadOnlyProxy(ABC):
    __slots__ = ("_store", "_namespace", "_keys")

    _store: StoreLike
    _namespace: str
    _keys: Mapping[str, str]

    def __init__(self, store: StoreLike, namespace: str, keys: Mapping[str, str]) -> None:
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_namespace", namespace)
        object.__setattr__(self, "_keys", MappingProxyType(dict(keys)))

    @abstractmethod
    def _resolve(self, identifier: str) -> Any:
        """Return the value exposed for *identifier*."""

    def __getattr__(self, name: str) -> Any:
        # Only reached when regular lookup fails, i.e. for handler identifiers.
        if name.startswith("_") or name not in self._keys:
            raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")
        return self._resolve(name)

    def __getitem__(self, identifier: str) -> Any:
        if identifier not in self._keys:
            raise KeyError(identifier)
        return self._resolve(identifier)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ReadOnlyPropertyError(name)

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyPropertyError(name)

    def __setitem__(self, identifier: str, value: Any) -> None:
        raise ReadOnlyPropertyError(identifier)

    def __delitem__(self, identifier: str) -> None:
        raise ReadOnlyPropertyError(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._keys))

    def __repr__(self) -> str:
        names = ", ".join(self._keys)
        return f"{type(self).__name__}(namespace={self._namespace!r}, [{names}])"


def qualified_keys(proxy: ReadOnlyProxy) -> Mapping[str, str]:
    """Return the identifier to qualified key mapping of a wrapped proxy."""
    return proxy._keys  # noqa: SLF001
