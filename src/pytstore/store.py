"""Contract required from the store engine.

The store itself (state, reactivity, module registration, dispatching a
mutation to its handler body) lives outside this package. Wrappers only
rely on the three primitives described by :class:`StoreLike`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DispatchScope(StrEnum):
    ROOT = "root"
    LOCAL = "local"


class CommitOptions(BaseModel):
    """Options passed alongside a commit.

    ``root=True`` marks the key as absolute: it already encodes the full
    namespace path and must not be resolved relative to the current module.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: bool = False

    @classmethod
    def absolute(cls) -> CommitOptions:
        return _ABSOLUTE

    @property
    def scope(self) -> DispatchScope:
        return DispatchScope.ROOT if self.root else DispatchScope.LOCAL


_ABSOLUTE = CommitOptions(root=True)


class MutationEvent(BaseModel):
    """A committed mutation as delivered to store subscribers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., description="Fully qualified mutation key")
    payload: Any = None

    @field_validator("type")
    @classmethod
    def _require_type(cls, value: str) -> str:
        if not value:
            raise ValueError("type must be non-empty")
        return value


Disposer = Callable[[], None]
# Events arrive as MutationEvent or as a {"type": ..., "payload": ...} mapping.
Subscriber = Callable[[MutationEvent | Mapping[str, Any]], None]


@runtime_checkable
class StoreLike(Protocol):
    """Primitives a store must provide to be wrapped."""

    @property
    def getters(self) -> Mapping[str, Any]: ...

    def commit(self, key: str, payload: Any = None, options: CommitOptions | None = None) -> None: ...

    def subscribe(self, callback: Subscriber) -> Disposer: ...
