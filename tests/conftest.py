from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pytstore.store import CommitOptions, MutationEvent


class FakeStore:
    """Minimal synchronous store honouring the wrapper contract."""

    def __init__(self, getters: dict[str, Any] | None = None, *, mapping_events: bool = False) -> None:
        self.mapping_events = mapping_events
        self.getters: dict[str, Any] = dict(getters or {})
        self.commits: list[tuple[str, Any, CommitOptions | None]] = []
        self.handlers: dict[str, Callable[[Any], None]] = {}
        self._subscribers: list[Callable[[Any], None]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def commit(self, key: str, payload: Any = None, options: CommitOptions | None = None) -> None:
        self.commits.append((key, payload, options))
        handler = self.handlers.get(key)
        if handler is not None:
            handler(payload)
        event: Any = {"type": key, "payload": payload} if self.mapping_events else MutationEvent(type=key, payload=payload)
        for subscriber in list(self._subscribers):
            subscriber(event)

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def dispose() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return dispose


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def store_factory() -> Callable[..., FakeStore]:
    return FakeStore
