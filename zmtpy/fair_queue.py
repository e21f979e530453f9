"""Fair round-robin merging of several async streams keyed by peer."""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, AsyncIterable, AsyncIterator, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

_END = object()


@dataclass(frozen=True)
class _Item:
    value: Any


@dataclass(frozen=True)
class _Failure:
    error: BaseException


@dataclass(eq=False)
class _Entry:
    key: Any
    iterator: AsyncIterator[Any]
    priority: int = 0
    outcome: Any = None
    task: Optional["asyncio.Task[None]"] = field(default=None, repr=False)


class FairQueue(Generic[K, T]):
    """Yields ``(key, item)`` pairs, taking turns between the streams.

    Each stream is asked for its next item when it is inserted and again
    each time one of its items is handed out. Streams whose items are
    ready are served in the order in which they were asked, so no single
    busy stream can starve the others. A stream that ends is dropped; an
    exception raised by a stream is raised from ``__anext__``.

    When no stream is left, iteration stops unless ``block_on_no_clients``
    is set, in which case it waits for a new stream to be inserted.
    """

    def __init__(self, block_on_no_clients: bool = False) -> None:
        self._block_on_no_clients = block_on_no_clients
        self._counter = itertools.count()
        self._ready: list[tuple[int, _Entry]] = []
        self._streams: dict[K, _Entry] = {}
        self._wakeup = asyncio.Event()

    def insert(self, key: K, stream: AsyncIterable[T]) -> None:
        """Add ``stream`` under ``key``, replacing any stream with that key."""
        self.remove(key)
        entry = _Entry(key, aiter(stream))
        self._streams[key] = entry
        self._request(entry)
        self._wakeup.set()

    def remove(self, key: K) -> None:
        """Drop the stream under ``key``, if there is one."""
        entry = self._streams.pop(key, None)
        if entry is not None and entry.task is not None:
            entry.task.cancel()
        self._wakeup.set()

    def __aiter__(self) -> FairQueue[K, T]:
        return self

    async def __anext__(self) -> tuple[K, T]:
        while True:
            while self._ready:
                _, entry = heapq.heappop(self._ready)
                if self._streams.get(entry.key) is not entry:
                    continue
                outcome = entry.outcome
                if outcome is _END:
                    del self._streams[entry.key]
                    continue
                self._request(entry)
                if isinstance(outcome, _Failure):
                    raise outcome.error
                return entry.key, outcome.value
            if not self._streams and not self._block_on_no_clients:
                raise StopAsyncIteration
            self._wakeup.clear()
            await self._wakeup.wait()

    def _request(self, entry: _Entry) -> None:
        entry.priority = next(self._counter)
        entry.outcome = None
        entry.task = asyncio.get_running_loop().create_task(self._fetch(entry))

    async def _fetch(self, entry: _Entry) -> None:
        try:
            value = await entry.iterator.__anext__()
        except StopAsyncIteration:
            outcome: Any = _END
        except Exception as exc:
            outcome = _Failure(exc)
        else:
            outcome = _Item(value)
        if self._streams.get(entry.key) is entry:
            entry.outcome = outcome
            heapq.heappush(self._ready, (entry.priority, entry))
            self._wakeup.set()