"""
Deferred actions.

The mismatch reveal is the only thing in the game that happens "later".
Anything that can run a callback after a delay and cancel it again can drive it.
"""

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol

Callback = Callable[[], None]


class Handle(Protocol):
    def cancel(self) -> None:
        """Stop the callback from running. Calling it twice, or after the callback ran, does nothing."""
        ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callback) -> Handle:
        """Run callback after delay seconds."""
        ...


@dataclass(order=True)
class ManualHandle:
    due: float
    sequence: int
    callback: Callback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock. Nothing fires until advance() is called (tests, frame-driven game loops)."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[ManualHandle] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callback) -> ManualHandle:
        self._drop_cancelled()
        handle = ManualHandle(self.now + delay, next(self._counter), callback)
        heapq.heappush(self._queue, handle)
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for handle in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> None:
        """Move the clock forward and run everything that became due, in due-time order."""
        target = self.now + seconds
        while self._queue and self._queue[0].due <= target:
            handle = heapq.heappop(self._queue)
            self.now = handle.due
            if not handle.cancelled:
                handle.callback()
        self.now = target

    def _drop_cancelled(self) -> None:
        """Cancelled handles would otherwise stay queued until advance() passes their due time."""
        if any(handle.cancelled for handle in self._queue):
            self._queue = [handle for handle in self._queue if not handle.cancelled]
            heapq.heapify(self._queue)


class AsyncioScheduler:
    """Runs callbacks on an asyncio event loop (for async renderers)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
