"""Unit tests for src/match/scheduler.py"""

import asyncio

from src.match.scheduler import AsyncioScheduler, ManualScheduler


def test_nothing_fires_before_due() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(1.0, lambda: fired.append("one"))

    scheduler.advance(0.5)
    assert fired == []
    assert scheduler.pending == 1

    scheduler.advance(0.5)
    assert fired == ["one"]
    assert scheduler.pending == 0


def test_callbacks_fire_in_due_order() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(1.0, lambda: fired.append("early"))
    scheduler.call_later(1.0, lambda: fired.append("early, second"))

    scheduler.advance(5)
    assert fired == ["early", "early, second", "late"]
    assert scheduler.now == 5


def test_cancelled_callback_never_fires() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    handle = scheduler.call_later(1.0, lambda: fired.append("cancelled"))
    handle.cancel()
    handle.cancel()

    scheduler.advance(2)
    assert fired == []


def test_callback_scheduled_while_firing_uses_its_own_due_time() -> None:
    scheduler = ManualScheduler()
    fired: list[float] = []

    def chain() -> None:
        fired.append(scheduler.now)
        scheduler.call_later(1.0, lambda: fired.append(scheduler.now))

    scheduler.call_later(1.0, chain)
    scheduler.advance(3)
    assert fired == [1.0, 2.0]


def test_asyncio_scheduler() -> None:
    """Runs on a real event loop with a tiny delay."""
    fired: list[str] = []

    async def main() -> None:
        scheduler = AsyncioScheduler()
        scheduler.call_later(0.01, lambda: fired.append("fired"))
        cancelled = scheduler.call_later(0.01, lambda: fired.append("cancelled"))
        cancelled.cancel()
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert fired == ["fired"]


def test_cancelled_handles_do_not_pile_up() -> None:
    """Every new game cancels a pending conceal; the queue must not keep growing with them."""
    scheduler = ManualScheduler()
    for _ in range(50):
        handle = scheduler.call_later(1000.0, lambda: None)
        handle.cancel()
    scheduler.call_later(1000.0, lambda: None)

    assert len(scheduler._queue) == 1
    assert scheduler.pending == 1
