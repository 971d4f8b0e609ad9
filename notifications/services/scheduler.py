from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Protocol, Set

from PySide6.QtCore import QObject, QTimer


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class ToastScheduler(Protocol):
    def schedule(self, delay_ms: int, func: Callable[[], None]) -> TimerHandle: ...


class _QtTimerHandle:
    def __init__(self, timer: QTimer, func: Callable[[], None]) -> None:
        self._timer = timer
        self._func = func
        self._done = False
        timer.timeout.connect(self._fire)
        timer.destroyed.connect(self._forget)
        # Pending handles stay referenced until their timer is destroyed.
        _pending.add(self)

    def _fire(self) -> None:
        if self._done:
            return
        self._release()
        self._func()

    def cancel(self) -> None:
        if self._done:
            return
        self._timer.stop()
        self._release()

    def _release(self) -> None:
        self._done = True
        self._timer.deleteLater()

    def _forget(self, *_args: object) -> None:
        _pending.discard(self)

    @property
    def active(self) -> bool:
        return not self._done


_pending: Set[_QtTimerHandle] = set()


class QtScheduler:
    """One-shot timers running on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, func: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = _QtTimerHandle(timer, func)
        timer.start(max(0, int(delay_ms)))
        return handle


class _VirtualTimer:
    def __init__(self, due: int, func: Callable[[], None]) -> None:
        self.due = due
        self.func = func
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class VirtualScheduler:
    """Scheduler driven by an explicit clock.

    Nothing fires until :meth:`advance` moves the clock past a timer's due
    time. Timers due at the same instant fire in scheduling order, and
    timers scheduled by a callback fire within the same ``advance`` call if
    they fall inside the window.
    """

    def __init__(self) -> None:
        self.now = 0
        self._queue: List[tuple[int, int, _VirtualTimer]] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: int, func: Callable[[], None]) -> _VirtualTimer:
        timer = _VirtualTimer(self.now + max(0, int(delay_ms)), func)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = due
            timer.fired = True
            timer.func()
        self.now = target

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if t.active)


__all__ = ["TimerHandle", "ToastScheduler", "QtScheduler", "VirtualScheduler"]
