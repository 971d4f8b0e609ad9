from __future__ import annotations

from notifications.services.scheduler import QtScheduler, VirtualScheduler


def test_virtual_timers_fire_in_due_order() -> None:
    clock = VirtualScheduler()
    fired: list[str] = []
    clock.schedule(300, lambda: fired.append("late"))
    clock.schedule(100, lambda: fired.append("early"))
    clock.schedule(100, lambda: fired.append("early-second"))
    clock.advance(99)
    assert fired == []
    clock.advance(201)
    assert fired == ["early", "early-second", "late"]
    assert clock.now == 300


def test_virtual_cancel() -> None:
    clock = VirtualScheduler()
    fired: list[int] = []
    handle = clock.schedule(50, lambda: fired.append(1))
    assert handle.active
    handle.cancel()
    assert not handle.active
    clock.advance(100)
    assert fired == []


def test_timer_scheduled_from_callback_fires_within_window() -> None:
    clock = VirtualScheduler()
    fired: list[int] = []

    def first() -> None:
        fired.append(clock.now)
        clock.schedule(300, lambda: fired.append(clock.now))

    clock.schedule(3000, first)
    clock.advance(3300)
    assert fired == [3000, 3300]


def test_qt_scheduler_fires_on_event_loop(qt_app) -> None:
    from PySide6.QtCore import QEventLoop, QTimer

    scheduler = QtScheduler()
    fired: list[str] = []
    loop = QEventLoop()
    kept = scheduler.schedule(10, lambda: fired.append("kept"))
    cancelled = scheduler.schedule(10, lambda: fired.append("cancelled"))
    cancelled.cancel()
    QTimer.singleShot(100, loop.quit)
    loop.exec()
    assert fired == ["kept"]
    assert not kept.active
    assert not cancelled.active


def test_qt_scheduler_fires_without_caller_holding_handle(qt_app) -> None:
    import gc

    from PySide6.QtCore import QEventLoop, QTimer

    fired: list[str] = []
    QtScheduler().schedule(10, lambda: fired.append("dropped"))
    gc.collect()
    loop = QEventLoop()
    QTimer.singleShot(100, loop.quit)
    loop.exec()
    assert fired == ["dropped"]
