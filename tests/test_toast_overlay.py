from __future__ import annotations

import pytest
from PySide6.QtCore import QPoint
from PySide6.QtWidgets import QWidget

from notifications.models import EXIT_GRACE_MS, ToastState
from notifications.panels.toast_overlay import ToastOverlay
from notifications.panels.toast_widget import ToastWidget
from notifications.services.provider import ToastProvider
from notifications.services.scheduler import VirtualScheduler
from notifications.services.toast_queue import ToastQueue
from styles.tokens import TOAST_SWATCHES


@pytest.fixture()
def host(qt_app) -> QWidget:
    widget = QWidget()
    widget.resize(900, 700)
    return widget


@pytest.fixture()
def overlay(host: QWidget, queue: ToastQueue) -> ToastOverlay:
    provider = ToastProvider(host, queue)
    provider.establish()
    yield provider.overlay
    provider.teardown()


def _messages(overlay: ToastOverlay) -> list[str]:
    return [w.note.message for w in overlay.toast_widgets()]


def test_renders_in_insertion_order(overlay: ToastOverlay, queue: ToastQueue) -> None:
    queue.success("Saved")
    queue.error("Failed")
    queue.info("Hi")
    assert _messages(overlay) == ["Saved", "Failed", "Hi"]
    assert [w.note.severity for w in overlay.toast_widgets()] == ["success", "error", "info"]


def test_toasts_do_not_overlap(overlay: ToastOverlay, queue: ToastQueue) -> None:
    for i in range(3):
        queue.info(f"toast {i}")
    rects = [w.geometry() for w in overlay.toast_widgets()]
    for upper, lower in zip(rects, rects[1:]):
        assert upper.bottom() < lower.top()


def test_widget_follows_lifecycle(overlay: ToastOverlay, queue: ToastQueue, clock: VirtualScheduler) -> None:
    queue.info("Hi")
    widget = overlay.toast_widgets()[0]
    assert widget.state is ToastState.VISIBLE
    clock.advance(3000)
    assert widget.state is ToastState.EXITING
    assert not widget.close_button.isEnabled()
    clock.advance(EXIT_GRACE_MS)
    assert overlay.toast_widgets() == []
    assert overlay.isHidden()


def test_close_button_dismisses(overlay: ToastOverlay, queue: ToastQueue, clock: VirtualScheduler) -> None:
    queue.info("first")
    queue.info("second")
    second = overlay.toast_widgets()[1]
    second.close_button.click()
    assert queue.state_of(second.note.id) is ToastState.EXITING
    clock.advance(EXIT_GRACE_MS)
    assert _messages(overlay) == ["first"]


def test_mask_only_covers_toasts(overlay: ToastOverlay, queue: ToastQueue) -> None:
    queue.info("one")
    queue.info("two")
    mask = overlay.mask()
    widgets = overlay.toast_widgets()
    for widget in widgets:
        assert mask.contains(widget.geometry().center())
    gap = QPoint(widgets[0].geometry().center().x(), widgets[0].geometry().bottom() + 2)
    assert not mask.contains(gap)


def test_anchored_top_right(overlay: ToastOverlay, host: QWidget, queue: ToastQueue) -> None:
    queue.info("corner")
    assert overlay.geometry().right() < host.width()
    assert overlay.x() > host.width() // 2


def test_overlay_replays_existing_toasts(qt_app) -> None:
    clock = VirtualScheduler()
    queue = ToastQueue(scheduler=clock)
    queue.info("before")
    host = QWidget()
    overlay = ToastOverlay(queue, host)
    assert _messages(overlay) == ["before"]
    assert overlay.toast_widgets()[0].state is ToastState.VISIBLE


@pytest.mark.parametrize("severity", ["success", "error", "info"])
def test_severity_styling_and_accessibility(qt_app, severity: str) -> None:
    from notifications.models import Notification

    widget = ToastWidget(Notification(id="x", message="msg", severity=severity))
    assert widget.property("severity") == severity
    assert TOAST_SWATCHES[severity].bg in widget.styleSheet()
    assert widget.accessibleDescription() == "msg"
    assert not widget.icon_label.pixmap().isNull()
    assert widget.close_button.accessibleName() == "Fechar"


def test_overlay_accessible_region(overlay: ToastOverlay) -> None:
    assert overlay.accessibleName() == "Notificações"


def test_visible_toast_raises_one_alert(qt_app, monkeypatch: pytest.MonkeyPatch) -> None:
    from types import SimpleNamespace

    from PySide6.QtGui import QAccessible

    from notifications.models import Notification
    from notifications.panels import toast_widget as toast_widget_module

    events: list[tuple[object, object]] = []

    def _record(event) -> None:
        events.append((event.type(), event.object()))

    monkeypatch.setattr(
        toast_widget_module,
        "QAccessible",
        SimpleNamespace(Event=QAccessible.Event, updateAccessibility=_record),
    )
    widget = ToastWidget(Notification(id="a", message="Saved", severity="success"))
    assert events == []
    widget.set_state(ToastState.VISIBLE)
    assert events == [(QAccessible.Event.Alert, widget)]
    widget.set_state(ToastState.EXITING)
    widget.set_state(ToastState.REMOVED)
    assert len(events) == 1


def test_overflow_keeps_newest_toasts_inside_host(qt_app) -> None:
    from styles.tokens import TOAST_MARGIN

    host = QWidget()
    host.resize(500, 300)
    queue = ToastQueue(scheduler=VirtualScheduler())
    provider = ToastProvider(host, queue)
    provider.establish()
    for i in range(10):
        queue.info(f"toast {i}")

    overlay = provider.overlay
    hidden = [w.isHidden() for w in overlay.toast_widgets()]
    assert hidden[0] and not hidden[-1]
    # hidden ones are always the oldest
    assert hidden == sorted(hidden, reverse=True)
    assert overlay.height() <= host.height() - 2 * TOAST_MARGIN

    for note in queue.toasts()[1:]:
        queue.remove(note.id)
    assert not overlay.toast_widgets()[0].isHidden()
    provider.teardown()
