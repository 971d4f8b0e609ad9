from __future__ import annotations

import logging
from typing import Dict, List

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QRegion
from PySide6.QtWidgets import QVBoxLayout, QWidget

from notifications.models.notification import Notification, ToastState
from notifications.services.toast_queue import ToastQueue
from styles.tokens import TOAST_MARGIN, TOAST_SPACING, TOAST_WIDTH
from .toast_widget import ToastWidget


logger = logging.getLogger(__name__)


class ToastOverlay(QWidget):
    """Stack of toasts floating over the top-right corner of ``host``.

    The overlay is a child of the host window, raised above its siblings and
    masked to the toasts' own rectangles, so clicks anywhere else reach the
    page underneath. Order on screen is the queue's insertion order.
    """

    def __init__(self, queue: ToastQueue, host: QWidget) -> None:
        super().__init__(host)
        self.queue = queue
        self.host = host
        self.setObjectName("toastOverlay")
        self.setAccessibleName("Notificações")
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)
        self._widgets: Dict[str, ToastWidget] = {}

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(TOAST_SPACING)

        queue.toastAdded.connect(self._on_added)
        queue.toastRemoved.connect(self._on_removed)
        queue.toastStateChanged.connect(self._on_state_changed)
        host.installEventFilter(self)

        for note in queue.toasts():
            self._on_added(note)
            self._widgets[note.id].set_state(queue.state_of(note.id))
        self._relayout()

    # ---- Queue signals ------------------------------------------------------
    def _on_added(self, note: Notification) -> None:
        widget = ToastWidget(note, self)
        widget.closeRequested.connect(self.queue.dismiss)
        self._widgets[note.id] = widget
        self._layout.addWidget(widget, 0, Qt.AlignmentFlag.AlignRight)
        self._relayout()

    def _on_removed(self, toast_id: str) -> None:
        widget = self._widgets.pop(toast_id, None)
        if widget is None:
            return
        widget.set_state(ToastState.REMOVED)
        self._layout.removeWidget(widget)
        widget.hide()
        widget.deleteLater()
        self._relayout()

    def _on_state_changed(self, toast_id: str, state: str) -> None:
        widget = self._widgets.get(toast_id)
        if widget is not None:
            widget.set_state(ToastState(state))

    # ---- Geometry -----------------------------------------------------------
    def toast_widgets(self) -> List[ToastWidget]:
        """Visible toast widgets, top to bottom."""
        items = (self._layout.itemAt(i).widget() for i in range(self._layout.count()))
        return [w for w in items if isinstance(w, ToastWidget)]

    def _fit_to_host(self, widgets: List[ToastWidget]) -> List[ToastWidget]:
        """Show the newest toasts that fit inside the host; hide older ones."""
        limit = self.host.height() - 2 * TOAST_MARGIN
        shown: List[ToastWidget] = []
        used = 0
        full = False
        for widget in reversed(widgets):
            height = widget.heightForWidth(TOAST_WIDTH) if widget.hasHeightForWidth() else -1
            if height < 0:
                height = widget.sizeHint().height()
            needed = height + (TOAST_SPACING if shown else 0)
            # Older toasts stay hidden once one does not fit, so order holds.
            full = full or (bool(shown) and used + needed > limit)
            widget.setHidden(full)
            if not full:
                used += needed
                shown.append(widget)
        return list(reversed(shown))

    def _relayout(self) -> None:
        widgets = self._fit_to_host(self.toast_widgets())
        if not widgets:
            self.hide()
            return
        self.adjustSize()
        self._layout.setGeometry(self.rect())
        host_rect = self.host.rect()
        x = max(host_rect.width() - self.width() - TOAST_MARGIN, 0)
        self.move(x, TOAST_MARGIN)
        region = QRegion()
        for widget in widgets:
            region = region.united(QRegion(widget.geometry()))
        self.setMask(region)
        self.show()
        self.raise_()

    def detach(self) -> None:
        """Unhook from the host and queue so the overlay can be dropped safely."""
        self.host.removeEventFilter(self)
        self.queue.toastAdded.disconnect(self._on_added)
        self.queue.toastRemoved.disconnect(self._on_removed)
        self.queue.toastStateChanged.disconnect(self._on_state_changed)
        self.hide()
        self.setParent(None)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        if obj is self.host and event.type() in (QEvent.Type.Resize, QEvent.Type.Show):
            self._relayout()
        return super().eventFilter(obj, event)


__all__ = ["ToastOverlay"]
