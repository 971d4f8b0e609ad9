from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from notifications.models.notification import (
    DEFAULT_DURATION_MS,
    Notification,
    Severity,
    ToastState,
    new_toast_id,
)
from .lifecycle import ToastLifecycle
from .scheduler import QtScheduler, ToastScheduler


logger = logging.getLogger(__name__)


class ToastQueue(QObject):
    """Ordered collection of active toasts.

    The queue is the only owner of :class:`Notification` records. Renderers
    observe it through the signals below and never mutate the list; the
    user's close button goes through :meth:`dismiss`.
    """

    toastAdded = Signal(object)  # Notification
    toastRemoved = Signal(str)  # toast id
    toastStateChanged = Signal(str, str)  # toast id, ToastState value

    def __init__(
        self,
        scheduler: ToastScheduler | None = None,
        default_duration_ms: int = DEFAULT_DURATION_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._scheduler = scheduler if scheduler is not None else QtScheduler(self)
        self.default_duration_ms = default_duration_ms
        self._toasts: List[Notification] = []
        self._lifecycles: Dict[str, ToastLifecycle] = {}

    # ---- Public API --------------------------------------------------------
    def notify(self, message: str, severity: Severity, duration_ms: Optional[int] = None) -> None:
        note = Notification(
            id=new_toast_id(self._lifecycles),
            message=message,
            severity=severity,
            duration_ms=self.default_duration_ms if duration_ms is None else duration_ms,
        )
        lifecycle = ToastLifecycle(
            note,
            self._scheduler,
            on_finished=self.remove,
            on_state_changed=self._emit_state,
        )
        self._toasts.append(note)
        self._lifecycles[note.id] = lifecycle
        logger.debug("[toast] %s %s: %s", note.id, severity, message)
        self.toastAdded.emit(note)
        lifecycle.start()

    def remove(self, toast_id: str) -> None:
        lifecycle = self._lifecycles.pop(toast_id, None)
        if lifecycle is None:
            return
        self._toasts = [note for note in self._toasts if note.id != toast_id]
        lifecycle.cancel()
        self.toastRemoved.emit(toast_id)

    def dismiss(self, toast_id: str) -> None:
        lifecycle = self._lifecycles.get(toast_id)
        if lifecycle is not None:
            lifecycle.dismiss()

    def clear(self) -> None:
        for note in list(self._toasts):
            self.remove(note.id)

    def success(self, message: str, duration_ms: Optional[int] = None) -> None:
        self.notify(message, 'success', duration_ms)

    def error(self, message: str, duration_ms: Optional[int] = None) -> None:
        self.notify(message, 'error', duration_ms)

    def info(self, message: str, duration_ms: Optional[int] = None) -> None:
        self.notify(message, 'info', duration_ms)

    # ---- Queries -----------------------------------------------------------
    def toasts(self) -> List[Notification]:
        return list(self._toasts)

    def state_of(self, toast_id: str) -> ToastState:
        lifecycle = self._lifecycles.get(toast_id)
        return lifecycle.state if lifecycle is not None else ToastState.REMOVED

    def __len__(self) -> int:
        return len(self._toasts)

    def _emit_state(self, toast_id: str, state: ToastState) -> None:
        self.toastStateChanged.emit(toast_id, state.value)


__all__ = ["ToastQueue"]
