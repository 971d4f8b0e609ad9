from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, QSize, Qt, Signal
from PySide6.QtGui import QAccessible, QAccessibleEvent
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QLabel,
    QToolButton,
    QWidget,
)

from notifications.models.notification import Notification, ToastState
from styles.icons import icon_close, severity_icon
from styles.qss_helpers import toast_qss
from styles.tokens import ICON_SIZE_MD, TOAST_FADE_MS, TOAST_WIDTH


class ToastWidget(QFrame):
    """Renders one notification: severity icon, message and close button.

    The widget holds no timers of its own. It mirrors the lifecycle state it
    is told about and asks for dismissal through ``closeRequested``.
    """

    closeRequested = Signal(str)

    def __init__(self, note: Notification, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.note = note
        self.state = ToastState.ENTERING
        self.setObjectName("toast")
        self.setProperty("severity", note.severity)
        self.setStyleSheet(toast_qss(note.severity))
        self.setFixedWidth(TOAST_WIDTH)
        self.setAccessibleName(note.severity)
        self.setAccessibleDescription(note.message)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 12, 16)
        layout.setSpacing(16)

        self.icon_label = QLabel()
        self.icon_label.setPixmap(severity_icon(note.severity).pixmap(QSize(ICON_SIZE_MD, ICON_SIZE_MD)))
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.icon_label)

        self.message_label = QLabel(note.message)
        self.message_label.setObjectName("toastMessage")
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label, 1)

        self.close_button = QToolButton()
        self.close_button.setObjectName("toastClose")
        self.close_button.setIcon(icon_close())
        self.close_button.setToolTip("Fechar")
        self.close_button.setAccessibleName("Fechar")
        self.close_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.close_button.clicked.connect(lambda: self.closeRequested.emit(self.note.id))
        layout.addWidget(self.close_button, 0, Qt.AlignmentFlag.AlignTop)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self._fade = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade.setDuration(TOAST_FADE_MS)
        self._fade.setEasingCurve(QEasingCurve.Type.OutCubic)

    def set_state(self, state: ToastState) -> None:
        if state is self.state:
            return
        self.state = state
        if state is ToastState.VISIBLE:
            self._fade_to(1.0)
            self._announce()
        elif state is ToastState.EXITING:
            self.close_button.setEnabled(False)
            self._fade_to(0.0)
        elif state is ToastState.REMOVED:
            self._fade.stop()

    def _fade_to(self, value: float) -> None:
        self._fade.stop()
        self._fade.setStartValue(self._opacity.opacity())
        self._fade.setEndValue(value)
        self._fade.start()

    def _announce(self) -> None:
        QAccessible.updateAccessibility(QAccessibleEvent(self, QAccessible.Event.Alert))


__all__ = ["ToastWidget"]
