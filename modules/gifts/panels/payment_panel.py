from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from notifications.services.provider import use_toast
from styles.tokens import DEFAULT_PADDING


class PaymentPanel(QFrame):
    """PIX details for guests who prefer a direct transfer."""

    def __init__(self, pix_key: str, holder: str = "", bank: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.pix_key = pix_key
        self.setObjectName("paymentPanel")
        self.setStyleSheet(
            "QFrame#paymentPanel { background: rgba(255, 255, 255, 0.9); border-radius: 16px; }"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, DEFAULT_PADDING, 20, DEFAULT_PADDING)
        layout.addWidget(QLabel("<b>Prefere presentear via PIX?</b>"))
        self.key_label = QLabel(f"Chave PIX: {pix_key}")
        self.key_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.key_label)
        if holder:
            layout.addWidget(QLabel(f"Titular: {holder}"))
        if bank:
            layout.addWidget(QLabel(f"Banco: {bank}"))

        self.copy_button = QPushButton("Copiar chave PIX")
        self.copy_button.clicked.connect(self.copy_key)
        layout.addWidget(self.copy_button)

    def copy_key(self) -> None:
        QGuiApplication.clipboard().setText(self.pix_key)
        use_toast(self).success("Chave PIX copiada!")


__all__ = ["PaymentPanel"]
