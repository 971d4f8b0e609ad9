from __future__ import annotations

import logging

from pydantic import ValidationError
from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from notifications.services.provider import use_toast
from ..repository import GiftStore, GiftStoreError


logger = logging.getLogger(__name__)


def validation_message(exc: ValidationError) -> str:
    """First validation problem as a short sentence for a toast."""
    errors = exc.errors()
    if not errors:
        return "Dados inválidos."
    field = ".".join(str(part) for part in errors[0].get("loc", ()))
    labels = {
        "buyer_name": "Seu nome",
        "buyer_phone": "Telefone",
        "name": "Presente",
        "price": "Valor",
    }
    return f"{labels.get(field, field)}: preencha corretamente."


class BuyerFormDialog(QDialog):
    """Shared scaffolding for dialogs that collect the buyer's contact.

    Subclasses add their own fields to ``self.form`` and implement
    :meth:`perform`, which writes to the store and returns the success text.
    """

    confirm_text = "Confirmar"

    def __init__(self, store: GiftStore, title: str, intro: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        heading = QLabel(f"<h3>{title}</h3>")
        layout.addWidget(heading)
        self.intro_label = QLabel(intro)
        self.intro_label.setWordWrap(True)
        layout.addWidget(self.intro_label)

        self.form = QFormLayout()
        layout.addLayout(self.form)
        self.add_fields()

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Ex: Tio João")
        self.name_edit.setAccessibleName("Seu nome")
        self.phone_edit = QLineEdit()
        self.phone_edit.setPlaceholderText("(00) 00000-0000")
        self.phone_edit.setAccessibleName("Telefone ou WhatsApp")
        self.message_edit = QPlainTextEdit()
        self.message_edit.setPlaceholderText("Deixe uma mensagem carinhosa...")
        self.message_edit.setAccessibleName("Recado aos noivos")
        self.message_edit.setFixedHeight(96)
        self.form.addRow("Seu nome", self.name_edit)
        self.form.addRow("Telefone / WhatsApp", self.phone_edit)
        self.form.addRow("Recado aos noivos", self.message_edit)

        buttons = QHBoxLayout()
        self.cancel_button = QPushButton("Cancelar")
        self.cancel_button.clicked.connect(self.reject)
        self.confirm_button = QPushButton(self.confirm_text)
        self.confirm_button.setDefault(True)
        self.confirm_button.clicked.connect(self.submit)
        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.confirm_button)
        layout.addLayout(buttons)

    def add_fields(self) -> None:
        """Hook for fields shown above the buyer contact."""

    def perform(self) -> str:
        raise NotImplementedError

    def submit(self) -> None:
        toasts = use_toast(self)
        self.confirm_button.setEnabled(False)
        self.confirm_button.setText("Salvando...")
        try:
            message = self.perform()
        except ValidationError as exc:
            toasts.error(validation_message(exc))
            return
        except GiftStoreError as exc:
            logger.warning("Gift store rejected %s: %s", type(self).__name__, exc)
            toasts.error(str(exc) or "Erro ao confirmar. Tente novamente.")
            return
        finally:
            self.confirm_button.setEnabled(True)
            self.confirm_button.setText(self.confirm_text)
        toasts.success(message)
        self.accept()

    # helpers ----------------------------------------------------------------
    def buyer_fields(self) -> dict:
        return {
            "buyer_name": self.name_edit.text(),
            "buyer_phone": self.phone_edit.text(),
            "buyer_message": self.message_edit.toPlainText(),
        }


__all__ = ["BuyerFormDialog", "validation_message"]
