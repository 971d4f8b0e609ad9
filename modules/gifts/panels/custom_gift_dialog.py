from __future__ import annotations

from PySide6.QtWidgets import QDoubleSpinBox, QLineEdit, QWidget

from ..repository import GiftStore
from .buyer_dialog import BuyerFormDialog


class CustomGiftDialog(BuyerFormDialog):
    """Register a gift that is not on the list."""

    confirm_text = "Registrar Presente"

    def __init__(self, store: GiftStore, parent: QWidget | None = None) -> None:
        super().__init__(
            store,
            "Outro Presente",
            "Comprou algo fora da lista? Conte para os noivos o que foi.",
            parent,
        )

    def add_fields(self) -> None:
        self.gift_name_edit = QLineEdit()
        self.gift_name_edit.setPlaceholderText("Ex: Jogo de taças")
        self.gift_name_edit.setAccessibleName("Presente")
        self.price_spin = QDoubleSpinBox()
        self.price_spin.setPrefix("R$ ")
        self.price_spin.setDecimals(2)
        self.price_spin.setRange(0, 1_000_000)
        self.price_spin.setAccessibleName("Valor aproximado")
        self.form.addRow("Presente", self.gift_name_edit)
        self.form.addRow("Valor aproximado", self.price_spin)

    def perform(self) -> str:
        gift = self.store.add_custom_gift(
            name=self.gift_name_edit.text(),
            price=self.price_spin.value(),
            **self.buyer_fields(),
        )
        return f"Obrigado! {gift.name} foi registrado."


__all__ = ["CustomGiftDialog"]
