from __future__ import annotations

from html import escape

from PySide6.QtWidgets import QWidget

from ..models.schemas import GiftRead
from ..repository import GiftStore
from .buyer_dialog import BuyerFormDialog


class PurchaseDialog(BuyerFormDialog):
    confirm_text = "Confirmar Presente"

    def __init__(self, store: GiftStore, gift: GiftRead, parent: QWidget | None = None) -> None:
        super().__init__(
            store,
            "Confirmar Compra",
            f"Que demais! Você vai presentear os noivos com <b>{escape(gift.name)}</b>?",
            parent,
        )
        self.gift = gift

    def perform(self) -> str:
        self.store.mark_purchased(self.gift.id, **self.buyer_fields())
        return f"Obrigado! {self.gift.name} foi marcado como comprado."


__all__ = ["PurchaseDialog"]
