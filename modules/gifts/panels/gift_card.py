from __future__ import annotations

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from styles.qss_helpers import card_qss
from styles.tokens import DEFAULT_PADDING
from ..models.pricing import format_money
from ..models.schemas import GiftRead


class GiftCard(QFrame):
    """Compact card for one gift: checkbox, name, price and store link.

    Ticking the checkbox does not mark anything by itself; it asks the
    catalog to open the purchase dialog and then clears itself again.
    """

    purchaseRequested = Signal(object)  # GiftRead

    def __init__(self, gift: GiftRead, tier: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.gift = gift
        self.tier = tier
        self.setObjectName("giftCard")
        self.setStyleSheet(card_qss(tier, gift.available))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, DEFAULT_PADDING, 20, DEFAULT_PADDING)
        layout.setSpacing(DEFAULT_PADDING)

        if gift.available:
            self.checkbox = QCheckBox()
            self.checkbox.setToolTip("Marcar como comprado")
            self.checkbox.setAccessibleName(f"Marcar {gift.name} como comprado")
            self.checkbox.toggled.connect(self._on_toggled)
            layout.addWidget(self.checkbox)
            self.purchased_tag = None
        else:
            self.checkbox = None
            self.purchased_tag = QLabel("COMPRADO")
            self.purchased_tag.setObjectName("purchasedTag")
            layout.addWidget(self.purchased_tag)

        info = QVBoxLayout()
        info.setSpacing(4)
        self.name_label = QLabel(gift.name)
        self.name_label.setObjectName("giftName")
        self.name_label.setWordWrap(True)
        if not gift.available:
            font = self.name_label.font()
            font.setStrikeOut(True)
            self.name_label.setFont(font)
        self.price_label = QLabel(format_money(gift.price))
        self.price_label.setObjectName("giftPrice")
        info.addWidget(self.name_label)
        info.addWidget(self.price_label)
        layout.addLayout(info, 1)

        self.link_button = QPushButton("Ver na Loja ↗" if gift.available else "Indisponível")
        self.link_button.setObjectName("storeLink")
        self.link_button.setEnabled(gift.available and bool(gift.link))
        self.link_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.link_button.clicked.connect(self._open_link)
        layout.addWidget(self.link_button)

    def _on_toggled(self, checked: bool) -> None:
        if not checked:
            return
        self.checkbox.blockSignals(True)
        self.checkbox.setChecked(False)
        self.checkbox.blockSignals(False)
        self.purchaseRequested.emit(self.gift)

    def _open_link(self) -> None:
        if self.gift.link:
            QDesktopServices.openUrl(QUrl(self.gift.link))


__all__ = ["GiftCard"]
