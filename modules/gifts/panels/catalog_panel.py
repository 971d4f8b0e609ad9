from __future__ import annotations

import logging
from typing import List

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLayout,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from notifications.services.provider import use_toast
from styles.qss_helpers import window_qss
from styles.tokens import DEFAULT_PADDING, SECTION_SPACING
from ..models.pricing import PRICE_THRESHOLD, split_by_tier
from ..models.schemas import GiftRead
from ..repository import GiftStore, GiftStoreError
from .custom_gift_dialog import CustomGiftDialog
from .gift_card import GiftCard
from .payment_panel import PaymentPanel
from .purchase_dialog import PurchaseDialog


logger = logging.getLogger(__name__)


class GiftColumn(QWidget):
    def __init__(self, title: str, tier: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.tier = tier
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(DEFAULT_PADDING)
        heading = QLabel(title)
        heading.setObjectName("columnTitle")
        layout.addWidget(heading)
        self.cards_layout = QVBoxLayout()
        self.cards_layout.setSpacing(DEFAULT_PADDING)
        layout.addLayout(self.cards_layout)
        layout.addStretch(1)
        self.empty_label = QLabel("Nenhum item nesta lista.")
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.cards: List[GiftCard] = []

    def set_gifts(self, gifts: List[GiftRead]) -> List[GiftCard]:
        _clear_layout(self.cards_layout, keep=self.empty_label)
        self.cards = [GiftCard(gift, self.tier) for gift in gifts]
        if not self.cards:
            self.cards_layout.addWidget(self.empty_label)
            self.empty_label.show()
        for card in self.cards:
            self.cards_layout.addWidget(card)
        return self.cards


def _clear_layout(layout: QLayout, keep: QWidget | None = None) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is None:
            continue
        if widget is keep:
            widget.hide()
            continue
        widget.deleteLater()


class CatalogPanel(QWidget):
    """Two-column gift list with purchase and custom-gift flows.

    The list reloads after every write made through ``store`` and, to pick
    up purchases made from other machines, every ``refresh_interval_ms``.
    """

    def __init__(
        self,
        store: GiftStore,
        *,
        price_threshold: float = PRICE_THRESHOLD,
        refresh_interval_ms: int = 5000,
        pix_key: str = "",
        pix_holder: str = "",
        pix_bank: str = "",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.price_threshold = price_threshold
        self.gifts: List[GiftRead] = []
        self.loaded = False
        self._last_error: str | None = None
        self.setObjectName("registryRoot")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(window_qss())

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea, QScrollArea > QWidget > QWidget { background: transparent; }")
        outer.addWidget(scroll)

        body = QWidget()
        layout = QVBoxLayout(body)
        layout.setContentsMargins(48, 48, 48, 48)
        layout.setSpacing(SECTION_SPACING)
        scroll.setWidget(body)

        title = QLabel("Lista de Presentes")
        title.setObjectName("registryTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle = QLabel("Selecione a caixinha se você comprou o presente para nós ❤️")
        subtitle.setObjectName("registrySubtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)
        layout.addWidget(subtitle)

        actions = QHBoxLayout()
        actions.addStretch(1)
        self.custom_button = QPushButton("Comprei outro presente")
        self.custom_button.clicked.connect(self.open_custom_gift)
        actions.addWidget(self.custom_button)
        actions.addStretch(1)
        layout.addLayout(actions)

        self.loading_label = QLabel("Carregando lista...")
        self.loading_label.setObjectName("loadingLabel")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.loading_label)

        columns = QHBoxLayout()
        columns.setSpacing(48)
        self.highlights = GiftColumn("✨ Destaques", "gold")
        self.keepsakes = GiftColumn("🎁 Lembranças", "silver")
        columns.addWidget(self.highlights, 1)
        columns.addWidget(self.keepsakes, 1)
        self.columns_host = QWidget()
        self.columns_host.setLayout(columns)
        self.columns_host.hide()
        layout.addWidget(self.columns_host)

        self.payment_panel = None
        if pix_key:
            self.payment_panel = PaymentPanel(pix_key, pix_holder, pix_bank)
            layout.addWidget(self.payment_panel)
        layout.addStretch(1)

        store.giftsChanged.connect(self.reload)
        self._poll = QTimer(self)
        self._poll.setInterval(max(0, refresh_interval_ms))
        self._poll.timeout.connect(self.reload)
        if refresh_interval_ms > 0:
            self._poll.start()
        QTimer.singleShot(0, self._initial_reload)

    # ---- Data -------------------------------------------------------------
    def reload(self) -> None:
        try:
            gifts = self.store.list_gifts()
        except GiftStoreError as exc:
            logger.warning("Failed to load gifts: %s", exc)
            # Polling would repeat the same toast every tick otherwise.
            message = str(exc)
            if message != self._last_error:
                self._last_error = message
                use_toast(self).error("Não foi possível carregar a lista de presentes.")
            return
        self._last_error = None
        if self.loaded and gifts == self.gifts:
            return
        self.gifts = gifts
        highlights, keepsakes = split_by_tier(gifts, self.price_threshold)
        for card in self.highlights.set_gifts(highlights) + self.keepsakes.set_gifts(keepsakes):
            card.purchaseRequested.connect(self.open_purchase)
        if not self.loaded:
            self.loaded = True
            self.loading_label.hide()
            self.columns_host.show()

    def _initial_reload(self) -> None:
        if not self.loaded:
            self.reload()

    def cards(self) -> List[GiftCard]:
        return self.highlights.cards + self.keepsakes.cards

    # ---- Dialogs ------------------------------------------------------------
    def open_purchase(self, gift: GiftRead) -> None:
        dialog = PurchaseDialog(self.store, gift, self)
        dialog.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        dialog.open()

    def open_custom_gift(self) -> None:
        dialog = CustomGiftDialog(self.store, self)
        dialog.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        dialog.open()


__all__ = ["CatalogPanel", "GiftColumn"]
