from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtWidgets import QDialog, QWidget

from modules.gifts.panels.catalog_panel import CatalogPanel
from modules.gifts.panels.custom_gift_dialog import CustomGiftDialog
from modules.gifts.panels.gift_card import GiftCard
from modules.gifts.panels.payment_panel import PaymentPanel
from modules.gifts.panels.purchase_dialog import PurchaseDialog
from modules.gifts.repository import GiftStore, GiftStoreError
from notifications.services.provider import ToastProvider
from notifications.services.toast_queue import ToastQueue


@pytest.fixture()
def store(tmp_path: Path) -> GiftStore:
    store = GiftStore(f"sqlite:///{tmp_path / 'gifts.db'}")
    store.add_gifts(
        [
            {"name": "Geladeira", "price": 3500, "link": "https://example.com/geladeira"},
            {"name": "Liquidificador", "price": 250, "link": "https://example.com/liquidificador"},
            {"name": "Jogo de copos", "price": 89.9, "link": "https://example.com/copos"},
        ]
    )
    yield store
    store.dispose()


@pytest.fixture()
def host(qt_app, queue: ToastQueue) -> QWidget:
    widget = QWidget()
    widget.resize(1000, 800)
    provider = ToastProvider(widget, queue)
    provider.establish()
    yield widget
    provider.teardown()


@pytest.fixture()
def panel(host: QWidget, store: GiftStore) -> CatalogPanel:
    panel = CatalogPanel(store, refresh_interval_ms=0, pix_key="noivos@example.com", parent=host)
    panel.reload()
    return panel


def _toasts(queue: ToastQueue) -> list[tuple[str, str]]:
    return [(n.severity, n.message) for n in queue.toasts()]


def test_columns_split_by_price(panel: CatalogPanel) -> None:
    assert panel.loaded
    assert panel.loading_label.isHidden()
    assert [c.gift.name for c in panel.highlights.cards] == ["Geladeira", "Liquidificador"]
    assert [c.gift.name for c in panel.keepsakes.cards] == ["Jogo de copos"]
    assert all(c.tier == "gold" for c in panel.highlights.cards)
    assert all(c.tier == "silver" for c in panel.keepsakes.cards)


def test_empty_column_shows_placeholder(host: QWidget, tmp_path: Path) -> None:
    store = GiftStore(f"sqlite:///{tmp_path / 'only-cheap.db'}")
    store.add_gifts([{"name": "Caneca", "price": 30}])
    panel = CatalogPanel(store, refresh_interval_ms=0, parent=host)
    panel.reload()
    assert panel.highlights.cards == []
    assert panel.highlights.cards_layout.indexOf(panel.highlights.empty_label) >= 0
    assert panel.keepsakes.cards_layout.indexOf(panel.keepsakes.empty_label) == -1
    store.dispose()


def test_card_checkbox_requests_purchase(panel: CatalogPanel) -> None:
    card = panel.highlights.cards[0]
    requested: list[str] = []
    card.purchaseRequested.connect(lambda gift: requested.append(gift.name))
    card.checkbox.setChecked(True)
    assert requested == ["Geladeira"]
    assert not card.checkbox.isChecked()


def test_purchase_flow(panel: CatalogPanel, store: GiftStore, queue: ToastQueue) -> None:
    gift = panel.keepsakes.cards[0].gift
    dialog = PurchaseDialog(store, gift, panel)
    dialog.name_edit.setText("Tia Maria")
    dialog.phone_edit.setText("(21) 99999-0000")
    dialog.message_edit.setPlainText("Muitas felicidades!")
    dialog.submit()

    assert dialog.result() == QDialog.DialogCode.Accepted
    assert store.get_gift(gift.id).buyer_name == "Tia Maria"
    assert _toasts(queue) == [("success", "Obrigado! Jogo de copos foi marcado como comprado.")]

    # giftsChanged refreshed the panel
    card = panel.keepsakes.cards[0]
    assert card.checkbox is None
    assert card.purchased_tag is not None
    assert card.link_button.text() == "Indisponível"
    assert not card.link_button.isEnabled()
    assert card.name_label.font().strikeOut()


def test_purchase_validation_error_keeps_dialog(panel: CatalogPanel, store: GiftStore, queue: ToastQueue) -> None:
    gift = panel.highlights.cards[0].gift
    dialog = PurchaseDialog(store, gift, panel)
    dialog.phone_edit.setText("1111")
    dialog.submit()

    assert dialog.result() != QDialog.DialogCode.Accepted
    assert store.get_gift(gift.id).available
    assert _toasts(queue) == [("error", "Seu nome: preencha corretamente.")]
    assert dialog.confirm_button.isEnabled()
    assert dialog.confirm_button.text() == dialog.confirm_text


def test_purchase_store_error_reported(panel: CatalogPanel, store: GiftStore, queue: ToastQueue) -> None:
    gift = panel.highlights.cards[0].gift
    store.mark_purchased(gift.id, "Primeiro", "0000")
    dialog = PurchaseDialog(store, gift, panel)
    dialog.name_edit.setText("Segundo")
    dialog.phone_edit.setText("1111")
    dialog.submit()
    assert _toasts(queue) == [("error", "Este presente já foi escolhido por outra pessoa.")]
    assert store.get_gift(gift.id).buyer_name == "Primeiro"


def test_custom_gift_flow(panel: CatalogPanel, store: GiftStore, queue: ToastQueue) -> None:
    dialog = CustomGiftDialog(store, panel)
    dialog.gift_name_edit.setText("Kit de churrasco")
    dialog.price_spin.setValue(150)
    dialog.name_edit.setText("Primo Zé")
    dialog.phone_edit.setText("(31) 98888-7777")
    dialog.submit()

    assert dialog.result() == QDialog.DialogCode.Accepted
    custom = [g for g in store.list_gifts() if g.is_custom]
    assert [(g.name, g.price, g.available) for g in custom] == [("Kit de churrasco", 150.0, False)]
    assert _toasts(queue) == [("success", "Obrigado! Kit de churrasco foi registrado.")]


def test_reload_failure_toasts_once(panel: CatalogPanel, monkeypatch: pytest.MonkeyPatch, queue: ToastQueue) -> None:
    def _boom() -> list:
        raise GiftStoreError("connection refused")

    monkeypatch.setattr(panel.store, "list_gifts", _boom)
    panel.reload()
    panel.reload()
    assert _toasts(queue) == [("error", "Não foi possível carregar a lista de presentes.")]
    # previous cards stay on screen
    assert len(panel.cards()) == 3


def test_payment_panel_copies_key(panel: CatalogPanel, qt_app, queue: ToastQueue) -> None:
    assert isinstance(panel.payment_panel, PaymentPanel)
    panel.payment_panel.copy_button.click()
    assert qt_app.clipboard().text() == "noivos@example.com"
    assert _toasts(queue) == [("success", "Chave PIX copiada!")]


def test_gift_card_without_link_disables_button(qt_app) -> None:
    from modules.gifts.models import GiftRead

    card = GiftCard(GiftRead(id=1, name="Surpresa", price=10, link=None), "silver")
    assert not card.link_button.isEnabled()
    assert card.price_label.text() == "R$\u00a010,00"


def test_reload_without_changes_keeps_cards(panel: CatalogPanel) -> None:
    before = panel.cards()
    panel.reload()
    assert panel.cards() == before
    assert all(a is b for a, b in zip(panel.cards(), before))


def test_card_layout_uses_padding_tokens(panel: CatalogPanel) -> None:
    from styles.tokens import DEFAULT_PADDING, SECTION_SPACING

    card = panel.cards()[0]
    assert card.layout().spacing() == DEFAULT_PADDING
    assert card.layout().contentsMargins().top() == DEFAULT_PADDING
    assert panel.highlights.cards_layout.spacing() == DEFAULT_PADDING
    assert panel.columns_host.parentWidget().layout().spacing() == SECTION_SPACING
