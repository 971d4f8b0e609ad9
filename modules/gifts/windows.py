from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QWidget

from utils.settingsmanager import SettingsManager
from .panels.catalog_panel import CatalogPanel
from .repository import GiftStore


def get_catalog_panel(
    store: GiftStore,
    settings: SettingsManager,
    parent: QWidget | None = None,
) -> CatalogPanel:
    return CatalogPanel(
        store,
        price_threshold=float(settings.get("price_threshold")),
        refresh_interval_ms=settings.get_int("refresh_interval_ms"),
        pix_key=settings.get("pix_key") or "",
        pix_holder=settings.get("pix_holder") or "",
        pix_bank=settings.get("pix_bank") or "",
        parent=parent,
    )


class RegistryWindow(QMainWindow):
    """Top-level window hosting the catalog panel."""

    def __init__(self, store: GiftStore, settings: SettingsManager) -> None:
        super().__init__()
        self.store = store
        self.settings = settings
        self.setWindowTitle(settings.get("window_title"))
        self.resize(1100, 800)
        self.catalog = get_catalog_panel(store, settings, self)
        self.setCentralWidget(self.catalog)


__all__ = ["get_catalog_panel", "RegistryWindow"]
