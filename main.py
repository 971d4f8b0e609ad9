# ===== Part 1: Imports & Logging ============================================
import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from modules.gifts import GiftStore, GiftStoreError, RegistryWindow
from notifications.services import ToastProvider, ToastQueue
from utils.settingsmanager import SettingsManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ===== Part 2: Root Composition =============================================
def build_window(store: GiftStore, settings: SettingsManager) -> tuple[RegistryWindow, ToastProvider]:
    """Create the main window and establish the toast scope on it.

    The provider must exist before the catalog's first reload runs, which
    happens on the first event-loop turn after construction.
    """
    win = RegistryWindow(store, settings)
    queue = ToastQueue(default_duration_ms=settings.get_int("toast_duration_ms"), parent=win)
    provider = ToastProvider(win, queue)
    provider.establish()
    return win, provider


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lista de presentes do casamento")
    parser.add_argument("--settings", help="Path to the settings JSON file")
    parser.add_argument("--db-url", help="SQLAlchemy URL of the gift store (overrides settings)")
    parser.add_argument("--seed", metavar="FILE", help="Load gifts from a JSON file and exit")
    args, _ = parser.parse_known_args(argv)
    return args


# ===== Part 3: Application Entrypoint =======================================
def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = SettingsManager(args.settings)
    configure_logging(settings.get("log_level"))
    db_url = args.db_url or settings.get("db_url")

    if args.seed:
        store = GiftStore(db_url)
        count = store.seed_from_json(args.seed)
        logger.info("Seeded %d gifts from %s", count, args.seed)
        store.dispose()
        return 0

    app = QApplication(sys.argv)
    try:
        store = GiftStore(db_url)
    except GiftStoreError as exc:
        logger.error("Cannot open gift store: %s", exc)
        QMessageBox.critical(None, "Lista de Presentes", str(exc))
        return 1

    win, provider = build_window(store, settings)

    def _on_quit() -> None:
        provider.teardown()
        store.dispose()
    app.aboutToQuit.connect(_on_quit)

    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
