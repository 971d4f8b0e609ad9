from __future__ import annotations

import json
from pathlib import Path

import pytest

import main
from modules.gifts.repository import GiftStore
from notifications.services.provider import use_toast
from utils.settingsmanager import SettingsManager


def test_build_window_establishes_toast_scope(qt_app, tmp_path: Path) -> None:
    settings = SettingsManager(tmp_path / "settings.json")
    settings.set("toast_duration_ms", 1500)
    settings.set("refresh_interval_ms", 0)
    store = GiftStore(f"sqlite:///{tmp_path / 'gifts.db'}")
    win, provider = main.build_window(store, settings)
    try:
        queue = use_toast(win.catalog)
        assert queue is use_toast()
        assert queue.default_duration_ms == 1500
        assert win.windowTitle() == "Casamento Jefferson e Érica"
        win.catalog.reload()
        assert win.catalog.loaded
    finally:
        provider.teardown()
        store.dispose()


def test_seed_command(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps([{"name": "Air fryer", "price": 400}]), encoding="utf-8")
    db_url = f"sqlite:///{tmp_path / 'gifts.db'}"
    assert main.main(["--settings", str(tmp_path / "s.json"), "--db-url", db_url, "--seed", str(seed)]) == 0
    store = GiftStore(db_url)
    assert [g.name for g in store.list_gifts()] == ["Air fryer"]
    store.dispose()
