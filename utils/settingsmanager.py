"""JSON-backed application settings.

Values missing from the file fall back to :data:`DEFAULTS`. Two environment
variables take precedence: ``GIFT_REGISTRY_SETTINGS`` points at the settings
file and ``GIFT_REGISTRY_DB_URL`` overrides the store URL.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict


logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "db_url": "sqlite:///data/gifts.db",
    "toast_duration_ms": 3000,
    "refresh_interval_ms": 5000,
    "price_threshold": 200,
    "window_title": "Casamento Jefferson e Érica",
    "pix_key": "",
    "pix_holder": "",
    "pix_bank": "",
    "log_level": "INFO",
}


class SettingsManager:
    def __init__(self, filename: str | os.PathLike[str] | None = None):
        self.filename = Path(filename or os.environ.get("GIFT_REGISTRY_SETTINGS", "settings.json"))
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.filename.exists():
            try:
                with open(self.filename, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError:
                logger.warning("Failed to decode JSON from %s. Resetting settings.", self.filename)
                self.settings = {}
                self.save()
                return
            if not isinstance(loaded, dict):
                logger.warning("Settings file %s does not hold an object. Resetting settings.", self.filename)
                loaded = {}
            self.settings = loaded
        else:
            self.settings = {}
            self.save()

    def save(self) -> None:
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        with open(self.filename, "w", encoding="utf-8") as f:
            json.dump(self.settings, f, indent=4, ensure_ascii=False)

    def get(self, key: str, default: Any = None) -> Any:
        if key == "db_url" and os.environ.get("GIFT_REGISTRY_DB_URL"):
            return os.environ["GIFT_REGISTRY_DB_URL"]
        if key in self.settings:
            return self.settings[key]
        if default is not None:
            return default
        return DEFAULTS.get(key)

    def get_int(self, key: str) -> int:
        value = self.get(key)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Setting %s=%r is not an integer; using %r", key, value, DEFAULTS[key])
            return int(DEFAULTS[key])

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value
        self.save()


__all__ = ["SettingsManager", "DEFAULTS"]
