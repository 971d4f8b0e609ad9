"""Design tokens for the registry window and its toasts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ToastSwatch:
    """Foreground/background/border triple for one toast severity."""

    fg: str
    bg: str
    border: str
    icon: str


# Toast severities ---------------------------------------------------------
TOAST_SWATCHES: Dict[str, ToastSwatch] = {
    "success": ToastSwatch(fg="#166534", bg="#DCFCE7", border="#BBF7D0", icon="#22C55E"),
    "error": ToastSwatch(fg="#991B1B", bg="#FEE2E2", border="#FECACA", icon="#EF4444"),
    "info": ToastSwatch(fg="#3730A3", bg="#E0E7FF", border="#C7D2FE", icon="#6366F1"),
}
TOAST_WIDTH = 360
TOAST_SPACING = 12
TOAST_MARGIN = 24
# Entry/exit fade; matches the exit grace interval
TOAST_FADE_MS = 300

# Gift tiers ---------------------------------------------------------------
TIER_GOLD = "#FBBF24"
TIER_SILVER = "#CBD5E1"
PRICE_GOLD = "#D97706"
PRICE_SILVER = "#475569"

# Surfaces -----------------------------------------------------------------
WINDOW_BG_TOP = "#6366F1"
WINDOW_BG_BOTTOM = "#EC4899"
CARD_BG = "#FFFFFF"
CARD_BG_MUTED = "#F3F4F6"
FG_PRIMARY = "#1F2937"
FG_MUTED = "#6B7280"
FG_ON_ACCENT = "#FFFFFF"
LINK_BG = "#EFF6FF"
LINK_FG = "#2563EB"

# Layout helpers -----------------------------------------------------------
ICON_SIZE_SM = 16
ICON_SIZE_MD = 24
DEFAULT_PADDING = 16
SECTION_SPACING = 24
CARD_RADIUS = 16
TOAST_RADIUS = 12


__all__ = [
    "ToastSwatch",
    "TOAST_SWATCHES",
    "TOAST_WIDTH",
    "TOAST_SPACING",
    "TOAST_MARGIN",
    "TOAST_FADE_MS",
    "TIER_GOLD",
    "TIER_SILVER",
    "PRICE_GOLD",
    "PRICE_SILVER",
    "WINDOW_BG_TOP",
    "WINDOW_BG_BOTTOM",
    "CARD_BG",
    "CARD_BG_MUTED",
    "FG_PRIMARY",
    "FG_MUTED",
    "FG_ON_ACCENT",
    "LINK_BG",
    "LINK_FG",
    "ICON_SIZE_SM",
    "ICON_SIZE_MD",
    "DEFAULT_PADDING",
    "SECTION_SPACING",
    "CARD_RADIUS",
    "TOAST_RADIUS",
]
