"""WCAG contrast checks for the toast and card palettes."""
from __future__ import annotations

from .tokens import TOAST_SWATCHES


def _channel(value: int) -> float:
    v = value / 255.0
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return 0.2126 * _channel(r) + 0.7152 * _channel(g) + 0.0722 * _channel(b)


def contrast_ratio(fg_hex: str, bg_hex: str) -> float:
    """Return WCAG contrast ratio for two hex colors."""
    l1 = relative_luminance(fg_hex)
    l2 = relative_luminance(bg_hex)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def toast_contrast(severity: str) -> float:
    swatch = TOAST_SWATCHES[severity]
    return contrast_ratio(swatch.fg, swatch.bg)


__all__ = [
    "relative_luminance",
    "contrast_ratio",
    "toast_contrast",
]
