from textwrap import dedent

from .tokens import (
    CARD_BG,
    CARD_BG_MUTED,
    CARD_RADIUS,
    FG_MUTED,
    FG_ON_ACCENT,
    FG_PRIMARY,
    LINK_BG,
    LINK_FG,
    PRICE_GOLD,
    PRICE_SILVER,
    TIER_GOLD,
    TIER_SILVER,
    TOAST_RADIUS,
    TOAST_SWATCHES,
    WINDOW_BG_BOTTOM,
    WINDOW_BG_TOP,
)


def window_qss() -> str:
    return dedent(f"""
        QWidget#registryRoot {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {WINDOW_BG_TOP}, stop:1 {WINDOW_BG_BOTTOM});
        }}
        QLabel#registryTitle {{
            color: {FG_ON_ACCENT};
            font-size: 32px;
            font-weight: 800;
        }}
        QLabel#registrySubtitle, QLabel#columnTitle, QLabel#loadingLabel {{
            color: {FG_ON_ACCENT};
            font-size: 16px;
            font-weight: 600;
        }}
        QLabel#emptyLabel {{
            color: rgba(255, 255, 255, 0.6);
            padding: 12px;
        }}
    """)


def toast_qss(severity: str) -> str:
    swatch = TOAST_SWATCHES.get(severity, TOAST_SWATCHES["info"])
    return dedent(f"""
        QFrame#toast {{
            background: {swatch.bg};
            border: 1px solid {swatch.border};
            border-radius: {TOAST_RADIUS}px;
        }}
        QLabel#toastMessage {{
            color: {swatch.fg};
            font-weight: 700;
            background: transparent;
            border: none;
        }}
        QToolButton#toastClose {{
            background: transparent;
            border: none;
        }}
    """)


def card_qss(tier: str, available: bool) -> str:
    accent = TIER_GOLD if tier == "gold" else TIER_SILVER
    price = PRICE_GOLD if tier == "gold" else PRICE_SILVER
    bg = CARD_BG if available else CARD_BG_MUTED
    name_fg = FG_PRIMARY if available else FG_MUTED
    return dedent(f"""
        QFrame#giftCard {{
            background: {bg};
            border-left: 6px solid {accent};
            border-radius: {CARD_RADIUS}px;
        }}
        QLabel#giftName {{
            color: {name_fg};
            font-size: 17px;
            font-weight: 600;
        }}
        QLabel#giftPrice {{
            color: {price};
            font-weight: 700;
        }}
        QLabel#purchasedTag {{
            color: {FG_MUTED};
            border: 1px solid #D1D5DB;
            border-radius: 4px;
            padding: 1px 6px;
            font-family: monospace;
            font-weight: 700;
        }}
        QPushButton#storeLink {{
            background: {LINK_BG if available else CARD_BG_MUTED};
            color: {LINK_FG if available else FG_MUTED};
            border-radius: 14px;
            padding: 6px 14px;
            font-weight: 700;
        }}
    """)
