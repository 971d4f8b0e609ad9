"""Price tiers and currency display for the catalog columns."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from .schemas import GiftRead

PRICE_THRESHOLD = 200


def split_by_tier(
    gifts: Iterable[GiftRead], threshold: float = PRICE_THRESHOLD
) -> Tuple[List[GiftRead], List[GiftRead]]:
    """Return ``(highlights, keepsakes)``: gifts priced at or above
    ``threshold`` and those below it. Input order is kept in both lists.
    """
    highlights: List[GiftRead] = []
    keepsakes: List[GiftRead] = []
    for gift in gifts:
        (highlights if gift.price >= threshold else keepsakes).append(gift)
    return highlights, keepsakes


def format_money(value: float) -> str:
    """Format ``value`` as Brazilian reais, e.g. ``R$ 1.234,50``."""
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    # swap the en-US separators for pt-BR ones
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$\u00a0{grouped}"
