from .gift_models import Base, Gift
from .schemas import BuyerInfo, CustomGiftCreate, GiftRead, PurchaseCreate
from .pricing import PRICE_THRESHOLD, format_money, split_by_tier

__all__ = [
    "Base",
    "Gift",
    "BuyerInfo",
    "CustomGiftCreate",
    "GiftRead",
    "PurchaseCreate",
    "PRICE_THRESHOLD",
    "format_money",
    "split_by_tier",
]
