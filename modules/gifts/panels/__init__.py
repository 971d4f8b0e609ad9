from .catalog_panel import CatalogPanel, GiftColumn
from .custom_gift_dialog import CustomGiftDialog
from .gift_card import GiftCard
from .payment_panel import PaymentPanel
from .purchase_dialog import PurchaseDialog

__all__ = [
    "CatalogPanel",
    "GiftColumn",
    "CustomGiftDialog",
    "GiftCard",
    "PaymentPanel",
    "PurchaseDialog",
]
