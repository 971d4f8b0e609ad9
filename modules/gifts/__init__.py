from .repository import GiftStore, GiftStoreError
from .windows import RegistryWindow, get_catalog_panel

__all__ = [
    "GiftStore",
    "GiftStoreError",
    "RegistryWindow",
    "get_catalog_panel",
]
