from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _strip_required(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("campo obrigatório")
    return value


# Catalog ------------------------------------------------------------------

class GiftRead(BaseModel):
    id: int
    name: str
    price: float
    link: Optional[str] = None
    available: bool = True
    is_custom: bool = False
    buyer_name: Optional[str] = None
    buyer_phone: Optional[str] = None
    buyer_message: Optional[str] = None


# Buyer forms --------------------------------------------------------------

class BuyerInfo(BaseModel):
    buyer_name: str
    buyer_phone: str
    buyer_message: str = ""

    @field_validator("buyer_name", "buyer_phone")
    @classmethod
    def _required(cls, value: str) -> str:
        return _strip_required(value)

    @field_validator("buyer_message")
    @classmethod
    def _trim(cls, value: str) -> str:
        return (value or "").strip()


class PurchaseCreate(BuyerInfo):
    gift_id: int


class CustomGiftCreate(BuyerInfo):
    name: str
    price: float = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        return _strip_required(value)
