"""
Value shapes shared by orders, line items, shipping lines and fulfillments.
"""

from decimal import Decimal
from typing import Any, Optional

from shopify_orders.schemas.base import ShopifyModel


class NoteAttribute(ShopifyModel):
    """Name/value pair used for order note attributes and line item properties."""

    name: str = ""
    value: Any = None

    def is_empty(self) -> bool:
        return self.name == "" and self.value is None


class Address(ShopifyModel):
    id: Optional[int] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    zip: Optional[str] = None


class AmountSetEntry(ShopifyModel):
    amount: Optional[Decimal] = None
    currency_code: Optional[str] = None


class AmountSet(ShopifyModel):
    """Amount expressed in shop and presentment currencies."""

    shop_money: Optional[AmountSetEntry] = None
    presentment_money: Optional[AmountSetEntry] = None


class TaxLine(ShopifyModel):
    title: Optional[str] = None
    price: Optional[Decimal] = None
    rate: Optional[Decimal] = None


class Customer(ShopifyModel):
    """Subset of the customer resource embedded in orders."""

    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    tags: Optional[str] = None
    accepts_marketing: Optional[bool] = None
    default_address: Optional[Address] = None
