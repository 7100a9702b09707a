"""
Line item and shipping line models, the two records with tolerant fields.
"""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, field_validator

from shopify_orders.schemas.base import ShopifyModel
from shopify_orders.schemas.common_schemas import Address, AmountSet, NoteAttribute, TaxLine
from shopify_orders.schemas.enums import LineItemFulfillmentState
from shopify_orders.schemas.tolerant import normalize_properties, normalize_service_id


class AppliedDiscount(ShopifyModel):
    title: Optional[str] = None
    description: Optional[str] = None
    value: Optional[str] = None
    value_type: Optional[str] = None
    amount: Optional[str] = None


class DiscountAllocation(ShopifyModel):
    amount: Optional[Decimal] = None
    discount_application_index: Optional[int] = None
    amount_set: Optional[AmountSet] = None


class LineItem(ShopifyModel):
    """
    Line item of an order.

    `properties` is always a list. Older orders carry ``{}`` or a single
    object instead of an array; see `shopify_orders.schemas.tolerant`.
    """

    id: Optional[int] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None
    title: Optional[str] = None
    variant_title: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    vendor: Optional[str] = None
    gift_card: Optional[bool] = None
    taxable: Optional[bool] = None
    fulfillment_service: Optional[str] = None
    requires_shipping: Optional[bool] = None
    variant_inventory_management: Optional[str] = None
    pre_tax_price: Optional[Decimal] = None
    properties: List[NoteAttribute] = Field(default_factory=list)
    product_exists: Optional[bool] = None
    fulfillable_quantity: Optional[int] = None
    grams: Optional[int] = None
    fulfillment_status: Optional[LineItemFulfillmentState] = None
    tax_lines: Optional[List[TaxLine]] = None
    # Deprecated since 2022-10, still present on old orders
    origin_location: Optional[Address] = None
    destination_location: Optional[Address] = None
    applied_discount: Optional[AppliedDiscount] = None
    discount_allocations: Optional[List[DiscountAllocation]] = None

    @field_validator("properties", mode="before")
    @classmethod
    def _normalize_properties(cls, v: Any) -> List[NoteAttribute]:
        return normalize_properties(v)


class ShippingLine(ShopifyModel):
    """
    Shipping line of an order.

    `requested_fulfillment_service_id` arrives as a string, a number or null
    depending on the order; it is always stored as a string.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[Decimal] = None
    price_set: Optional[AmountSet] = None
    discounted_price: Optional[Decimal] = None
    discounted_price_set: Optional[AmountSet] = None
    code: Optional[str] = None
    source: Optional[str] = None
    phone: Optional[str] = None
    requested_fulfillment_service_id: str = ""
    delivery_category: Optional[str] = None
    carrier_identifier: Optional[str] = None
    tax_lines: Optional[List[TaxLine]] = None
    handle: Optional[str] = None

    @field_validator("requested_fulfillment_service_id", mode="before")
    @classmethod
    def _normalize_service_id(cls, v: Any) -> str:
        return normalize_service_id(v)
