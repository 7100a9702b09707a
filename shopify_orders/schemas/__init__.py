"""
Pydantic schemas for the Shopify REST order resource and its sub-resources.
"""

from .base import ShopifyModel, decode_record
from .common_schemas import Address, AmountSet, AmountSetEntry, Customer, NoteAttribute, TaxLine
from .count_schemas import CountResource
from .enums import (
    DiscountAllocationMethod,
    DiscountTargetSelection,
    DiscountTargetType,
    DiscountType,
    DiscountValueType,
    LineItemFulfillmentState,
    OrderAdjustmentType,
    OrderCancelReason,
    OrderFinancialStatus,
    OrderFulfillmentState,
    OrderFulfillmentStatus,
    OrderInventoryBehaviour,
    OrderStatus,
)
from .fulfillment_schemas import Fulfillment, FulfillmentResource, FulfillmentsResource
from .line_item_schemas import LineItem, ShippingLine
from .metafield_schemas import Metafield, MetafieldResource, MetafieldsResource
from .options import ListOptions, OrderCancelOptions, OrderCountOptions, OrderListOptions, QueryOptions
from .order_schemas import Order, OrderResource, OrdersResource, Refund, Transaction

__all__ = [
    "Address",
    "AmountSet",
    "AmountSetEntry",
    "CountResource",
    "Customer",
    "DiscountAllocationMethod",
    "DiscountTargetSelection",
    "DiscountTargetType",
    "DiscountType",
    "DiscountValueType",
    "Fulfillment",
    "FulfillmentResource",
    "FulfillmentsResource",
    "LineItem",
    "LineItemFulfillmentState",
    "ListOptions",
    "Metafield",
    "MetafieldResource",
    "MetafieldsResource",
    "NoteAttribute",
    "Order",
    "OrderAdjustmentType",
    "OrderCancelOptions",
    "OrderCancelReason",
    "OrderCountOptions",
    "OrderFinancialStatus",
    "OrderFulfillmentState",
    "OrderFulfillmentStatus",
    "OrderInventoryBehaviour",
    "OrderListOptions",
    "OrderResource",
    "OrdersResource",
    "OrderStatus",
    "QueryOptions",
    "Refund",
    "ShippingLine",
    "ShopifyModel",
    "TaxLine",
    "Transaction",
    "decode_record",
]
