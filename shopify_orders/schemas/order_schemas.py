"""
Pydantic models for the Shopify REST order resource.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from shopify_orders.schemas.base import ShopifyModel
from shopify_orders.schemas.common_schemas import (
    Address,
    AmountSet,
    Customer,
    NoteAttribute,
    TaxLine,
)
from shopify_orders.schemas.enums import (
    DiscountAllocationMethod,
    DiscountTargetSelection,
    DiscountTargetType,
    DiscountType,
    DiscountValueType,
    OrderAdjustmentType,
    OrderCancelReason,
    OrderFinancialStatus,
    OrderFulfillmentState,
    OrderInventoryBehaviour,
)
from shopify_orders.schemas.fulfillment_schemas import Fulfillment
from shopify_orders.schemas.line_item_schemas import LineItem, ShippingLine
from shopify_orders.schemas.metafield_schemas import Metafield


class DiscountCode(ShopifyModel):
    amount: Optional[Decimal] = None
    code: Optional[str] = None
    type: Optional[str] = None


class DiscountApplication(ShopifyModel):
    allocation_method: Optional[DiscountAllocationMethod] = None
    code: Optional[str] = None
    description: Optional[str] = None
    target_selection: Optional[DiscountTargetSelection] = None
    target_type: Optional[DiscountTargetType] = None
    title: Optional[str] = None
    type: Optional[DiscountType] = None
    value: Optional[Decimal] = None
    value_type: Optional[DiscountValueType] = None


class PaymentDetails(ShopifyModel):
    avs_result_code: Optional[str] = None
    credit_card_bin: Optional[str] = None
    cvv_result_code: Optional[str] = None
    credit_card_number: Optional[str] = None
    credit_card_company: Optional[str] = None


class Transaction(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    amount: Optional[Decimal] = None
    kind: Optional[str] = None
    gateway: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None
    test: Optional[bool] = None
    authorization: Optional[str] = None
    currency: Optional[str] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    parent_id: Optional[int] = None
    device_id: Optional[int] = None
    error_code: Optional[str] = None
    source_name: Optional[str] = None
    source: Optional[str] = None
    payment_details: Optional[PaymentDetails] = None


class ClientDetails(ShopifyModel):
    accept_language: Optional[str] = None
    browser_height: Optional[int] = None
    browser_ip: Optional[str] = None
    browser_width: Optional[int] = None
    session_hash: Optional[str] = None
    user_agent: Optional[str] = None


class OrderAdjustment(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    refund_id: Optional[int] = None
    amount: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    kind: Optional[OrderAdjustmentType] = None
    reason: Optional[str] = None
    amount_set: Optional[AmountSet] = None
    tax_amount_set: Optional[AmountSet] = None


class RefundLineItem(ShopifyModel):
    id: Optional[int] = None
    quantity: Optional[int] = None
    line_item_id: Optional[int] = None
    line_item: Optional[LineItem] = None
    subtotal: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    subtotal_set: Optional[AmountSet] = None
    total_tax_set: Optional[AmountSet] = None


class Refund(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    created_at: Optional[datetime] = None
    note: Optional[str] = None
    restock: Optional[bool] = None
    user_id: Optional[int] = None
    refund_line_items: Optional[List[RefundLineItem]] = None
    transactions: Optional[List[Transaction]] = None
    order_adjustments: Optional[List[OrderAdjustment]] = None


class Order(ShopifyModel):
    """Shopify order as returned by ``orders.json`` and ``orders/{id}.json``."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    customer: Optional[Customer] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    currency: Optional[str] = None
    total_price: Optional[Decimal] = None
    total_price_set: Optional[AmountSet] = None
    total_shipping_price_set: Optional[AmountSet] = None
    current_total_price: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    current_subtotal_price: Optional[Decimal] = None
    total_discounts: Optional[Decimal] = None
    total_discount_set: Optional[AmountSet] = None
    current_total_discounts: Optional[Decimal] = None
    current_total_discounts_set: Optional[AmountSet] = None
    total_line_items_price: Optional[Decimal] = None
    taxes_included: Optional[bool] = None
    total_tax: Optional[Decimal] = None
    total_tax_set: Optional[AmountSet] = None
    current_total_tax: Optional[Decimal] = None
    current_total_tax_set: Optional[AmountSet] = None
    tax_lines: Optional[List[TaxLine]] = None
    total_weight: Optional[int] = None
    financial_status: Optional[OrderFinancialStatus] = None
    fulfillments: Optional[List[Fulfillment]] = None
    fulfillment_status: Optional[OrderFulfillmentState] = None
    token: Optional[str] = None
    cart_token: Optional[str] = None
    number: Optional[int] = None
    order_number: Optional[int] = None
    note: Optional[str] = None
    test: Optional[bool] = None
    browser_ip: Optional[str] = None
    buyer_accepts_marketing: Optional[bool] = None
    cancel_reason: Optional[OrderCancelReason] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    discount_codes: Optional[List[DiscountCode]] = None
    discount_applications: Optional[List[DiscountApplication]] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    transactions: Optional[List[Transaction]] = None
    app_id: Optional[int] = None
    customer_locale: Optional[str] = None
    landing_site: Optional[str] = None
    referring_site: Optional[str] = None
    source_name: Optional[str] = None
    client_details: Optional[ClientDetails] = None
    tags: Optional[str] = None
    location_id: Optional[int] = None
    payment_gateway_names: Optional[List[str]] = None
    processing_method: Optional[str] = None
    refunds: Optional[List[Refund]] = None
    user_id: Optional[int] = None
    order_status_url: Optional[str] = None
    gateway: Optional[str] = None
    confirmed: Optional[bool] = None
    checkout_token: Optional[str] = None
    reference: Optional[str] = None
    source_identifier: Optional[str] = None
    source_url: Optional[str] = None
    device_id: Optional[int] = None
    phone: Optional[str] = None
    landing_site_ref: Optional[str] = None
    checkout_id: Optional[int] = None
    contact_email: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    send_receipt: Optional[bool] = None
    send_fulfillment_receipt: Optional[bool] = None
    presentment_currency: Optional[str] = None
    inventory_behaviour: Optional[OrderInventoryBehaviour] = None


class OrderResource(ShopifyModel):
    """Envelope of ``orders/{id}.json``."""

    order: Optional[Order] = None


class OrdersResource(ShopifyModel):
    """Envelope of ``orders.json``."""

    orders: List[Order] = Field(default_factory=list)

