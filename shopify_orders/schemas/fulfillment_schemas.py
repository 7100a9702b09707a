"""
Fulfillment resource, reached under its order (``orders/{id}/fulfillments``).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from shopify_orders.schemas.base import ShopifyModel
from shopify_orders.schemas.line_item_schemas import LineItem


class Fulfillment(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    service: Optional[str] = None
    tracking_company: Optional[str] = None
    shipment_status: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_numbers: Optional[List[str]] = None
    tracking_url: Optional[str] = None
    tracking_urls: Optional[List[str]] = None
    receipt: Optional[dict] = None
    line_items: Optional[List[LineItem]] = None
    notify_customer: Optional[bool] = None


class FulfillmentResource(ShopifyModel):
    fulfillment: Optional[Fulfillment] = None


class FulfillmentsResource(ShopifyModel):
    fulfillments: List[Fulfillment] = Field(default_factory=list)
