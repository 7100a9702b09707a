"""
Query string and request body options for order endpoints.

List options are rendered into query parameters with `to_query()`. When a
request carries `page_info` Shopify rejects every filter except `limit` and
`fields`, so continuation options are only ever built from the server's
Link header (see `shopify_orders.db.shopify_clients.pagination`).
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from shopify_orders.schemas.base import ShopifyModel
from shopify_orders.schemas.enums import (
    OrderCancelReason,
    OrderFinancialStatus,
    OrderFulfillmentStatus,
    OrderStatus,
)
from shopify_orders.schemas.order_schemas import Refund


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryOptions(ShopifyModel):
    """Base for options sent as query parameters."""

    def to_query(self) -> Dict[str, str]:
        """Render the set fields as query parameters, skipping None."""
        return {key: _query_value(value) for key, value in self if value is not None}


class ListOptions(QueryOptions):
    """Options shared by every list endpoint."""

    page: Optional[int] = None
    limit: Optional[int] = Field(default=None, ge=1, le=250)
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    page_info: Optional[str] = None


class OrderListOptions(ListOptions):
    status: Optional[OrderStatus] = None
    financial_status: Optional[OrderFinancialStatus] = None
    fulfillment_status: Optional[OrderFulfillmentStatus] = None
    processed_at_min: Optional[datetime] = None
    processed_at_max: Optional[datetime] = None


class OrderCountOptions(QueryOptions):
    page: Optional[int] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    status: Optional[OrderStatus] = None
    financial_status: Optional[OrderFinancialStatus] = None
    fulfillment_status: Optional[OrderFulfillmentStatus] = None


class OrderCancelOptions(ShopifyModel):
    """Body of ``orders/{id}/cancel.json``."""

    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    restock: Optional[bool] = None
    reason: Optional[OrderCancelReason] = None
    email: Optional[bool] = None
    refund: Optional[Refund] = None
