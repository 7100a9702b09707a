"""
Async client for the Shopify Admin REST order resource.

Typical use::

    async with ShopifyRestClient() as client:
        orders = await OrderService(client).list_all()
"""

from shopify_orders.db.shopify_clients import Pagination, ShopifyRestClient, parse_link_header
from shopify_orders.services.orders import FulfillmentService, MetafieldService, OrderService, walk_pages
from shopify_orders.utils.error_handler import (
    AppException,
    DecodeError,
    PaginationCancelled,
    PartialResultsError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "AppException",
    "DecodeError",
    "FulfillmentService",
    "MetafieldService",
    "OrderService",
    "Pagination",
    "PaginationCancelled",
    "PartialResultsError",
    "ShopifyRestClient",
    "TransportError",
    "parse_link_header",
    "walk_pages",
]
