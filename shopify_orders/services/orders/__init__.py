"""
Order services package.

Contains the order resource service, the services for metafields and
fulfillments nested under an order, and the generic page walker used to
enumerate paginated collections.
"""

from .order_service import OrderService
from .pagination_walker import walk_pages
from .sub_resources import FulfillmentService, MetafieldService, SubResourcePath

__all__ = [
    "FulfillmentService",
    "MetafieldService",
    "OrderService",
    "SubResourcePath",
    "walk_pages",
]
