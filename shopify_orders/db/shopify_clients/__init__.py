"""
Shopify REST client and pagination metadata.
"""

from .base_client import ShopifyRestClient
from .pagination import Pagination, parse_link_header

__all__ = [
    "ShopifyRestClient",
    "Pagination",
    "parse_link_header",
]
