"""
Metafield resource, reached under its owner (``orders/{id}/metafields``).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from shopify_orders.schemas.base import ShopifyModel


class Metafield(ShopifyModel):
    id: Optional[int] = None
    key: Optional[str] = None
    value: Any = None
    # "type" replaced "value_type" in 2021-07; both are kept for older payloads
    type: Optional[str] = None
    value_type: Optional[str] = None
    namespace: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class MetafieldResource(ShopifyModel):
    metafield: Optional[Metafield] = None


class MetafieldsResource(ShopifyModel):
    metafields: List[Metafield] = Field(default_factory=list)
