"""
Services for resources nested under an owning record.

Metafields and fulfillments live at ``{resource}/{resource_id}/{collection}``.
Each service is built from the shared client plus a `SubResourcePath`, so the
order service hands out services scoped to one order instead of inheriting
their methods.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from shopify_orders.schemas.fulfillment_schemas import Fulfillment, FulfillmentResource, FulfillmentsResource
from shopify_orders.schemas.metafield_schemas import Metafield, MetafieldResource, MetafieldsResource

from .interfaces import IRestClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubResourcePath:
    """Location of a nested collection, e.g. ``orders/123/metafields``."""

    resource: str
    resource_id: int
    collection: str

    @property
    def prefix(self) -> str:
        return f"{self.resource}/{self.resource_id}/{self.collection}"

    def collection_path(self) -> str:
        return f"{self.prefix}.json"

    def count_path(self) -> str:
        return f"{self.prefix}/count.json"

    def member_path(self, member_id: int, action: Optional[str] = None) -> str:
        if action:
            return f"{self.prefix}/{member_id}/{action}.json"
        return f"{self.prefix}/{member_id}.json"


def _require_id(record_id: Optional[int], kind: str) -> int:
    if record_id is None:
        raise ValueError(f"{kind} id is required for update")
    return record_id


class MetafieldService:
    """Metafields of one owning record."""

    def __init__(self, client: IRestClient, location: SubResourcePath):
        self.client = client
        self.location = location

    async def list(self, options: Any = None) -> List[Metafield]:
        resource = await self.client.get(self.location.collection_path(), MetafieldsResource, options)
        return resource.metafields

    async def count(self, options: Any = None) -> int:
        return await self.client.count(self.location.count_path(), options)

    async def get(self, metafield_id: int, options: Any = None) -> Optional[Metafield]:
        resource = await self.client.get(self.location.member_path(metafield_id), MetafieldResource, options)
        return resource.metafield

    async def create(self, metafield: Metafield) -> Optional[Metafield]:
        resource = await self.client.post(
            self.location.collection_path(), MetafieldResource(metafield=metafield), MetafieldResource
        )
        return resource.metafield

    async def update(self, metafield: Metafield) -> Optional[Metafield]:
        metafield_id = _require_id(metafield.id, "Metafield")
        resource = await self.client.put(
            self.location.member_path(metafield_id), MetafieldResource(metafield=metafield), MetafieldResource
        )
        return resource.metafield

    async def delete(self, metafield_id: int) -> None:
        await self.client.delete(self.location.member_path(metafield_id))
        logger.info(f"Deleted metafield {metafield_id} of {self.location.resource}/{self.location.resource_id}")


class FulfillmentService:
    """Fulfillments of one owning record."""

    def __init__(self, client: IRestClient, location: SubResourcePath):
        self.client = client
        self.location = location

    async def list(self, options: Any = None) -> List[Fulfillment]:
        resource = await self.client.get(self.location.collection_path(), FulfillmentsResource, options)
        return resource.fulfillments

    async def count(self, options: Any = None) -> int:
        return await self.client.count(self.location.count_path(), options)

    async def get(self, fulfillment_id: int, options: Any = None) -> Optional[Fulfillment]:
        resource = await self.client.get(self.location.member_path(fulfillment_id), FulfillmentResource, options)
        return resource.fulfillment

    async def create(self, fulfillment: Fulfillment) -> Optional[Fulfillment]:
        resource = await self.client.post(
            self.location.collection_path(), FulfillmentResource(fulfillment=fulfillment), FulfillmentResource
        )
        return resource.fulfillment

    async def update(self, fulfillment: Fulfillment) -> Optional[Fulfillment]:
        fulfillment_id = _require_id(fulfillment.id, "Fulfillment")
        resource = await self.client.put(
            self.location.member_path(fulfillment_id), FulfillmentResource(fulfillment=fulfillment), FulfillmentResource
        )
        return resource.fulfillment

    async def complete(self, fulfillment_id: int) -> Optional[Fulfillment]:
        return await self._transition(fulfillment_id, "complete")

    async def transition(self, fulfillment_id: int) -> Optional[Fulfillment]:
        """Move a fulfillment back to the open state."""
        return await self._transition(fulfillment_id, "open")

    async def cancel(self, fulfillment_id: int) -> Optional[Fulfillment]:
        return await self._transition(fulfillment_id, "cancel")

    async def _transition(self, fulfillment_id: int, action: str) -> Optional[Fulfillment]:
        resource = await self.client.post(
            self.location.member_path(fulfillment_id, action), None, FulfillmentResource
        )
        logger.info(f"Fulfillment {fulfillment_id} -> {action}")
        return resource.fulfillment
