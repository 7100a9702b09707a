"""
Order Service - Shopify REST order resource.

Wraps the generic REST client with the order endpoints:

- ``orders.json`` list (single page, paginated page and full walk)
- ``orders/count.json``
- ``orders/{id}.json`` get/update/delete
- ``orders/{id}/cancel.json``, ``close.json``, ``open.json``

Metafields and fulfillments of an order are reached through
`metafields(order_id)` / `fulfillments(order_id)`, which return services
scoped to that order. The ``*_metafield*`` / ``*_fulfillment*`` methods below
are shortcuts that delegate to them.
"""

import asyncio
import logging
from typing import List, Optional, Tuple

from shopify_orders.core.config import get_settings
from shopify_orders.db.shopify_clients.pagination import Pagination
from shopify_orders.schemas.fulfillment_schemas import Fulfillment
from shopify_orders.schemas.metafield_schemas import Metafield
from shopify_orders.schemas.options import ListOptions, OrderCancelOptions, OrderCountOptions, OrderListOptions
from shopify_orders.schemas.order_schemas import Order, OrderResource, OrdersResource

from .interfaces import IRestClient
from .pagination_walker import walk_pages
from .sub_resources import FulfillmentService, MetafieldService, SubResourcePath

logger = logging.getLogger(__name__)

ORDERS_BASE_PATH = "orders"
ORDERS_RESOURCE_NAME = "orders"


class OrderService:
    """
    Service for the order resource.

    Every method performs exactly one HTTP request except `list_all`, which
    walks the Link header cursor until the last page.
    """

    def __init__(self, client: IRestClient):
        """
        Initialize the order service.

        Args:
            client: Shared REST client (``ShopifyRestClient`` in production)
        """
        self.client = client
        self.settings = get_settings()

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @staticmethod
    def _collection_path() -> str:
        return f"{ORDERS_BASE_PATH}.json"

    @staticmethod
    def _member_path(order_id: int, action: Optional[str] = None) -> str:
        if action:
            return f"{ORDERS_BASE_PATH}/{order_id}/{action}.json"
        return f"{ORDERS_BASE_PATH}/{order_id}.json"

    def _default_list_options(self) -> OrderListOptions:
        return OrderListOptions(limit=self.settings.SHOPIFY_DEFAULT_PAGE_LIMIT)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list(self, options: Optional[ListOptions] = None) -> List[Order]:
        """Fetch a single page of orders and discard the pagination metadata."""
        orders, _ = await self.list_with_pagination(options)
        return orders

    async def list_with_pagination(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[Order], Pagination]:
        """
        Fetch one page of orders.

        Args:
            options: Filters for the first page, or the ``next_page_options``
                of a previous call. Defaults to the configured page limit.

        Returns:
            Tuple of the orders on the page and the continuation metadata

        Raises:
            TransportError: If the request fails
            DecodeError: If the body or the Link header cannot be decoded
        """
        if options is None:
            options = self._default_list_options()

        resource, pagination = await self.client.list_with_pagination(
            self._collection_path(), OrdersResource, options
        )
        return resource.orders, pagination

    async def list_all(
        self,
        options: Optional[ListOptions] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Order]:
        """
        Fetch every order matching ``options`` across all pages.

        Args:
            options: Filters applied to the first page
            cancel_event: Set it to stop the walk before the next page

        Returns:
            All orders in the order the server returned them

        Raises:
            PartialResultsError: If any page fails or the walk is cancelled;
                ``.records`` holds the orders fetched before that point
        """

        async def fetch_page(page_options: Optional[ListOptions]):
            orders, pagination = await self.list_with_pagination(page_options)
            return orders, pagination.next_page_options

        return await walk_pages(
            fetch_page,
            options or self._default_list_options(),
            cancel_event=cancel_event,
            resource_name=ORDERS_RESOURCE_NAME,
        )

    async def count(self, options: Optional[OrderCountOptions] = None) -> int:
        return await self.client.count(f"{ORDERS_BASE_PATH}/count.json", options)

    # ------------------------------------------------------------------
    # Single order
    # ------------------------------------------------------------------

    async def get(self, order_id: int, options: Optional[ListOptions] = None) -> Optional[Order]:
        resource = await self.client.get(self._member_path(order_id), OrderResource, options)
        return resource.order

    async def create(self, order: Order) -> Optional[Order]:
        resource = await self.client.post(self._collection_path(), OrderResource(order=order), OrderResource)
        created = resource.order
        if created is not None:
            logger.info(f"Created order {created.id} ({created.name})")
        return created

    async def update(self, order: Order) -> Optional[Order]:
        if order.id is None:
            raise ValueError("Order id is required for update")

        resource = await self.client.put(self._member_path(order.id), OrderResource(order=order), OrderResource)
        return resource.order

    async def cancel(self, order_id: int, options: Optional[OrderCancelOptions] = None) -> Optional[Order]:
        """
        Cancel an order.

        Args:
            order_id: Order to cancel
            options: Refund/restock/notification settings for the cancellation

        Returns:
            The cancelled order
        """
        resource = await self.client.post(
            self._member_path(order_id, "cancel"), options or OrderCancelOptions(), OrderResource
        )
        logger.info(f"Cancelled order {order_id}")
        return resource.order

    async def close(self, order_id: int) -> Optional[Order]:
        resource = await self.client.post(self._member_path(order_id, "close"), None, OrderResource)
        logger.info(f"Closed order {order_id}")
        return resource.order

    async def open(self, order_id: int) -> Optional[Order]:
        resource = await self.client.post(self._member_path(order_id, "open"), None, OrderResource)
        logger.info(f"Re-opened order {order_id}")
        return resource.order

    async def delete(self, order_id: int) -> None:
        await self.client.delete(self._member_path(order_id))
        logger.info(f"Deleted order {order_id}")

    # ------------------------------------------------------------------
    # Sub-resources
    # ------------------------------------------------------------------

    def metafields(self, order_id: int) -> MetafieldService:
        return MetafieldService(self.client, SubResourcePath(ORDERS_RESOURCE_NAME, order_id, "metafields"))

    def fulfillments(self, order_id: int) -> FulfillmentService:
        return FulfillmentService(self.client, SubResourcePath(ORDERS_RESOURCE_NAME, order_id, "fulfillments"))

    async def list_metafields(self, order_id: int, options=None) -> List[Metafield]:
        return await self.metafields(order_id).list(options)

    async def count_metafields(self, order_id: int, options=None) -> int:
        return await self.metafields(order_id).count(options)

    async def get_metafield(self, order_id: int, metafield_id: int, options=None) -> Optional[Metafield]:
        return await self.metafields(order_id).get(metafield_id, options)

    async def create_metafield(self, order_id: int, metafield: Metafield) -> Optional[Metafield]:
        return await self.metafields(order_id).create(metafield)

    async def update_metafield(self, order_id: int, metafield: Metafield) -> Optional[Metafield]:
        return await self.metafields(order_id).update(metafield)

    async def delete_metafield(self, order_id: int, metafield_id: int) -> None:
        await self.metafields(order_id).delete(metafield_id)

    async def list_fulfillments(self, order_id: int, options=None) -> List[Fulfillment]:
        return await self.fulfillments(order_id).list(options)

    async def count_fulfillments(self, order_id: int, options=None) -> int:
        return await self.fulfillments(order_id).count(options)

    async def get_fulfillment(self, order_id: int, fulfillment_id: int, options=None) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).get(fulfillment_id, options)

    async def create_fulfillment(self, order_id: int, fulfillment: Fulfillment) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).create(fulfillment)

    async def update_fulfillment(self, order_id: int, fulfillment: Fulfillment) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).update(fulfillment)

    async def complete_fulfillment(self, order_id: int, fulfillment_id: int) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).complete(fulfillment_id)

    async def transition_fulfillment(self, order_id: int, fulfillment_id: int) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).transition(fulfillment_id)

    async def cancel_fulfillment(self, order_id: int, fulfillment_id: int) -> Optional[Fulfillment]:
        return await self.fulfillments(order_id).cancel(fulfillment_id)
