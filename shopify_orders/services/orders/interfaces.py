"""
Interfaces/Protocols for the collaborators order services depend on.

The order service only needs the verb methods below; tests pass an
``AsyncMock`` and production code passes a ``ShopifyRestClient``.
"""

from typing import Any, Optional, Protocol, Tuple, Type, TypeVar

from shopify_orders.db.shopify_clients.pagination import Pagination

ResourceT = TypeVar("ResourceT")


class IPaginatedFetcher(Protocol):
    """Fetches one page of a list endpoint plus its continuation metadata."""

    async def list_with_pagination(
        self, path: str, resource_model: Type[ResourceT], options: Any = None
    ) -> Tuple[ResourceT, Pagination]:
        """Return the decoded page and the options for the next page, if any."""
        ...


class IRestClient(IPaginatedFetcher, Protocol):
    """Generic REST verbs shared by every resource."""

    async def get(self, path: str, resource_model: Type[ResourceT], options: Any = None) -> ResourceT:
        ...

    async def count(self, path: str, options: Any = None) -> int:
        ...

    async def post(self, path: str, data: Any, resource_model: Optional[Type[ResourceT]] = None) -> Optional[ResourceT]:
        ...

    async def put(self, path: str, data: Any, resource_model: Optional[Type[ResourceT]] = None) -> Optional[ResourceT]:
        ...

    async def delete(self, path: str) -> None:
        ...
