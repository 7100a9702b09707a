"""
Base Shopify REST client shared by every resource service.

This module owns the HTTP session, builds Admin API URLs, forwards the
generic verbs (GET, POST, PUT, DELETE, count and paginated list) and decodes
response bodies into pydantic resource models. It performs no retries and
no throttling: each call is exactly one HTTP request.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union

import aiohttp
from aiohttp import ClientTimeout
from pydantic import BaseModel

from shopify_orders.core.config import get_settings
from shopify_orders.core.logging_config import log_api_call
from shopify_orders.schemas.base import ShopifyModel, decode_record
from shopify_orders.schemas.count_schemas import CountResource
from shopify_orders.schemas.options import QueryOptions
from shopify_orders.utils.error_handler import TransportError

from .pagination import Pagination, parse_link_header

logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT", bound=BaseModel)
Options = Union[QueryOptions, Mapping[str, Any], None]
Body = Union[ShopifyModel, Mapping[str, Any], None]


class ShopifyRestClient:
    """
    Client for the Shopify Admin REST API.

    Resource services (orders, metafields, fulfillments) call the verb
    methods with a path relative to ``/admin/api/{version}/`` and the model
    the response body should be decoded into.
    """

    def __init__(
        self,
        shop_url: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the client.

        Args:
            shop_url: Shop domain, defaults to SHOPIFY_SHOP_URL
            access_token: Admin API token, defaults to SHOPIFY_ACCESS_TOKEN
            api_version: API version, defaults to SHOPIFY_API_VERSION
            session: Existing session to borrow instead of creating one
        """
        self.settings = get_settings()
        self.shop_url = shop_url or self.settings.SHOPIFY_SHOP_URL
        self.access_token = access_token or self.settings.SHOPIFY_ACCESS_TOKEN
        self.api_version = api_version or self.settings.SHOPIFY_API_VERSION

        if not self.shop_url.startswith(("http://", "https://")):
            self.shop_url = f"https://{self.shop_url}"
        self.shop_url = self.shop_url.rstrip("/")

        self.base_url = f"{self.shop_url}/admin/api/{self.api_version}"

        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

        logger.info(f"Initialized Shopify REST client for {self.shop_url}")

    async def initialize(self):
        """Create the HTTP session if none was provided."""
        if self.session is not None:
            return

        timeout = ClientTimeout(
            total=self.settings.SHOPIFY_REQUEST_TIMEOUT,
            connect=self.settings.SHOPIFY_CONNECT_TIMEOUT,
        )
        self.session = aiohttp.ClientSession(
            timeout=timeout,
            headers={
                **self.settings.get_shopify_headers(),
                "X-Shopify-Access-Token": self.access_token,
            },
        )
        self._owns_session = True
        logger.info("Shopify REST client session opened")

    async def close(self):
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session:
            await self.session.close()
            logger.info("Shopify REST client closed")
        self.session = None

    async def __aenter__(self) -> "ShopifyRestClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _to_params(options: Options) -> Optional[Dict[str, str]]:
        if options is None:
            return None
        if isinstance(options, QueryOptions):
            return options.to_query()
        return {key: str(value) for key, value in options.items() if value is not None}

    @staticmethod
    def _to_body(data: Body) -> Optional[Dict[str, Any]]:
        if data is None:
            return None
        if isinstance(data, ShopifyModel):
            return data.to_payload()
        return {
            key: value.to_payload() if isinstance(value, ShopifyModel) else value for key, value in data.items()
        }

    async def _request(
        self,
        method: str,
        path: str,
        options: Options = None,
        data: Body = None,
    ) -> Tuple[bytes, Mapping[str, str]]:
        """
        Perform one HTTP request.

        Args:
            method: HTTP verb
            path: Path relative to the API base URL
            options: Query parameters
            data: JSON body

        Returns:
            Tuple of raw response body and response headers

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        if not self.session:
            raise TransportError("Client not initialized. Call initialize() first.", endpoint=path)

        url = self.build_url(path)
        started = time.monotonic()

        try:
            async with self.session.request(
                method, url, params=self._to_params(options), json=self._to_body(data)
            ) as response:
                raw = await response.read()
                log_api_call(method, url, response.status, time.monotonic() - started)

                if not 200 <= response.status < 300:
                    body_text = raw.decode("utf-8", errors="replace")
                    raise TransportError(
                        f"HTTP {response.status} on {method} {path}: {body_text[:500]}",
                        api_response_code=response.status,
                        endpoint=path,
                        response_body=body_text,
                    )

                return raw, response.headers

        except aiohttp.ClientError as e:
            logger.error(f"Network error on {method} {path}: {e}")
            raise TransportError(f"Network error: {str(e)}", endpoint=path) from e
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout on {method} {path}")
            raise TransportError(f"Request timed out: {method} {path}", endpoint=path) from e

    async def get(self, path: str, resource_model: Type[ResourceT], options: Options = None) -> ResourceT:
        raw, _ = await self._request("GET", path, options=options)
        return decode_record(resource_model, raw)

    async def list_with_pagination(
        self, path: str, resource_model: Type[ResourceT], options: Options = None
    ) -> Tuple[ResourceT, Pagination]:
        """
        Fetch one page of a list endpoint.

        Args:
            path: List endpoint path (e.g. ``orders.json``)
            resource_model: Envelope model for the page body
            options: Filters for the first page, or continuation options

        Returns:
            Tuple of the decoded page and its continuation metadata
        """
        raw, headers = await self._request("GET", path, options=options)
        resource = decode_record(resource_model, raw)
        pagination = parse_link_header(headers.get("Link"))
        return resource, pagination

    async def count(self, path: str, options: Options = None) -> int:
        raw, _ = await self._request("GET", path, options=options)
        return decode_record(CountResource, raw).count

    async def post(self, path: str, data: Body, resource_model: Optional[Type[ResourceT]] = None) -> Optional[ResourceT]:
        raw, _ = await self._request("POST", path, data=data)
        if resource_model is None:
            return None
        return decode_record(resource_model, raw)

    async def put(self, path: str, data: Body, resource_model: Optional[Type[ResourceT]] = None) -> Optional[ResourceT]:
        raw, _ = await self._request("PUT", path, data=data)
        if resource_model is None:
            return None
        return decode_record(resource_model, raw)

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)

    def __str__(self):
        return f"ShopifyRestClient(shop={self.shop_url}, api_version={self.api_version})"

    def __repr__(self):
        return (
            f"ShopifyRestClient("
            f"shop_url='{self.shop_url}', "
            f"api_version='{self.api_version}', "
            f"initialized={self.session is not None})"
        )
