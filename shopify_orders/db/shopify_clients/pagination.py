"""
Cursor pagination metadata for Shopify REST list endpoints.

Shopify returns continuation cursors in the ``Link`` response header:

    <https://shop.myshopify.com/admin/api/2024-01/orders.json?limit=50&page_info=abc>; rel="next",
    <https://shop.myshopify.com/admin/api/2024-01/orders.json?limit=50&page_info=xyz>; rel="previous"

The cursor (``page_info``) is opaque. It is copied verbatim into the options
for the next request and never built locally.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlparse

from shopify_orders.schemas.options import ListOptions
from shopify_orders.utils.error_handler import DecodeError, ErrorCode

logger = logging.getLogger(__name__)

_LINK_PATTERN = re.compile(r'<(?P<url>[^>]*)>\s*;\s*rel="?(?P<rel>[a-z]+)"?')


@dataclass(frozen=True)
class Pagination:
    """Continuation options extracted from one list response."""

    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None

    @property
    def has_next_page(self) -> bool:
        return self.next_page_options is not None


def _options_from_url(url: str, rel: str) -> ListOptions:
    params = parse_qs(urlparse(url).query)

    page_info = params.get("page_info", [""])[0]
    if not page_info:
        raise DecodeError(
            f"Pagination link rel={rel} has no page_info: {url}",
            model="Link",
            error_code=ErrorCode.INVALID_PAGINATION_LINK,
        )

    fields = params.get("fields", [None])[0]

    # pydantic's ValidationError is a ValueError, so an out of range limit lands here too
    try:
        limit = int(params["limit"][0]) if "limit" in params else None
        return ListOptions(page_info=page_info, limit=limit, fields=fields)
    except ValueError as e:
        raise DecodeError(
            f"Pagination link rel={rel} has invalid limit: {url}",
            model="Link",
            error_code=ErrorCode.INVALID_PAGINATION_LINK,
        ) from e


def parse_link_header(link_header: Optional[str]) -> Pagination:
    """
    Parse a ``Link`` header into continuation options.

    Args:
        link_header: Raw header value, or None when the response had none

    Returns:
        Pagination: Options for the next/previous pages; both None on the
        only page of a collection

    Raises:
        DecodeError: If a next/previous link carries no usable cursor
    """
    if not link_header:
        return Pagination()

    next_options = None
    previous_options = None

    for match in _LINK_PATTERN.finditer(link_header):
        rel = match.group("rel")
        if rel == "next":
            next_options = _options_from_url(match.group("url"), rel)
        elif rel == "previous":
            previous_options = _options_from_url(match.group("url"), rel)
        else:
            logger.debug(f"Ignoring pagination link with rel={rel}")

    return Pagination(next_page_options=next_options, previous_page_options=previous_options)
