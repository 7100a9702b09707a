"""
Full enumeration of a cursor-paginated collection.

The walker knows nothing about HTTP or Shopify: it calls ``fetch_page`` with
the current options, collects the records and continues with the options the
previous page returned, until a page returns none. Pages are fetched one
after another because each request depends on the previous response.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Tuple, TypeVar

from shopify_orders.utils.error_handler import PaginationCancelled, PartialResultsError, log_error

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")
OptionsT = TypeVar("OptionsT")

FetchPage = Callable[[Optional[OptionsT]], Awaitable[Tuple[List[RecordT], Optional[OptionsT]]]]


async def walk_pages(
    fetch_page: FetchPage,
    options: Optional[OptionsT] = None,
    cancel_event: Optional[asyncio.Event] = None,
    resource_name: str = "records",
) -> List[RecordT]:
    """
    Fetch every page of a collection and return all records in page order.

    There is no page ceiling: iteration ends only when a page comes back
    without continuation options. Records are not sorted or deduplicated.

    Args:
        fetch_page: Coroutine returning ``(records, next_options)`` for one page
        options: Options for the first page
        cancel_event: Checked before each page; once set the walk stops
        resource_name: Name used in log messages

    Returns:
        List of records from all pages

    Raises:
        PartialResultsError: If a page fails or the walk is cancelled. Carries
            the records collected so far and the original error.
    """
    collected: List[RecordT] = []
    pages_fetched = 0

    while True:
        if cancel_event is not None and cancel_event.is_set():
            logger.warning(f"Listing {resource_name} cancelled after {pages_fetched} pages ({len(collected)} records)")
            raise PartialResultsError(collected, PaginationCancelled(), pages_fetched)

        try:
            records, next_options = await fetch_page(options)
        except Exception as e:
            log_error(
                e,
                context={"resource": resource_name, "page": pages_fetched + 1, "records_collected": len(collected)},
            )
            raise PartialResultsError(collected, e, pages_fetched) from e

        collected.extend(records)
        pages_fetched += 1
        logger.debug(f"Fetched page {pages_fetched}: {len(records)} {resource_name} (total: {len(collected)})")

        if next_options is None:
            break

        options = next_options

    logger.info(f"Listed {len(collected)} {resource_name} across {pages_fetched} pages")
    return collected
