"""Open order book reader (viewer contract, explicit continuation).

The viewer reports ``has_next_page`` and the exact cursor for the next call
with every page, so the reader never infers continuation itself: it issues a
call, yields the decoded page, and resumes from the reported cursor until the
viewer says there is nothing left.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from time import perf_counter

from ..contracts.base import ViewerHandle
from ..core.validation import validate_page_size
from ..encoding import decode_indexed_orders
from ..models import Cursor, IndexedOrder, IndexedPage
from .aggregate import collect_pages
from .snapshot import with_snapshot
from .telemetry import log_page_error, log_page_fetched, log_traversal_complete

PROTOCOL = "indexed"


def iter_open_orders(
    viewer: ViewerHandle,
    page_size: int,
    block_number: int | None = None,
    token_filter: Sequence[str] = (),
) -> AsyncIterator[IndexedPage]:
    """Iterate the open order book one page per remote call.

    Arguments are validated here, before the iterator is returned, so a bad
    page size never reaches the contract.

    Args:
        viewer: Viewer contract handle
        page_size: Maximum number of orders per call (positive)
        block_number: Block height to read at; None reads "latest" per call
        token_filter: Only include orders trading these tokens (empty = all)

    Returns:
        Async iterator of IndexedPage, finite and not restartable

    Raises:
        InvalidArgumentError: If page_size or block_number is invalid
    """
    validate_page_size(page_size)
    pinned = with_snapshot(viewer, block_number)
    return _paginate(pinned, page_size, tuple(token_filter))


async def _paginate(
    viewer: ViewerHandle,
    page_size: int,
    token_filter: tuple[str, ...],
) -> AsyncIterator[IndexedPage]:
    cursor = Cursor()
    has_next_page = True
    page_index = 0
    total_orders = 0

    while has_next_page:
        started = perf_counter()
        try:
            response = await viewer.get_open_order_book_paginated(
                cursor.user, cursor.offset, page_size, token_filter
            )
            page = IndexedPage(
                elements=tuple(decode_indexed_orders(response.elements)),
                has_next_page=response.has_next_page,
                next_page_user=response.next_page_user,
                next_page_user_offset=response.next_page_user_offset,
            )
        except Exception as e:
            log_page_error(
                protocol=PROTOCOL,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_fetched(
            protocol=PROTOCOL,
            page_index=page_index,
            cursor_user=cursor.user,
            cursor_offset=cursor.offset,
            rows=len(page),
            block_identifier=viewer.block_identifier,
            latency_ms=(perf_counter() - started) * 1000.0,
        )
        yield page

        page_index += 1
        total_orders += len(page)
        has_next_page = page.has_next_page
        cursor = Cursor(user=page.next_page_user, offset=page.next_page_user_offset)

    log_traversal_complete(
        protocol=PROTOCOL,
        pages_fetched=page_index,
        total_orders=total_orders,
        block_identifier=viewer.block_identifier,
    )


async def get_open_orders(
    viewer: ViewerHandle,
    page_size: int,
    block_number: int | None = None,
    token_filter: Sequence[str] = (),
) -> list[IndexedOrder]:
    """Fetch every open order, concatenated in page order."""
    return await collect_pages(iter_open_orders(viewer, page_size, block_number, token_filter))
