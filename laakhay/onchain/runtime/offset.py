"""Full order book reader (exchange contract, inferred continuation).

The exchange returns a bare run of packed orders per call. The reader keeps
its own cursor, the offset within the most recently seen user, and stops at
the first page shorter than ``page_size``. When the total is an exact
multiple of ``page_size`` this costs one trailing call returning no orders;
the contract exposes no total count to avoid it.
"""

from __future__ import annotations

from time import perf_counter

from ..contracts.base import ExchangeHandle
from ..core.validation import validate_page_size
from ..encoding import decode_orders
from ..models import Cursor, Order
from .snapshot import with_snapshot
from .telemetry import log_page_error, log_page_fetched, log_traversal_complete

PROTOCOL = "offset"


async def get_orders(
    exchange: ExchangeHandle,
    page_size: int,
    block_number: int | None = None,
) -> list[Order]:
    """Fetch every order held by the exchange.

    Args:
        exchange: Exchange contract handle
        page_size: Maximum number of orders per call (positive)
        block_number: Block height to read at; None reads "latest" per call

    Returns:
        All orders in contract order

    Raises:
        InvalidArgumentError: If page_size or block_number is invalid
        TransportError: If a call fails (no further calls are issued)
        DecodingError: If a page payload is malformed
    """
    validate_page_size(page_size)
    exchange = with_snapshot(exchange, block_number)

    orders: list[Order] = []
    cursor = Cursor()
    last_page_length = page_size
    page_index = 0

    while last_page_length == page_size:
        started = perf_counter()
        try:
            raw = await exchange.get_encoded_users_paginated(cursor.user, cursor.offset, page_size)
            page = decode_orders(raw)
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
            block_identifier=exchange.block_identifier,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        orders.extend(page)
        cursor = cursor.advance(page)
        last_page_length = len(page)
        page_index += 1

    log_traversal_complete(
        protocol=PROTOCOL,
        pages_fetched=page_index,
        total_orders=len(orders),
        block_identifier=exchange.block_identifier,
    )
    return orders
