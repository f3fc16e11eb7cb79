"""Structured logging for paginated reads.

This module provides telemetry hooks for order book traversals, emitting
structured log records with a fixed event name and an ``extra`` payload.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    protocol: str,
    page_index: int,
    cursor_user: str,
    cursor_offset: int,
    rows: int,
    block_identifier: int | str,
    latency_ms: float | None = None,
) -> None:
    """Log a single decoded page.

    Args:
        protocol: "indexed" or "offset"
        page_index: Zero-based index of the page within the traversal
        cursor_user: User the page was requested from
        cursor_offset: Offset within that user the page was requested from
        rows: Number of orders decoded from the page
        block_identifier: Block the call was issued at
        latency_ms: Round trip latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "protocol": protocol,
            "page_index": page_index,
            "cursor_user": cursor_user,
            "cursor_offset": cursor_offset,
            "rows": rows,
            "block_identifier": block_identifier,
            "latency_ms": latency_ms,
        },
    )


def log_traversal_complete(
    *,
    protocol: str,
    pages_fetched: int,
    total_orders: int,
    block_identifier: int | str,
) -> None:
    """Log the end of a traversal."""
    logger.info(
        "traversal_complete",
        extra={
            "protocol": protocol,
            "pages_fetched": pages_fetched,
            "total_orders": total_orders,
            "block_identifier": block_identifier,
        },
    )


def log_page_error(
    *,
    protocol: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch or decode.

    Args:
        protocol: "indexed" or "offset"
        page_index: Zero-based index of the page that failed
        error_type: Exception class name (e.g. "TransportError", "DecodingError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "protocol": protocol,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
