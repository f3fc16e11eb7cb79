"""Laakhay Onchain - paginated order book reads from batch exchange contracts."""

from .api import OrderBookReader
from .contracts import (
    BatchExchangeContract,
    BatchExchangeViewerContract,
    ContractHandle,
    ExchangeHandle,
    IndexedPageResponse,
    ViewerHandle,
)
from .core import DecodingError, InvalidArgumentError, OnchainError, TransportError
from .encoding import decode_indexed_orders, decode_orders, encode_order
from .models import Cursor, IndexedOrder, IndexedPage, Order
from .runtime import collect_pages, get_open_orders, get_orders, iter_open_orders, with_snapshot

__version__ = "0.1.0"

__all__ = [
    # API
    "OrderBookReader",
    # Readers
    "iter_open_orders",
    "get_open_orders",
    "get_orders",
    "collect_pages",
    "with_snapshot",
    # Contracts
    "ContractHandle",
    "ExchangeHandle",
    "ViewerHandle",
    "IndexedPageResponse",
    "BatchExchangeContract",
    "BatchExchangeViewerContract",
    # Encoding
    "decode_orders",
    "decode_indexed_orders",
    "encode_order",
    # Models
    "Order",
    "IndexedOrder",
    "IndexedPage",
    "Cursor",
    # Exceptions
    "OnchainError",
    "InvalidArgumentError",
    "TransportError",
    "DecodingError",
]
