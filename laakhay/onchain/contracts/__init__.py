"""Contract handles for the exchange and its viewer."""

from .abi import BATCH_EXCHANGE_ABI, BATCH_EXCHANGE_VIEWER_ABI
from .base import (
    BlockIdentifier,
    ContractHandle,
    ExchangeHandle,
    IndexedPageResponse,
    ViewerHandle,
)
from .exchange import BatchExchangeContract, BatchExchangeViewerContract, transport_errors

__all__ = [
    "BATCH_EXCHANGE_ABI",
    "BATCH_EXCHANGE_VIEWER_ABI",
    "BlockIdentifier",
    "ContractHandle",
    "ExchangeHandle",
    "ViewerHandle",
    "IndexedPageResponse",
    "BatchExchangeContract",
    "BatchExchangeViewerContract",
    "transport_errors",
]
