"""OrderBookReader facade over both exchange contracts.

Architecture:
    The reader owns one exchange handle and, optionally, one viewer handle,
    and delegates every read to the paginated readers in ``runtime``. It adds
    two things the readers do not do on their own:
    - head lookup (``block_number``) through the web3 client
    - ``snapshot()``: a second reader whose handles are pinned to one height,
      so several reads observe the same ledger state

Design Decisions:
    - Handle injection: tests pass in-memory handles, ``from_rpc`` builds the
      web3 ones
    - Pinned readers share the parent's client and never close it
    - Context manager pattern ensures the RPC session is released

See Also:
    - iter_open_orders / get_open_orders: viewer protocol
    - get_orders: exchange protocol
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any

from web3 import AsyncWeb3

from ..config import DEFAULT_PAGE_SIZE, DEFAULT_RPC_TIMEOUT, build_web3
from ..contracts import (
    BatchExchangeContract,
    BatchExchangeViewerContract,
    ExchangeHandle,
    ViewerHandle,
    transport_errors,
)
from ..core.exceptions import InvalidArgumentError
from ..core.validation import validate_block_number, validate_page_size
from ..models import IndexedOrder, IndexedPage, Order
from ..runtime import get_open_orders, get_orders, iter_open_orders, with_snapshot

logger = logging.getLogger(__name__)


class OrderBookReader:
    """High-level reader for the exchange order book.

    Example:
        >>> async with OrderBookReader.from_rpc(url, exchange, viewer) as reader:
        ...     pinned = await reader.snapshot()
        ...     orders = await pinned.get_orders()
        ...     open_orders = await pinned.get_open_orders()
    """

    def __init__(
        self,
        exchange: ExchangeHandle,
        viewer: ViewerHandle | None = None,
        *,
        w3: AsyncWeb3 | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        owns_client: bool = False,
    ) -> None:
        """Initialize the reader.

        Args:
            exchange: Exchange contract handle
            viewer: Optional viewer contract handle (needed for open orders)
            w3: Optional web3 client (needed for head lookup)
            page_size: Default page size for every read
            owns_client: Whether close() should disconnect ``w3``
        """
        validate_page_size(page_size)
        self._exchange = exchange
        self._viewer = viewer
        self._w3 = w3
        self._page_size = page_size
        self._owns_client = owns_client
        self._closed = False

    @classmethod
    def from_rpc(
        cls,
        rpc_url: str,
        exchange_address: str,
        viewer_address: str | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = DEFAULT_RPC_TIMEOUT,
    ) -> OrderBookReader:
        """Build a reader talking to a JSON-RPC node over HTTP."""
        w3 = build_web3(rpc_url, timeout=timeout)
        exchange = BatchExchangeContract.from_address(w3, exchange_address)
        viewer = (
            BatchExchangeViewerContract.from_address(w3, viewer_address)
            if viewer_address is not None
            else None
        )
        return cls(exchange, viewer, w3=w3, page_size=page_size, owns_client=True)

    @property
    def exchange(self) -> ExchangeHandle:
        return self._exchange

    @property
    def viewer(self) -> ViewerHandle | None:
        return self._viewer

    def _resolve_page_size(self, page_size: int | None) -> int:
        return self._page_size if page_size is None else page_size

    def _require_viewer(self) -> ViewerHandle:
        if self._viewer is None:
            raise InvalidArgumentError("open order reads need a viewer contract handle")
        return self._viewer

    # --- Reads ---------------------------------------------------------------

    async def get_orders(
        self,
        *,
        page_size: int | None = None,
        block_number: int | None = None,
    ) -> list[Order]:
        """Fetch every order held by the exchange."""
        return await get_orders(self._exchange, self._resolve_page_size(page_size), block_number)

    async def get_open_orders(
        self,
        *,
        page_size: int | None = None,
        block_number: int | None = None,
        token_filter: Sequence[str] = (),
    ) -> list[IndexedOrder]:
        """Fetch every open order from the viewer."""
        return await get_open_orders(
            self._require_viewer(), self._resolve_page_size(page_size), block_number, token_filter
        )

    def iter_open_orders(
        self,
        *,
        page_size: int | None = None,
        block_number: int | None = None,
        token_filter: Sequence[str] = (),
    ) -> AsyncIterator[IndexedPage]:
        """Iterate open orders one page per call."""
        return iter_open_orders(
            self._require_viewer(), self._resolve_page_size(page_size), block_number, token_filter
        )

    # --- Snapshots -----------------------------------------------------------

    async def block_number(self) -> int:
        """Return the current head block number.

        Raises:
            InvalidArgumentError: If the reader has no web3 client
            TransportError: If the node cannot be reached
        """
        if self._w3 is None:
            raise InvalidArgumentError("head lookup needs a web3 client")
        with transport_errors("eth_blockNumber"):
            return int(await self._w3.eth.block_number)

    async def snapshot(self, block_number: int | None = None) -> OrderBookReader:
        """Return a reader whose every call is pinned to one block.

        Args:
            block_number: Height to pin to; defaults to the current head

        Returns:
            New reader sharing this reader's client; this reader is unchanged
        """
        validate_block_number(block_number)
        if block_number is None:
            block_number = await self.block_number()
        logger.debug("Pinning order book reader", extra={"block_number": block_number})
        return OrderBookReader(
            with_snapshot(self._exchange, block_number),
            with_snapshot(self._viewer, block_number) if self._viewer is not None else None,
            w3=self._w3,
            page_size=self._page_size,
            owns_client=False,
        )

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the reader and release the RPC session if owned."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing OrderBookReader")
        if self._owns_client and self._w3 is not None:
            await self._w3.provider.disconnect()

    async def __aenter__(self) -> OrderBookReader:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
