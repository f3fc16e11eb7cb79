"""web3-backed contract handles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import aiohttp
from eth_utils import to_checksum_address
from web3 import AsyncWeb3
from web3.contract import AsyncContract
from web3.exceptions import Web3Exception

from ..config import MAX_PAGE_SIZE
from ..core.exceptions import InvalidArgumentError, TransportError
from .abi import BATCH_EXCHANGE_ABI, BATCH_EXCHANGE_VIEWER_ABI
from .base import BlockIdentifier, ExchangeHandle, IndexedPageResponse, ViewerHandle


def _check_page_size(page_size: int) -> None:
    if page_size > MAX_PAGE_SIZE:
        raise InvalidArgumentError(f"page_size must be <= {MAX_PAGE_SIZE}, got {page_size}")


@contextmanager
def transport_errors(method: str, block_identifier: BlockIdentifier | None = None) -> Iterator[None]:
    """Re-raise web3 and aiohttp client failures as TransportError."""
    try:
        yield
    except (Web3Exception, aiohttp.ClientError, TimeoutError) as e:
        raise TransportError(
            f"{method} failed at block {block_identifier}: {e}",
            method=method,
            block_identifier=block_identifier,
        ) from e


async def _call(function: Any, method: str, block_identifier: BlockIdentifier) -> Any:
    with transport_errors(method, block_identifier):
        return await function.call(block_identifier=block_identifier)


@dataclass(frozen=True)
class BatchExchangeContract(ExchangeHandle):
    """Exchange contract bound through an ``AsyncContract``."""

    contract: AsyncContract

    @classmethod
    def from_address(cls, w3: AsyncWeb3, address: str) -> BatchExchangeContract:
        return cls(contract=w3.eth.contract(address=to_checksum_address(address), abi=BATCH_EXCHANGE_ABI))

    async def get_encoded_users_paginated(
        self,
        previous_page_user: str,
        previous_page_user_offset: int,
        page_size: int,
    ) -> bytes:
        _check_page_size(page_size)
        function = self.contract.functions.getEncodedUsersPaginated(
            to_checksum_address(previous_page_user),
            previous_page_user_offset,
            page_size,
        )
        return bytes(await _call(function, "getEncodedUsersPaginated", self.block_identifier))


@dataclass(frozen=True)
class BatchExchangeViewerContract(ViewerHandle):
    """Viewer contract bound through an ``AsyncContract``."""

    contract: AsyncContract

    @classmethod
    def from_address(cls, w3: AsyncWeb3, address: str) -> BatchExchangeViewerContract:
        return cls(
            contract=w3.eth.contract(address=to_checksum_address(address), abi=BATCH_EXCHANGE_VIEWER_ABI)
        )

    async def get_open_order_book_paginated(
        self,
        previous_page_user: str,
        previous_page_user_offset: int,
        page_size: int,
        token_filter: Sequence[str] = (),
    ) -> IndexedPageResponse:
        _check_page_size(page_size)
        function = self.contract.functions.getOpenOrderBookPaginated(
            [to_checksum_address(token) for token in token_filter],
            to_checksum_address(previous_page_user),
            previous_page_user_offset,
            page_size,
        )
        elements, has_next_page, next_page_user, next_page_user_offset = await _call(
            function, "getOpenOrderBookPaginated", self.block_identifier
        )
        return IndexedPageResponse(
            elements=bytes(elements),
            has_next_page=bool(has_next_page),
            next_page_user=next_page_user,
            next_page_user_offset=int(next_page_user_offset),
        )
