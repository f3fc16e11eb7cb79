"""Contract handle interfaces.

Architecture:
    A handle is an immutable value describing *where* to read from: the
    contract binding plus the block identifier every call is issued at.
    Readers only depend on these interfaces, so the web3 implementations in
    ``exchange.py`` and in-memory doubles are interchangeable.

Design Decisions:
    - Frozen dataclasses: pinning a snapshot builds a copy with one field
      replaced, the caller's handle keeps targeting whatever it targeted
    - One query method per contract: the readers own cursor logic, handles
      only move bytes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Self

from ..config import LATEST_BLOCK

BlockIdentifier = int | str


@dataclass(frozen=True, kw_only=True)
class ContractHandle(ABC):
    """Base for query-capable contract handles.

    Attributes:
        block_identifier: Block every call is issued at ("latest" or a height)
    """

    block_identifier: BlockIdentifier = LATEST_BLOCK

    def at_block(self, block_number: int) -> Self:
        """Return a copy of this handle bound to ``block_number``."""
        return replace(self, block_identifier=block_number)

    @property
    def is_pinned(self) -> bool:
        return self.block_identifier != LATEST_BLOCK


@dataclass(frozen=True)
class IndexedPageResponse:
    """Raw result of one ``getOpenOrderBookPaginated`` call."""

    elements: bytes
    has_next_page: bool
    next_page_user: str
    next_page_user_offset: int


class ExchangeHandle(ContractHandle):
    """Handle on the exchange contract (flat, offset-paginated user orders)."""

    @abstractmethod
    async def get_encoded_users_paginated(
        self,
        previous_page_user: str,
        previous_page_user_offset: int,
        page_size: int,
    ) -> bytes:
        """Fetch up to ``page_size`` packed orders starting at the cursor."""
        pass


class ViewerHandle(ContractHandle):
    """Handle on the viewer contract (open orders with explicit continuation)."""

    @abstractmethod
    async def get_open_order_book_paginated(
        self,
        previous_page_user: str,
        previous_page_user_offset: int,
        page_size: int,
        token_filter: Sequence[str] = (),
    ) -> IndexedPageResponse:
        """Fetch up to ``page_size`` packed indexed orders plus continuation."""
        pass
