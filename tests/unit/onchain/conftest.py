"""In-memory contract doubles shared by the reader tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest

from laakhay.onchain.config import LATEST_BLOCK, ZERO_ADDRESS
from laakhay.onchain.contracts import ExchangeHandle, IndexedPageResponse, ViewerHandle
from laakhay.onchain.encoding import encode_order
from laakhay.onchain.models import Cursor, IndexedOrder, Order

USER_A = "0x" + "aa" * 20
USER_B = "0x" + "bb" * 20
USER_C = "0x" + "cc" * 20


def make_order(user: str, n: int = 0) -> Order:
    return Order(
        user=user,
        sell_token_balance=10**20 + n,
        buy_token=1,
        sell_token=2,
        valid_from=5000,
        valid_until=6000 + n,
        price_numerator=3 * 10**18,
        price_denominator=10**18 + n,
        used_amount=n,
    )


class FakeLedger:
    """Order book state per block, with a call log shared by every handle copy.

    Orders are held grouped by user, the way the exchange stores them.
    ``latest`` resolves to the current head, which tests move with ``mine``.
    """

    def __init__(self, orders: Sequence[Order], head: int = 100) -> None:
        self.head = head
        self.states: dict[int, list[Order]] = {head: list(orders)}
        self.calls: list[tuple[str, str, int, int, Any]] = []
        self.failures: dict[int, Exception] = {}
        self.payloads: dict[int, bytes] = {}
        self.after_call: Callable[[FakeLedger], None] | None = None

    def mine(self, orders: Sequence[Order]) -> None:
        self.head += 1
        self.states[self.head] = list(orders)

    def resolve(self, block_identifier: Any) -> list[Order]:
        if block_identifier == LATEST_BLOCK:
            return self.states[self.head]
        return self.states[block_identifier]

    def cursors(self) -> list[tuple[str, int]]:
        return [(user, offset) for _, user, offset, _, _ in self.calls]

    def blocks(self) -> list[Any]:
        return [block for *_, block in self.calls]

    def slice(
        self, method: str, user: str, offset: int, limit: int, block_identifier: Any
    ) -> tuple[list[Order], int, int]:
        index = len(self.calls)
        self.calls.append((method, user, offset, limit, block_identifier))
        if self.after_call is not None:
            self.after_call(self)
        if index in self.failures:
            raise self.failures[index]
        orders = self.resolve(block_identifier)
        if user == ZERO_ADDRESS:
            start = 0
        else:
            first = next((i for i, o in enumerate(orders) if o.user == user), len(orders))
            start = first + offset
        return orders, start, min(start + limit, len(orders))


def _order_id(orders: list[Order], i: int) -> int:
    return sum(1 for o in orders[:i] if o.user == orders[i].user)


@dataclass(frozen=True)
class FakeExchange(ExchangeHandle):
    ledger: FakeLedger = field(compare=False)

    async def get_encoded_users_paginated(
        self, previous_page_user: str, previous_page_user_offset: int, page_size: int
    ) -> bytes:
        index = len(self.ledger.calls)
        orders, start, end = self.ledger.slice(
            "getEncodedUsersPaginated",
            previous_page_user,
            previous_page_user_offset,
            page_size,
            self.block_identifier,
        )
        if index in self.ledger.payloads:
            return self.ledger.payloads[index]
        return b"".join(encode_order(o) for o in orders[start:end])


@dataclass(frozen=True)
class FakeViewer(ViewerHandle):
    ledger: FakeLedger = field(compare=False)
    token_filters: list[tuple[str, ...]] = field(default_factory=list, compare=False)

    async def get_open_order_book_paginated(
        self,
        previous_page_user: str,
        previous_page_user_offset: int,
        page_size: int,
        token_filter: Sequence[str] = (),
    ) -> IndexedPageResponse:
        index = len(self.ledger.calls)
        self.token_filters.append(tuple(token_filter))
        orders, start, end = self.ledger.slice(
            "getOpenOrderBookPaginated",
            previous_page_user,
            previous_page_user_offset,
            page_size,
            self.block_identifier,
        )
        indexed = [
            IndexedOrder(**orders[i].model_dump(), order_id=_order_id(orders, i))
            for i in range(start, end)
        ]
        payload = self.ledger.payloads.get(index, b"".join(encode_order(o) for o in indexed))
        has_next_page = end < len(orders)
        if has_next_page:
            # Resume exactly at the next stored order
            nxt = orders[end]
            next_cursor = Cursor(user=nxt.user, offset=_order_id(orders, end))
        else:
            next_cursor = Cursor()
        return IndexedPageResponse(
            elements=payload,
            has_next_page=has_next_page,
            next_page_user=next_cursor.user,
            next_page_user_offset=next_cursor.offset,
        )


@pytest.fixture
def order_factory() -> Callable[[str, int], Order]:
    return make_order


@pytest.fixture
def book() -> list[Order]:
    """Three users holding 3, 2 and 4 orders."""
    return (
        [make_order(USER_A, i) for i in range(3)]
        + [make_order(USER_B, i) for i in range(2)]
        + [make_order(USER_C, i) for i in range(4)]
    )


@pytest.fixture
def ledger(book: list[Order]) -> FakeLedger:
    return FakeLedger(book)


@pytest.fixture
def exchange(ledger: FakeLedger) -> FakeExchange:
    return FakeExchange(ledger=ledger)


@pytest.fixture
def viewer(ledger: FakeLedger) -> FakeViewer:
    return FakeViewer(ledger=ledger)


@pytest.fixture
def ledger_factory() -> Callable[..., FakeLedger]:
    return FakeLedger


@pytest.fixture
def exchange_factory() -> Callable[..., FakeExchange]:
    return lambda ledger: FakeExchange(ledger=ledger)


@pytest.fixture
def viewer_factory() -> Callable[..., FakeViewer]:
    return lambda ledger: FakeViewer(ledger=ledger)


@pytest.fixture
def users(book: list[Order]) -> tuple[str, str, str]:
    """Checksummed owners of ``book`` in storage order."""
    return book[0].user, book[3].user, book[5].user
