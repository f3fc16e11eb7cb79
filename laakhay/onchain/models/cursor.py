"""Pagination cursor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..config import ZERO_ADDRESS
from .order import Order


@dataclass(frozen=True)
class Cursor:
    """Resume position as (user, offset within that user's orders).

    Attributes:
        user: Owner address the next page starts from
        offset: Number of that user's orders already consumed
    """

    user: str = ZERO_ADDRESS
    offset: int = 0

    def advance(self, orders: Iterable[Order]) -> Cursor:
        """Return the cursor positioned after the given orders.

        Orders are scanned in page order. A new owner resets the offset to
        zero before counting, so a user boundary falling mid-page leaves the
        cursor at the offset within the last user seen.
        """
        user, offset = self.user, self.offset
        for order in orders:
            if order.user != user:
                user = order.user
                offset = 0
            offset += 1
        return Cursor(user=user, offset=offset)
