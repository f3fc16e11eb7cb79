"""Data models for decoded exchange state.

All models are immutable: orders and pages are pydantic models with
``frozen=True``, the cursor is a frozen dataclass that readers replace
rather than mutate.
"""

from .cursor import Cursor
from .order import IndexedOrder, Order
from .page import IndexedPage

__all__ = [
    "Cursor",
    "IndexedOrder",
    "IndexedPage",
    "Order",
]
