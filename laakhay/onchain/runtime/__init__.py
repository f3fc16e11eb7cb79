"""Paginated order book readers."""

from .aggregate import collect_pages
from .indexed import get_open_orders, iter_open_orders
from .offset import get_orders
from .snapshot import with_snapshot

__all__ = [
    "collect_pages",
    "get_open_orders",
    "get_orders",
    "iter_open_orders",
    "with_snapshot",
]
