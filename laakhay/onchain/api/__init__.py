"""High-level API."""

from .order_book_reader import OrderBookReader

__all__ = ["OrderBookReader"]
