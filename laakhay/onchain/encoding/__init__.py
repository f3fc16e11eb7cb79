"""Packed order payload codecs."""

from .orders import decode_indexed_orders, decode_orders, encode_order

__all__ = [
    "decode_orders",
    "decode_indexed_orders",
    "encode_order",
]
