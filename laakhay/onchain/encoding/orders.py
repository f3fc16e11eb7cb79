"""Decoders for packed order payloads.

The exchange contracts return orders as ``abi.encodePacked`` element runs:
fixed-width big-endian fields with no padding and no length prefix. The
viewer contract appends the order's index within its owner's list.
"""

from __future__ import annotations

from typing import Any

from eth_utils import to_bytes, to_checksum_address

from ..config import INDEXED_ORDER_BYTE_SIZE, ORDER_BYTE_SIZE
from ..core.exceptions import DecodingError
from ..models import IndexedOrder, Order

# (field, width in bytes) in packed order
_ORDER_LAYOUT: tuple[tuple[str, int], ...] = (
    ("user", 20),
    ("sell_token_balance", 32),
    ("buy_token", 2),
    ("sell_token", 2),
    ("valid_from", 4),
    ("valid_until", 4),
    ("price_numerator", 16),
    ("price_denominator", 16),
    ("used_amount", 16),
)

_INDEXED_LAYOUT = _ORDER_LAYOUT + (("order_id", 2),)


def _as_bytes(payload: bytes | str) -> bytes:
    if isinstance(payload, str):
        try:
            return to_bytes(hexstr=payload)
        except ValueError as e:
            raise DecodingError(f"Invalid hex payload: {e}") from e
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise DecodingError(f"Invalid payload type: expected bytes or hex str, got {type(payload)}")


def _split(payload: bytes | str, element_size: int) -> list[bytes]:
    raw = _as_bytes(payload)
    if len(raw) % element_size != 0:
        raise DecodingError(
            f"Payload length {len(raw)} is not a multiple of element size {element_size}",
            payload_length=len(raw),
            element_size=element_size,
        )
    return [raw[i : i + element_size] for i in range(0, len(raw), element_size)]


def _unpack(element: bytes, layout: tuple[tuple[str, int], ...]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    offset = 0
    for name, width in layout:
        chunk = element[offset : offset + width]
        if name == "user":
            fields[name] = to_checksum_address(chunk)
        else:
            fields[name] = int.from_bytes(chunk, "big")
        offset += width
    return fields


def decode_orders(payload: bytes | str) -> list[Order]:
    """Decode a flat run of packed orders.

    Args:
        payload: Raw bytes (or 0x-prefixed hex) returned by the exchange

    Returns:
        Orders in payload order

    Raises:
        DecodingError: If the payload is not a whole number of elements
    """
    return [Order(**_unpack(element, _ORDER_LAYOUT)) for element in _split(payload, ORDER_BYTE_SIZE)]


def decode_indexed_orders(payload: bytes | str) -> list[IndexedOrder]:
    """Decode a run of packed orders carrying a trailing uint16 order id.

    Args:
        payload: Raw bytes (or 0x-prefixed hex) returned by the viewer

    Returns:
        Indexed orders in payload order

    Raises:
        DecodingError: If the payload is not a whole number of elements
    """
    return [
        IndexedOrder(**_unpack(element, _INDEXED_LAYOUT))
        for element in _split(payload, INDEXED_ORDER_BYTE_SIZE)
    ]


def encode_order(order: Order) -> bytes:
    """Pack an order into its wire layout (indexed layout for IndexedOrder)."""
    layout = _INDEXED_LAYOUT if isinstance(order, IndexedOrder) else _ORDER_LAYOUT
    parts = []
    for name, width in layout:
        if name == "user":
            parts.append(to_bytes(hexstr=order.user))
        else:
            parts.append(getattr(order, name).to_bytes(width, "big"))
    return b"".join(parts)
