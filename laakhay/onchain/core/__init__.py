"""Core components."""

from .exceptions import DecodingError, InvalidArgumentError, OnchainError, TransportError
from .validation import validate_block_number, validate_page_size

__all__ = [
    "OnchainError",
    "InvalidArgumentError",
    "TransportError",
    "DecodingError",
    "validate_page_size",
    "validate_block_number",
]
