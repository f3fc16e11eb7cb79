"""Custom exception hierarchy."""

from __future__ import annotations


class OnchainError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(OnchainError, ValueError):
    """Argument rejected before any remote call is issued.

    Raised for a non-positive page size, a negative block height, or an
    entry point used without the contract handle it needs.
    """

    pass


class TransportError(OnchainError):
    """Remote contract call failed (network, node, or contract revert)."""

    def __init__(
        self,
        message: str,
        method: str | None = None,
        block_identifier: int | str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.block_identifier = block_identifier


class DecodingError(OnchainError):
    """Well-formed transport response carrying a malformed order payload."""

    def __init__(
        self,
        message: str,
        payload_length: int | None = None,
        element_size: int | None = None,
    ) -> None:
        super().__init__(message)
        self.payload_length = payload_length
        self.element_size = element_size
