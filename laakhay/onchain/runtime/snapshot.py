"""Snapshot pinning for contract handles."""

from __future__ import annotations

from typing import TypeVar

from ..contracts.base import ContractHandle
from ..core.validation import validate_block_number

HandleT = TypeVar("HandleT", bound=ContractHandle)


def with_snapshot(handle: HandleT, block_number: int | None) -> HandleT:
    """Bind a handle to a fixed block height.

    Returns ``handle`` unchanged when ``block_number`` is None, so calls keep
    targeting the latest block. Otherwise returns a copy of the handle whose
    every call is issued at ``block_number``; the original is not modified.

    Raises:
        InvalidArgumentError: If ``block_number`` is negative or not an int
    """
    validate_block_number(block_number)
    if block_number is None:
        return handle
    return handle.at_block(block_number)
