"""Shared constants for the exchange readers.

This module centralizes the block-targeting defaults, contract limits and
packed element sizes used by the decoders, contract handles and readers.
"""

from __future__ import annotations

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3

# Cursor origin for both pagination protocols
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Block identifier used when no snapshot height is requested
LATEST_BLOCK = "latest"

DEFAULT_PAGE_SIZE = 100

# Page size and offsets are uint16 in both contracts
MAX_PAGE_SIZE = 2**16 - 1

DEFAULT_RPC_TIMEOUT = 30.0

# Packed order layout: user(20) balance(32) buy(2) sell(2) from(4) until(4)
# numerator(16) denominator(16) used(16)
ORDER_BYTE_SIZE = 112

# Indexed orders append a uint16 order id
INDEXED_ORDER_BYTE_SIZE = ORDER_BYTE_SIZE + 2


def build_web3(rpc_url: str, timeout: float = DEFAULT_RPC_TIMEOUT) -> AsyncWeb3:
    """Build an async web3 client for an HTTP JSON-RPC endpoint.

    Args:
        rpc_url: Node URL (e.g. "https://mainnet.infura.io/v3/<key>")
        timeout: Total per-request timeout in seconds

    Returns:
        AsyncWeb3 instance backed by an aiohttp session
    """
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
    )
    return AsyncWeb3(provider)
