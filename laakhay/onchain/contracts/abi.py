"""Minimal ABI fragments for the read-only calls used by the readers."""

from __future__ import annotations

from typing import Any

BATCH_EXCHANGE_ABI: list[dict[str, Any]] = [
    {
        "name": "getEncodedUsersPaginated",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "previousPageUser", "type": "address"},
            {"name": "previousPageUserOffset", "type": "uint16"},
            {"name": "pageSize", "type": "uint16"},
        ],
        "outputs": [{"name": "elements", "type": "bytes"}],
    },
]

BATCH_EXCHANGE_VIEWER_ABI: list[dict[str, Any]] = [
    {
        "name": "getOpenOrderBookPaginated",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "tokenFilter", "type": "address[]"},
            {"name": "previousPageUser", "type": "address"},
            {"name": "previousPageUserOffset", "type": "uint16"},
            {"name": "pageSize", "type": "uint16"},
        ],
        "outputs": [
            {"name": "elements", "type": "bytes"},
            {"name": "hasNextPage", "type": "bool"},
            {"name": "nextPageUser", "type": "address"},
            {"name": "nextPageUserOffset", "type": "uint16"},
        ],
    },
]
