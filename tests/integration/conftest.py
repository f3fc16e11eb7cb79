"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_LAAKHAY_ONCHAIN_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_ONCHAIN_TESTS") != "1",
    reason="Requires an RPC node. Set RUN_LAAKHAY_ONCHAIN_TESTS=1 to run",
)


@pytest.fixture
def rpc_settings() -> dict[str, str | None]:
    """Node and contract addresses taken from the environment."""
    settings = {
        "rpc_url": os.environ.get("LAAKHAY_ONCHAIN_RPC_URL"),
        "exchange": os.environ.get("LAAKHAY_ONCHAIN_EXCHANGE"),
        "viewer": os.environ.get("LAAKHAY_ONCHAIN_VIEWER"),
    }
    if not settings["rpc_url"] or not settings["exchange"]:
        pytest.skip("LAAKHAY_ONCHAIN_RPC_URL and LAAKHAY_ONCHAIN_EXCHANGE must be set")
    return settings
