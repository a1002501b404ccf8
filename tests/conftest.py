"""Pytest configuration and shared fixtures for all tests."""

from unittest.mock import MagicMock

import pytest

from create2kit.client import ChainClient, ClientConfig
from create2kit.core.encoding import format_address

from tests.fixtures.addresses import ALICE_ADDRESS, FACTORY_ADDRESS


# =============================================================================
# Chain client fixtures
# =============================================================================

@pytest.fixture
def w3():
    """Web3 stand-in with no code at any address."""
    mock = MagicMock()
    mock.eth.get_code.return_value = b""
    mock.eth.wait_for_transaction_receipt.return_value = {
        "status": 1,
        "blockNumber": 7,
        "gasUsed": 95_000,
    }
    return mock


@pytest.fixture
def config():
    """Config sending from an unlocked account."""
    return ClientConfig(
        factory_address=format_address(FACTORY_ADDRESS),
        sender=format_address(ALICE_ADDRESS),
    )


@pytest.fixture
def client(w3, config):
    return ChainClient(w3, config)
