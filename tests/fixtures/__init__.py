"""Test fixtures for CREATE2 derivation tests."""

from .addresses import (
    ALICE_ADDRESS,
    DEADBEEF_ADDRESS,
    FACTORY_ADDRESS,
    OWNER_ADDRESS,
    ZERO_ADDRESS,
)
from .keys import ALICE_PRIVATE_KEY
from .contracts import (
    ACCOUNT_BYTECODE,
    ACCOUNT_CREATE2_ADDRESS,
    EIP1014_VECTORS,
    SIMPLE_INIT_CODE,
)

__all__ = [
    # Addresses
    "ALICE_ADDRESS",
    "DEADBEEF_ADDRESS",
    "FACTORY_ADDRESS",
    "OWNER_ADDRESS",
    "ZERO_ADDRESS",
    # Keys
    "ALICE_PRIVATE_KEY",
    # Contracts
    "ACCOUNT_BYTECODE",
    "ACCOUNT_CREATE2_ADDRESS",
    "EIP1014_VECTORS",
    "SIMPLE_INIT_CODE",
]
