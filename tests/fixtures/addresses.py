"""Standard test addresses.

All addresses are 20 bytes (canonical form, not checksummed).
"""

from .keys import ALICE_ADDRESS

ZERO_ADDRESS = bytes(20)

DEADBEEF_ADDRESS = bytes.fromhex("deadbeef" * 5)

# Arbitrary factory used by client tests
FACTORY_ADDRESS = bytes.fromhex("5fbdb2315678afecb367f032d93f642f64180aa3")

# Constructor argument of the example account contract
OWNER_ADDRESS = "0x262d41499c802decd532fd65d991e477a068e132"

__all__ = ["ALICE_ADDRESS", "ZERO_ADDRESS", "DEADBEEF_ADDRESS", "FACTORY_ADDRESS", "OWNER_ADDRESS"]
