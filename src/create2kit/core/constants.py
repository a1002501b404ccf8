"""CREATE2 derivation constants (EIP-1014)."""

CREATE2_PREFIX = b"\xff"

ADDRESS_SIZE = 20
SALT_SIZE = 32
HASH_SIZE = 32

# 1 + 20 + 32 + 32
PREIMAGE_SIZE = len(CREATE2_PREFIX) + ADDRESS_SIZE + SALT_SIZE + HASH_SIZE

MAX_SALT = 2**256 - 1
