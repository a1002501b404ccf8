"""CREATE2 address computation utilities (EIP-1014).

CREATE2 allows deterministic contract address generation before deployment.
The address is computed as:
    address = keccak256(0xff ++ sender_address ++ salt ++ keccak256(init_code))[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

import rlp
from eth_utils import to_checksum_address

from .constants import ADDRESS_SIZE, CREATE2_PREFIX, HASH_SIZE, SALT_SIZE
from .crypto import keccak256
from .encoding import (
    AddressLike,
    BytesLike,
    SaltLike,
    format_address,
    parse_address,
    salt_to_bytes,
    to_init_code,
)
from .errors import InvalidAddressError, InvalidInitCodeError, InvalidSaltError, ValidationError


def derive_address(deployer_address: AddressLike, salt: SaltLike, init_code: BytesLike) -> str:
    """
    Compute the address a CREATE2 deployment will land at.

    Args:
        deployer_address: Deploying (factory) contract address, hex string or 20 bytes
        salt: Integer in ``[0, 2**256 - 1]``, 32 bytes, or hex string
        init_code: Creation bytecode followed by ABI-encoded constructor args.
            May be empty.

    Returns:
        ``0x`` + 40 lowercase hex digits

    Raises:
        InvalidAddressError: If the deployer is not a 20-byte hex address
        InvalidSaltError: If the salt is negative or does not fit in 256 bits

    Example:
        >>> derive_address("0x" + "00" * 20, 0, b"\\x00")
        '0x4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    sender = parse_address(deployer_address)
    salt_bytes = salt_to_bytes(salt)
    code = to_init_code(init_code)
    return format_address(compute_create2_address(sender, salt_bytes, code))


def derive_checksum_address(
    deployer_address: AddressLike, salt: SaltLike, init_code: BytesLike
) -> str:
    """Same as :func:`derive_address`, in EIP-55 checksum casing."""
    return to_checksum_address(derive_address(deployer_address, salt, init_code))


def compute_create2_address(
    sender: bytes,
    salt: bytes,
    init_code: bytes,
) -> bytes:
    """
    Compute CREATE2 contract address.

    The contract address is the last 20 bytes of:
        keccak256(0xff ++ sender ++ salt ++ keccak256(init_code))

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value (can be any 32 bytes)
        init_code: Contract initialization code (constructor bytecode)

    Returns:
        20-byte predicted contract address (before deployment)

    Raises:
        InvalidAddressError: If sender is not 20 bytes
        InvalidSaltError: If salt is not 32 bytes

    Note:
        - The init_code includes the constructor arguments, so different
          arguments will produce different addresses
        - CREATE2 allows "counterfactual" deployment: contracts can be created
          at addresses that are known in advance
    """
    return compute_create2_address_with_code_hash(sender, salt, keccak256(init_code))


def compute_create2_address_with_code_hash(
    sender: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute CREATE2 address with pre-computed init_code hash.

    Useful when only the hash of init_code is published, e.g. a factory
    that exposes ``INIT_CODE_HASH`` instead of the full bytecode.

    Args:
        sender: 20-byte deployer address
        salt: 32-byte salt value
        init_code_hash: 32-byte keccak256 hash of init_code

    Returns:
        20-byte predicted contract address

    Raises:
        InvalidAddressError, InvalidSaltError, InvalidInitCodeError: If lengths are incorrect
    """
    if len(sender) != ADDRESS_SIZE:
        raise InvalidAddressError(f"Sender must be {ADDRESS_SIZE} bytes, got {len(sender)}")
    if len(salt) != SALT_SIZE:
        raise InvalidSaltError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")
    if len(init_code_hash) != HASH_SIZE:
        raise InvalidInitCodeError(
            f"Init code hash must be {HASH_SIZE} bytes, got {len(init_code_hash)}"
        )

    preimage = CREATE2_PREFIX + bytes(sender) + bytes(salt) + bytes(init_code_hash)
    return keccak256(preimage)[12:]


def compute_create_address(sender: bytes, nonce: int) -> bytes:
    """
    Compute CREATE (nonce-based) contract address.

    The contract address is the last 20 bytes of:
        keccak256(rlp([sender, nonce]))

    Unlike CREATE2, the result depends on how many transactions the sender
    has sent, so it cannot be fixed ahead of time across chains.

    Raises:
        InvalidAddressError: If sender is not 20 bytes
        ValidationError: If nonce is negative
    """
    if len(sender) != ADDRESS_SIZE:
        raise InvalidAddressError(f"Sender must be {ADDRESS_SIZE} bytes, got {len(sender)}")
    if nonce < 0:
        raise ValidationError(f"Nonce must be non-negative, got {nonce}")

    encoded = rlp.encode([bytes(sender), nonce])
    return keccak256(encoded)[12:]
