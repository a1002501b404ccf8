"""Encoding helpers for CREATE2 inputs.

Addresses, salts and init code arrive from callers in several shapes (hex
strings with or without ``0x``, raw bytes, integers). These helpers reduce
them to the canonical byte forms used by :mod:`create2kit.core.create2`.

Constructor argument encoding is delegated to eth-abi.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Sequence, Union

from eth_abi import encode as abi_encode
from eth_abi.exceptions import ABITypeError, EncodingError as ABIEncodingError, ParseError

from .constants import ADDRESS_SIZE, MAX_SALT, SALT_SIZE
from .errors import EncodingError, InvalidAddressError, InvalidInitCodeError, InvalidSaltError


AddressLike = Union[str, bytes, bytearray]
SaltLike = Union[int, str, bytes, bytearray]
BytesLike = Union[str, bytes, bytearray, memoryview]

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def strip_hex_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_to_bytes(value: BytesLike) -> bytes:
    """Decode a hex string to bytes. Bytes-like input is returned as ``bytes``.

    ``"0x"`` and ``""`` decode to ``b""``.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, str):
        raise EncodingError(f"Expected hex string or bytes, got {type(value).__name__}")
    digits = strip_hex_prefix(value)
    if not _HEX_RE.fullmatch(digits):
        raise EncodingError(f"Invalid hex string: {value!r}")
    if len(digits) % 2 != 0:
        raise EncodingError(f"Hex length must be even, got {len(digits)} digits")
    return bytes.fromhex(digits)


def bytes_to_hex(value: bytes) -> str:
    return "0x" + value.hex()


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

def parse_address(value: AddressLike) -> bytes:
    """Return the 20-byte raw form of an address.

    Accepts 20 raw bytes or a 40-digit hex string with or without ``0x``.
    Checksum casing is not enforced.

    Raises:
        InvalidAddressError: wrong length, wrong type, or non-hex characters
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_SIZE:
            raise InvalidAddressError(
                f"Address must be {ADDRESS_SIZE} bytes, got {len(value)}"
            )
        return bytes(value)
    if not isinstance(value, str):
        raise InvalidAddressError(f"Unsupported address type: {type(value).__name__}")

    digits = strip_hex_prefix(value)
    if not _HEX_RE.fullmatch(digits):
        raise InvalidAddressError(f"Address contains non-hex characters: {value!r}")
    if len(digits) != ADDRESS_SIZE * 2:
        raise InvalidAddressError(
            f"Address must be {ADDRESS_SIZE} bytes, got {len(digits) / 2:g}"
        )
    return bytes.fromhex(digits)


def format_address(raw: bytes) -> str:
    """Format a raw 20-byte address as ``0x`` + 40 lowercase hex digits."""
    if len(raw) != ADDRESS_SIZE:
        raise InvalidAddressError(f"Address must be {ADDRESS_SIZE} bytes, got {len(raw)}")
    return "0x" + raw.hex()


# ---------------------------------------------------------------------------
# Salts
# ---------------------------------------------------------------------------

def salt_to_bytes(salt: SaltLike) -> bytes:
    """Serialize a salt to exactly 32 big-endian bytes.

    - ``int``: must lie in ``[0, 2**256 - 1]``; left-padded with zeros.
    - ``bytes``: must already be 32 bytes.
    - ``str``: hex of at most 64 digits, read as a big-endian integer, so
      ``"0x1"`` and ``1`` serialize identically.

    Raises:
        InvalidSaltError: out of range, wrong length, or wrong type
    """
    # bool is an int subclass; True is not a salt
    if isinstance(salt, bool):
        raise InvalidSaltError("Salt must be an integer, bytes or hex string, got bool")

    if isinstance(salt, int):
        if salt < 0:
            raise InvalidSaltError(f"Salt must be non-negative, got {salt}")
        if salt > MAX_SALT:
            raise InvalidSaltError("Salt does not fit in 256 bits")
        return salt.to_bytes(SALT_SIZE, "big")

    if isinstance(salt, (bytes, bytearray)):
        if len(salt) != SALT_SIZE:
            raise InvalidSaltError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")
        return bytes(salt)

    if isinstance(salt, str):
        digits = strip_hex_prefix(salt)
        if not digits or not _HEX_RE.fullmatch(digits):
            raise InvalidSaltError(f"Invalid hex salt: {salt!r}")
        if len(digits) > SALT_SIZE * 2:
            raise InvalidSaltError("Salt does not fit in 256 bits")
        return int(digits, 16).to_bytes(SALT_SIZE, "big")

    raise InvalidSaltError(f"Unsupported salt type: {type(salt).__name__}")


def salt_to_int(salt: SaltLike) -> int:
    return int.from_bytes(salt_to_bytes(salt), "big")


# ---------------------------------------------------------------------------
# Init code
# ---------------------------------------------------------------------------

def to_init_code(value: BytesLike) -> bytes:
    """Coerce init code to bytes. Empty init code is valid."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return hex_to_bytes(value)
        except EncodingError as e:
            raise InvalidInitCodeError(str(e)) from e
    raise InvalidInitCodeError(f"Unsupported init code type: {type(value).__name__}")


def encode_constructor_args(types: Sequence[str], args: Sequence[Any]) -> bytes:
    """ABI-encode constructor arguments as ``abi.encode(args...)`` would."""
    if len(types) != len(args):
        raise EncodingError(
            f"Constructor expects {len(types)} argument(s), got {len(args)}"
        )
    try:
        return abi_encode(list(types), list(args))
    except (ABIEncodingError, ABITypeError, ParseError) as e:
        raise EncodingError(f"ABI encoding failed: {e}") from e


def build_init_code(
    bytecode: BytesLike,
    types: Optional[Sequence[str]] = None,
    args: Optional[Sequence[Any]] = None,
) -> bytes:
    """
    Assemble init code from creation bytecode and constructor arguments.

    The result is ``bytecode ++ abi.encode(args)``, which is what a Solidity
    factory hashes as ``abi.encodePacked(type(C).creationCode, abi.encode(...))``.

    Args:
        bytecode: Compiled creation bytecode (hex string or bytes)
        types: Constructor parameter types, e.g. ``["address", "uint256"]``
        args: Constructor argument values, matching ``types``

    Returns:
        Init code bytes

    Raises:
        EncodingError: If bytecode is not valid hex, or args do not match types

    Example:
        >>> build_init_code("0x6080", ["uint256"], [1]).hex()
        '60800000000000000000000000000000000000000000000000000000000000000001'
    """
    code = hex_to_bytes(bytecode)
    types = list(types or [])
    args = list(args or [])
    if not types and not args:
        return code
    return code + encode_constructor_args(types, args)
