"""Address derivation core."""

from .create2 import (
    compute_create2_address,
    compute_create2_address_with_code_hash,
    compute_create_address,
    derive_address,
    derive_checksum_address,
)
from .crypto import keccak256
from .encoding import build_init_code, encode_constructor_args, parse_address, salt_to_bytes
from .errors import (
    AlreadyDeployedError,
    ConfigError,
    Create2Error,
    DeploymentError,
    EncodingError,
    InvalidAddressError,
    InvalidInitCodeError,
    InvalidSaltError,
    ValidationError,
)

__all__ = [
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "compute_create_address",
    "derive_address",
    "derive_checksum_address",
    "keccak256",
    "build_init_code",
    "encode_constructor_args",
    "parse_address",
    "salt_to_bytes",
    "AlreadyDeployedError",
    "ConfigError",
    "Create2Error",
    "DeploymentError",
    "EncodingError",
    "InvalidAddressError",
    "InvalidInitCodeError",
    "InvalidSaltError",
    "ValidationError",
]
