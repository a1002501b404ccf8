"""Deterministic CREATE2 contract address derivation."""

from .core.create2 import (
    compute_create2_address,
    compute_create2_address_with_code_hash,
    compute_create_address,
    derive_address,
    derive_checksum_address,
)
from .core.encoding import build_init_code
from .core.errors import (
    Create2Error,
    DeploymentError,
    InvalidAddressError,
    InvalidSaltError,
)

__version__ = "0.1.0"

__all__ = [
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "compute_create_address",
    "derive_address",
    "derive_checksum_address",
    "build_init_code",
    "Create2Error",
    "DeploymentError",
    "InvalidAddressError",
    "InvalidSaltError",
]
