"""
Chain client configuration.

Values come from keyword arguments, environment variables
(``CREATE2_*``), or a JSON file with the same keys as the dataclass fields.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

from create2kit.core.encoding import format_address, hex_to_bytes, parse_address
from create2kit.core.errors import ConfigError, EncodingError, InvalidAddressError


DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_GAS = 3_000_000
DEFAULT_RECEIPT_TIMEOUT = 120.0
DEFAULT_REQUEST_TIMEOUT = 10.0

ENV_PREFIX = "CREATE2_"

# env var suffix -> field name
_ENV_FIELDS = {
    "RPC_URL": "rpc_url",
    "FACTORY": "factory_address",
    "SENDER": "sender",
    "PRIVATE_KEY": "private_key",
    "GAS": "gas",
    "RECEIPT_TIMEOUT": "receipt_timeout",
    "REQUEST_TIMEOUT": "request_timeout",
    "CHAIN_ID": "chain_id",
}


@dataclass
class ClientConfig:
    rpc_url: str = DEFAULT_RPC_URL
    factory_address: Optional[str] = None
    sender: Optional[str] = None
    private_key: Optional[str] = None
    gas: int = DEFAULT_GAS
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    chain_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.factory_address is not None:
            self.factory_address = _normalize_address("factory_address", self.factory_address)
        if self.sender is not None:
            self.sender = _normalize_address("sender", self.sender)
        if self.private_key is not None:
            try:
                key = hex_to_bytes(self.private_key)
            except EncodingError as e:
                raise ConfigError(f"private_key: {e}") from e
            if len(key) != 32:
                raise ConfigError(f"private_key must be 32 bytes, got {len(key)}")
        self.gas = _to_int("gas", self.gas)
        if self.gas <= 0:
            raise ConfigError(f"gas must be positive, got {self.gas}")
        self.receipt_timeout = _to_timeout("receipt_timeout", self.receipt_timeout)
        self.request_timeout = _to_timeout("request_timeout", self.request_timeout)
        if self.chain_id is not None:
            self.chain_id = _to_int("chain_id", self.chain_id)

    @property
    def private_key_bytes(self) -> Optional[bytes]:
        if self.private_key is None:
            return None
        return hex_to_bytes(self.private_key)

    def require_factory(self) -> str:
        if self.factory_address is None:
            raise ConfigError("factory_address is not configured")
        return self.factory_address

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from ``CREATE2_*`` environment variables."""
        environ = os.environ if environ is None else environ
        kwargs = {}
        for suffix, name in _ENV_FIELDS.items():
            value = environ.get(ENV_PREFIX + suffix)
            if value:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path) -> "ClientConfig":
        """Build a config from a JSON object whose keys are field names."""
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def _normalize_address(name: str, value: str) -> str:
    try:
        return format_address(parse_address(value))
    except InvalidAddressError as e:
        raise ConfigError(f"{name}: {e}") from e


def _to_int(name: str, value) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(value, 0)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _to_timeout(name: str, value) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: {e}") from e
    if seconds <= 0:
        raise ConfigError(f"{name} must be positive, got {seconds}")
    return seconds
