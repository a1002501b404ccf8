"""Crypto utilities using pycryptodome and eth-keys."""

from eth_keys import keys
from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


def private_key_to_address(private_key: bytes) -> bytes:
    pk = keys.PrivateKey(private_key)
    public_key = pk.public_key
    return keccak256(public_key.to_bytes())[12:]
