"""Chain-facing helpers: existence checks and factory deployments.

Everything that touches a node goes through web3.py. The derivation itself
stays in :mod:`create2kit.core.create2`; this module only checks that the
chain agrees with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from eth_utils import to_checksum_address
from web3 import Web3

from create2kit.contracts import FACTORY_ABI
from create2kit.core.create2 import derive_address
from create2kit.core.crypto import private_key_to_address
from create2kit.core.encoding import (
    AddressLike,
    BytesLike,
    SaltLike,
    bytes_to_hex,
    format_address,
    parse_address,
    salt_to_int,
    to_init_code,
)
from create2kit.core.errors import AlreadyDeployedError, DeploymentError

from .config import ClientConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeploymentResult:
    address: str
    salt: int
    tx_hash: str
    block_number: int
    gas_used: int


class ChainClient:
    """Thin wrapper over a :class:`Web3` instance and a CREATE2 factory."""

    def __init__(self, w3: Web3, config: Optional[ClientConfig] = None):
        self.w3 = w3
        self.config = config or ClientConfig()

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ChainClient":
        provider = Web3.HTTPProvider(
            config.rpc_url,
            request_kwargs={"timeout": config.request_timeout},
        )
        logger.debug("Connecting to %s", config.rpc_url)
        return cls(Web3(provider), config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_code(self, address: AddressLike) -> bytes:
        checksum = to_checksum_address(parse_address(address))
        return bytes(self.w3.eth.get_code(checksum))

    def is_deployed(self, address: AddressLike) -> bool:
        """True if the account at ``address`` holds non-empty code."""
        code = self.get_code(address)
        logger.debug("Code size at %s: %d", format_address(parse_address(address)), len(code))
        return len(code) > 0

    def predict(self, init_code: BytesLike, salt: SaltLike) -> str:
        """Address the configured factory would deploy ``init_code`` to."""
        return derive_address(self.config.require_factory(), salt, init_code)

    def predict_onchain(self, init_code: BytesLike, salt: SaltLike) -> str:
        """Ask the factory's ``getAddress`` view for the deployment address."""
        address = self.factory_contract().functions.getAddress(
            to_init_code(init_code), salt_to_int(salt)
        ).call()
        return format_address(parse_address(address))

    def verify_prediction(self, init_code: BytesLike, salt: SaltLike) -> str:
        """
        Check the local derivation against the deployed factory.

        Returns the agreed address.

        Raises:
            DeploymentError: If the factory reports a different address
        """
        local = self.predict(init_code, salt)
        remote = self.predict_onchain(init_code, salt)
        if local != remote:
            raise DeploymentError(f"Factory reports {remote}, derived {local}")
        return local

    def factory_contract(self):
        return self.w3.eth.contract(
            address=to_checksum_address(self.config.require_factory()),
            abi=FACTORY_ABI,
        )

    # ------------------------------------------------------------------
    # Deployment
    # ------------------------------------------------------------------

    def deploy(self, init_code: BytesLike, salt: SaltLike) -> DeploymentResult:
        """
        Deploy ``init_code`` through the factory's ``deploy(bytes,uint256)``.

        The transaction is signed locally when ``config.private_key`` is set,
        otherwise it is sent from ``config.sender`` (an account unlocked on
        the node).

        Raises:
            AlreadyDeployedError: If the predicted address already has code
            DeploymentError: If the transaction reverted, emitted no
                ``Deployed`` event, or the event address differs from the
                predicted one
        """
        code = to_init_code(init_code)
        salt_value = salt_to_int(salt)
        predicted = self.predict(code, salt_value)

        if self.is_deployed(predicted):
            raise AlreadyDeployedError(predicted)

        factory = self.factory_contract()
        call = factory.functions.deploy(code, salt_value)
        tx_hash = self._send(call)
        tx_hex = bytes_to_hex(bytes(tx_hash))
        logger.info("Sent deploy tx %s (salt=%d, predicted=%s)", tx_hex, salt_value, predicted)

        receipt = self.w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self.config.receipt_timeout
        )
        if receipt["status"] != 1:
            raise DeploymentError(f"Deploy transaction {tx_hex} reverted")

        events = factory.events.Deployed().process_receipt(receipt)
        if not events:
            raise DeploymentError(f"No Deployed event in transaction {tx_hex}")
        actual = format_address(parse_address(events[0]["args"]["addr"]))
        if actual != predicted:
            raise DeploymentError(
                f"Contract deployed at {actual}, expected {predicted}"
            )

        logger.info("Deployed %s in block %d", actual, receipt["blockNumber"])
        return DeploymentResult(
            address=actual,
            salt=salt_value,
            tx_hash=tx_hex,
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
        )

    def _send(self, call):
        private_key = self.config.private_key_bytes
        if private_key is not None:
            sender = to_checksum_address(private_key_to_address(private_key))
            tx_params = {
                "from": sender,
                "gas": self.config.gas,
                "nonce": self.w3.eth.get_transaction_count(sender),
            }
            if self.config.chain_id is not None:
                tx_params["chainId"] = self.config.chain_id
            tx = call.build_transaction(tx_params)
            signed = self.w3.eth.account.sign_transaction(tx, private_key)
            return self.w3.eth.send_raw_transaction(signed.raw_transaction)

        if self.config.sender is None:
            raise DeploymentError("Either sender or private_key must be configured")
        return call.transact({
            "from": to_checksum_address(self.config.sender),
            "gas": self.config.gas,
        })
