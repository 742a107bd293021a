"""In-process chain hosting Python contracts behind their ABI."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional

from eth_utils import keccak, to_canonical_address, to_checksum_address

from ..common import abi_utils, constants
from ..common.abi_types import EntryPoint
from ..common.errors import ExecutionReverted, PortfolioError
from ..common.validation import ensure_address
from ..ledger.contract import MockToken

logger = logging.getLogger(__name__)


def contract_address(deployer: str, nonce: int) -> str:
    digest = keccak(to_canonical_address(deployer) + nonce.to_bytes(32, "big"))
    return to_checksum_address(digest[-constants.ADDRESS_BYTES:])


class LocalChain:
    """Dispatch calldata to hosted contracts by 4-byte selector.

    A hosted contract is any object with an ``ENTRY_POINTS`` tuple whose
    handlers are methods on the object. Calls to an address with nothing
    deployed succeed with empty return data, as on the EVM.
    """

    def __init__(self, chain_id: int = constants.LOCAL_CHAIN_ID) -> None:
        self.chain_id = chain_id
        self.deployments: Dict[str, str] = {}
        self._contracts: Dict[str, Any] = {}
        self._selectors: Dict[str, Dict[bytes, EntryPoint]] = {}
        self._nonces: Dict[str, int] = {}
        self._lock = threading.Lock()
        self._call_count = 0

    @property
    def call_count(self) -> int:
        return self._call_count

    def deploy(self, contract: Any, name: Optional[str] = None, deployer: str = constants.LOCAL_DEPLOYER) -> str:
        deployer = ensure_address(deployer)
        with self._lock:
            nonce = self._nonces.get(deployer, 0)
            self._nonces[deployer] = nonce + 1
            address = contract_address(deployer, nonce)
            self._contracts[address] = contract
            self._selectors[address] = {entry.selector: entry for entry in contract.ENTRY_POINTS}
            self.deployments[name or type(contract).__name__] = address
        logger.debug("deployed %s at %s", name or type(contract).__name__, address)
        return address

    def contract_at(self, address: str) -> Any:
        return self._contracts.get(ensure_address(address))

    def code_at(self, address: str) -> bytes:
        contract = self.contract_at(address)
        if contract is None:
            return b""
        return type(contract).__name__.encode("utf-8")

    def call(self, to: str, data: bytes) -> bytes:
        return self._execute(to, data, static=True)

    def transact(self, to: str, data: bytes) -> bytes:
        return self._execute(to, data, static=False)

    def _execute(self, to: str, data: bytes, static: bool) -> bytes:
        address = ensure_address(to)
        with self._lock:
            self._call_count += 1
            contract = self._contracts.get(address)
            selectors = self._selectors.get(address, {})

        if contract is None:
            return b""
        if len(data) < 4:
            raise ExecutionReverted(message=f"{address}: calldata shorter than a selector")
        entry = selectors.get(bytes(data[:4]))
        if entry is None:
            raise ExecutionReverted(message=f"{address}: unknown selector 0x{bytes(data[:4]).hex()}")
        if static and not entry.is_view:
            raise ExecutionReverted(message=f"{address}: {entry.name} modifies state in a static call")

        try:
            args = abi_utils.decode_arguments(entry, data)
        except Exception as exc:  # noqa: BLE001 - malformed calldata reverts like the ABI router
            raise ExecutionReverted(message=f"{address}: bad arguments for {entry.name}") from exc

        try:
            result = getattr(contract, entry.handler)(*args)
        except ExecutionReverted:
            raise
        except PortfolioError as exc:
            raise ExecutionReverted(str(exc).encode("utf-8"), message=str(exc)) from exc
        except Exception as exc:  # noqa: BLE001 - any contract fault reverts the call
            raise ExecutionReverted(message=f"{address}: {entry.name} panicked: {exc}") from exc
        return abi_utils.encode_result(entry, result)


def seed_mock_tokens(
    chain: LocalChain,
    metadata: Mapping[str, tuple] = constants.MOCK_TOKEN_METADATA,
) -> Dict[str, str]:
    """Deploy one mock token per symbol and return ``symbol -> address``."""

    addresses: Dict[str, str] = {}
    for symbol, (name, _decimals) in metadata.items():
        addresses[symbol] = chain.deploy(MockToken(name=name, symbol=symbol), name=symbol)
    return addresses
