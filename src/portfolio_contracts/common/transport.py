"""Contract callers used by the reader to reach target contracts."""

from __future__ import annotations

from typing import Any, Protocol

from web3 import Web3

from . import constants


class ContractCaller(Protocol):
    """Anything able to run a read-only call and return raw return data."""

    def call(self, to: str, data: bytes) -> bytes:
        ...


class Web3Caller:
    """``eth_call`` against a JSON-RPC node through web3."""

    def __init__(self, w3: Web3, block_identifier: Any = constants.DEFAULT_BLOCK_IDENTIFIER) -> None:
        self._w3 = w3
        self._block_identifier = block_identifier

    @property
    def block_identifier(self) -> Any:
        return self._block_identifier

    def call(self, to: str, data: bytes) -> bytes:
        tx = {"to": to, "data": Web3.to_hex(data)}
        return bytes(self._w3.eth.call(tx, self._block_identifier))

    def code_at(self, address: str) -> bytes:
        return bytes(self._w3.eth.get_code(address, self._block_identifier))


def web3_client(rpc_url: str = constants.DEFAULT_RPC_URL, timeout: float = constants.DEFAULT_CALL_TIMEOUT) -> Web3:
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
