"""ABI declarations shared across contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from eth_utils import function_signature_to_4byte_selector

from . import constants


@dataclass(frozen=True)
class EntryPoint:
    """One externally callable function of a hosted contract."""

    name: str
    handler: str
    inputs: Tuple[Tuple[str, str], ...] = ()
    outputs: Tuple[str, ...] = ()
    mutability: str = constants.MUTABILITY_VIEW

    @property
    def input_types(self) -> Tuple[str, ...]:
        return tuple(abi_type for _, abi_type in self.inputs)

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.input_types)})"

    @property
    def selector(self) -> bytes:
        return function_signature_to_4byte_selector(self.signature)

    @property
    def is_view(self) -> bool:
        return self.mutability == constants.MUTABILITY_VIEW

    def to_abi(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "name": self.name,
            "inputs": [{"name": arg, "type": abi_type} for arg, abi_type in self.inputs],
            "outputs": [{"name": "", "type": abi_type} for abi_type in self.outputs],
            "stateMutability": self.mutability,
        }


ERC20_BALANCE_OF = EntryPoint(
    name="balanceOf",
    handler="balance_of",
    inputs=(("account", "address"),),
    outputs=("uint256",),
)
ERC20_NAME = EntryPoint(name="name", handler="name", outputs=("string",))
ERC20_SYMBOL = EntryPoint(name="symbol", handler="symbol", outputs=("string",))

MOCK_TOKEN_TOTAL_SUPPLY = EntryPoint(
    name="totalSupply",
    handler="total_supply",
    outputs=("uint256",),
)
MOCK_TOKEN_MINT = EntryPoint(
    name="mint",
    handler="mint",
    inputs=(("to", "address"), ("amount", "uint256")),
    mutability=constants.MUTABILITY_NONPAYABLE,
)

READER_INITIALIZE = EntryPoint(
    name="initialize",
    handler="initialize",
    mutability=constants.MUTABILITY_NONPAYABLE,
)
READER_GET_BALANCES = EntryPoint(
    name="getBalances",
    handler="get_balances",
    inputs=(("user", "address"), ("tokens", "address[]")),
    outputs=("uint256[]",),
)
READER_GET_SYMBOLS = EntryPoint(
    name="getSymbols",
    handler="get_symbols",
    inputs=(("tokens", "address[]"),),
    outputs=("string[]",),
)
READER_GET_NAMES = EntryPoint(
    name="getNames",
    handler="get_names",
    inputs=(("tokens", "address[]"),),
    outputs=("string[]",),
)

LEDGER_INTERFACE = (ERC20_BALANCE_OF, ERC20_NAME, ERC20_SYMBOL)
MOCK_TOKEN_INTERFACE = LEDGER_INTERFACE + (MOCK_TOKEN_TOTAL_SUPPLY, MOCK_TOKEN_MINT)
READER_INTERFACE = (
    READER_INITIALIZE,
    READER_GET_BALANCES,
    READER_GET_SYMBOLS,
    READER_GET_NAMES,
)
