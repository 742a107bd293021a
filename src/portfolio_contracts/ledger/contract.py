"""Mock token ledger used as the target of portfolio reads."""

from __future__ import annotations

from typing import Dict

from ..common import abi_types, constants
from ..common.validation import ensure_address, ensure_uint256


class MockToken:
    """Balance store with an unrestricted ``mint``.

    Any caller may mint; this contract only exists to be queried.
    """

    ENTRY_POINTS = abi_types.MOCK_TOKEN_INTERFACE

    def __init__(self, name: str = "", symbol: str = "") -> None:
        self._balances: Dict[str, int] = {}
        self._total_supply = 0
        self._name = name
        self._symbol = symbol

    def balance_of(self, account: str) -> int:
        return self._balances.get(ensure_address(account), 0)

    def name(self) -> str:
        return self._name

    def symbol(self) -> str:
        return self._symbol

    def total_supply(self) -> int:
        return self._total_supply

    def mint(self, to: str, amount: int) -> None:
        holder = ensure_address(to)
        amount = ensure_uint256(amount)
        current = self._balances.get(holder, 0)
        self._balances[holder] = (current + amount) % constants.UINT256_MODULUS
        self._total_supply = (self._total_supply + amount) % constants.UINT256_MODULUS
