"""Test configuration for the portfolio contracts."""

import sys
from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = TESTS_ROOT / "src"
if str(TESTS_ROOT) not in sys.path:
    sys.path.insert(0, str(TESTS_ROOT))
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from portfolio_contracts.chain import LocalChain  # noqa: E402
from portfolio_contracts.common import abi_types, abi_utils  # noqa: E402
from portfolio_contracts.ledger import MockToken  # noqa: E402

HOLDER = "0x" + "a1" * 20
OTHER_HOLDER = "0x" + "b2" * 20
NON_CONTRACT = "0x" + "de" * 20


class RevertingToken:
    """Target that implements the ledger interface but always reverts."""

    ENTRY_POINTS = abi_types.LEDGER_INTERFACE

    def balance_of(self, account):
        raise RuntimeError("balanceOf disabled")

    def name(self):
        raise RuntimeError("name disabled")

    def symbol(self):
        raise RuntimeError("symbol disabled")


class GarbageCaller:
    """Caller that answers every call with bytes no decoder accepts."""

    def __init__(self, inner, garbage_targets):
        self._inner = inner
        self._garbage = set(garbage_targets)

    def call(self, to, data):
        if to in self._garbage:
            return b"\x01\x02\x03"
        return self._inner.call(to, data)


@pytest.fixture
def chain():
    return LocalChain()


@pytest.fixture
def token(chain):
    return chain.deploy(MockToken(name="Wrapped ETH", symbol="WETH"), name="WETH")


@pytest.fixture
def funded_token(chain, token):
    chain.transact(token, abi_utils.encode_call(abi_types.MOCK_TOKEN_MINT, HOLDER, 500))
    return token
