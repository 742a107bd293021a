"""Shared-module tests ensuring helper utilities stay stable."""

import json

import pytest
from eth_abi import encode

from conftest import HOLDER
from portfolio_contracts.common import abi_types, abi_utils, constants
from portfolio_contracts.common.config import ReaderSettings, load_settings
from portfolio_contracts.common.deployments import load_deployment_record, write_deployment_record
from portfolio_contracts.common.errors import ConfigError, InvalidAddress
from portfolio_contracts.common.validation import ensure_address, ensure_addresses


@pytest.mark.parametrize(
    ("entry", "selector"),
    [
        (abi_types.ERC20_BALANCE_OF, "70a08231"),
        (abi_types.ERC20_NAME, "06fdde03"),
        (abi_types.ERC20_SYMBOL, "95d89b41"),
        (abi_types.MOCK_TOKEN_TOTAL_SUPPLY, "18160ddd"),
        (abi_types.MOCK_TOKEN_MINT, "40c10f19"),
    ],
)
def test_ledger_selectors_match_erc20(entry, selector):
    assert entry.selector.hex() == selector


def test_reader_signatures():
    assert [entry.signature for entry in abi_types.READER_INTERFACE] == [
        "initialize()",
        "getBalances(address,address[])",
        "getSymbols(address[])",
        "getNames(address[])",
    ]
    assert len({entry.selector for entry in abi_types.READER_INTERFACE}) == 4


def test_entry_point_abi_fragment():
    fragment = abi_types.READER_GET_BALANCES.to_abi()
    assert fragment == {
        "type": "function",
        "name": "getBalances",
        "inputs": [
            {"name": "user", "type": "address"},
            {"name": "tokens", "type": "address[]"},
        ],
        "outputs": [{"name": "", "type": "uint256[]"}],
        "stateMutability": "view",
    }
    assert abi_types.MOCK_TOKEN_MINT.to_abi()["stateMutability"] == "nonpayable"


def test_encode_call_layout():
    data = abi_utils.encode_call(abi_types.ERC20_BALANCE_OF, HOLDER)
    assert data[:4] == abi_types.ERC20_BALANCE_OF.selector
    assert len(data) == 4 + 32
    assert abi_utils.decode_arguments(abi_types.ERC20_BALANCE_OF, data)[0].lower() == HOLDER


def test_decode_result_of_string():
    data = encode(["string"], ["Curve"])
    assert abi_utils.decode_result(abi_types.ERC20_SYMBOL, data) == "Curve"


@pytest.mark.parametrize("data", [b"", b"\x00" * 31])
def test_decode_result_rejects_short_data(data):
    with pytest.raises(Exception):
        abi_utils.decode_result(abi_types.ERC20_BALANCE_OF, data)


def test_encode_result_without_outputs_is_empty():
    assert abi_utils.encode_result(abi_types.MOCK_TOKEN_MINT, None) == b""
    assert abi_utils.decode_result(abi_types.MOCK_TOKEN_MINT, b"") is None


def test_ensure_address_checksums():
    checksummed = ensure_address(HOLDER)
    assert checksummed.lower() == HOLDER
    assert checksummed != HOLDER
    assert ensure_addresses([HOLDER, checksummed]) == [checksummed, checksummed]


@pytest.mark.parametrize("value", ["", "0x12", "0x" + "zz" * 20, None, b"\x00" * 20, 5])
def test_ensure_address_rejects(value):
    with pytest.raises(InvalidAddress):
        ensure_address(value)


def test_load_settings_defaults():
    assert load_settings({}) == ReaderSettings()


def test_load_settings_reads_environment():
    settings = load_settings(
        {
            "PORTFOLIO_RPC_URL": "http://node:8545",
            "PORTFOLIO_READER_ADDRESS": HOLDER,
            "PORTFOLIO_MAX_WORKERS": "6",
            "PORTFOLIO_CALL_TIMEOUT": "2.5",
            "PORTFOLIO_BLOCK": "finalized",
        }
    )
    assert settings.rpc_url == "http://node:8545"
    assert settings.reader_address == ensure_address(HOLDER)
    assert settings.max_workers == 6
    assert settings.call_timeout == 2.5
    assert settings.block_identifier == "finalized"


@pytest.mark.parametrize(
    "env",
    [
        {"PORTFOLIO_MAX_WORKERS": "many"},
        {"PORTFOLIO_MAX_WORKERS": "0"},
        {"PORTFOLIO_CALL_TIMEOUT": "-1"},
        {"PORTFOLIO_CALL_TIMEOUT": "soon"},
        {"PORTFOLIO_READER_ADDRESS": "0xabc"},
    ],
)
def test_load_settings_rejects_malformed_values(env):
    with pytest.raises(ConfigError):
        load_settings(env)


def test_deployment_record_roundtrip(tmp_path):
    reader = ensure_address("0x" + "0c" * 20)
    weth = ensure_address("0x" + "0e" * 20)
    usdc = ensure_address("0x" + "0d" * 20)
    path = write_deployment_record(
        tmp_path / "deployments" / "412346_latest.json",
        {"WETH": weth, constants.READER_DEPLOYMENT_NAME: reader, "USDC": usdc},
    )

    record = load_deployment_record(path)
    assert record.reader_address == reader
    assert record.tokens == {"WETH": weth, "USDC": usdc}
    assert record.token_addresses == [weth, usdc]


def test_deployment_record_skips_entries_without_address(tmp_path):
    path = tmp_path / "record.json"
    path.write_text(json.dumps({"network": "local", "ARB": {"address": "0x" + "0a" * 20}, "meta": {}}))

    record = load_deployment_record(path)
    assert list(record.tokens) == ["ARB"]
    assert record.reader_address is None


def test_missing_deployment_record(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_deployment_record(tmp_path / "absent.json")
