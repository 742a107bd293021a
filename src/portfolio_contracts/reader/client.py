"""Client for a deployed reader and portfolio assembly."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Protocol

from ..common import abi_types, abi_utils
from ..common.abi_types import EntryPoint
from ..common.errors import ReaderUnavailable
from ..common.transport import ContractCaller
from ..common.validation import ensure_address, ensure_addresses


class BatchSource(Protocol):
    """Anything answering the three batch reads with one result per token, in order."""

    def get_balances(self, user: str, tokens: Iterable[str]) -> List[int]:
        ...

    def get_symbols(self, tokens: Iterable[str]) -> List[str]:
        ...

    def get_names(self, tokens: Iterable[str]) -> List[str]:
        ...


@dataclass(frozen=True)
class PortfolioEntry:
    token: str
    symbol: str
    name: str
    balance: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class PortfolioReaderClient:
    """Call a reader contract at ``reader_address``: one outer call per batch.

    Unlike the reader itself this client does not absorb failures: a revert or
    transport error on the outer call propagates to the caller.
    """

    def __init__(self, caller: ContractCaller, reader_address: str) -> None:
        self._caller = caller
        self._reader_address = ensure_address(reader_address)

    @property
    def reader_address(self) -> str:
        return self._reader_address

    def get_balances(self, user: str, tokens: Iterable[str]) -> List[int]:
        account = ensure_address(user)
        targets = ensure_addresses(tokens)
        return self._invoke(abi_types.READER_GET_BALANCES, len(targets), account, targets)

    def get_symbols(self, tokens: Iterable[str]) -> List[str]:
        targets = ensure_addresses(tokens)
        return self._invoke(abi_types.READER_GET_SYMBOLS, len(targets), targets)

    def get_names(self, tokens: Iterable[str]) -> List[str]:
        targets = ensure_addresses(tokens)
        return self._invoke(abi_types.READER_GET_NAMES, len(targets), targets)

    def _invoke(self, entry: EntryPoint, expected: int, *args: Any) -> List[Any]:
        data = self._caller.call(self._reader_address, abi_utils.encode_call(entry, *args))
        try:
            decoded = list(abi_utils.decode_result(entry, data))
        except Exception as exc:  # noqa: BLE001 - eth_abi raises several decoding error types
            raise ReaderUnavailable(
                f"{entry.name} on {self._reader_address} returned undecodable data ({len(data)} bytes)"
            ) from exc
        if len(decoded) != expected:
            raise ReaderUnavailable(
                f"{entry.name} on {self._reader_address} returned {len(decoded)} results for {expected} tokens"
            )
        return decoded


def read_portfolio(source: BatchSource, user: str, tokens: Iterable[str]) -> List[PortfolioEntry]:
    """Run the three batches and combine them position by position."""

    targets = list(tokens)
    balances = source.get_balances(user, targets)
    symbols = source.get_symbols(targets)
    names = source.get_names(targets)
    if not len(balances) == len(symbols) == len(names) == len(targets):
        raise ReaderUnavailable(
            f"batch lengths disagree for {len(targets)} tokens: "
            f"{len(balances)} balances, {len(symbols)} symbols, {len(names)} names"
        )
    return [
        PortfolioEntry(token=token, symbol=symbol, name=name, balance=balance)
        for token, symbol, name, balance in zip(targets, symbols, names, balances)
    ]
