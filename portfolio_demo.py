#!/usr/bin/env python3
"""Seed a local chain with mock tokens and compare batched and per-token reads."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from portfolio_contracts.chain import LocalChain, seed_mock_tokens  # noqa: E402
from portfolio_contracts.common import abi_types, abi_utils, constants  # noqa: E402
from portfolio_contracts.common.deployments import write_deployment_record  # noqa: E402
from portfolio_contracts.reader import (  # noqa: E402
    PortfolioEntry,
    PortfolioReader,
    PortfolioReaderClient,
    read_portfolio,
)

DEFAULT_ACCOUNT = "0x00000000000000000000000000000000000000A1"
UNRELATED_ADDRESS = "0x000000000000000000000000000000000000dead"


def deploy_demo(chain: LocalChain) -> Tuple[List[str], str]:
    tokens = seed_mock_tokens(chain)
    reader_address = chain.deploy(PortfolioReader(chain), name=constants.READER_DEPLOYMENT_NAME)
    chain.transact(reader_address, abi_utils.encode_call(abi_types.READER_INITIALIZE))
    return list(tokens.values()), reader_address


def mint_all(chain: LocalChain, tokens: Sequence[str], account: str, whole_units: int) -> None:
    for token, (_name, decimals) in zip(tokens, constants.MOCK_TOKEN_METADATA.values()):
        amount = whole_units * 10**decimals
        chain.transact(token, abi_utils.encode_call(abi_types.MOCK_TOKEN_MINT, account, amount))


class CountingCaller:
    """Count the calls a client issues, leaving nested contract calls out."""

    def __init__(self, inner: LocalChain) -> None:
        self._inner = inner
        self._lock = threading.Lock()
        self.calls = 0

    def call(self, to: str, data: bytes) -> bytes:
        with self._lock:
            self.calls += 1
        return self._inner.call(to, data)


def timed(caller: CountingCaller, read: Callable[[], List[PortfolioEntry]]) -> Tuple[List[PortfolioEntry], int, float]:
    start = time.perf_counter()
    entries = read()
    elapsed = time.perf_counter() - start
    return entries, caller.calls, elapsed


def format_units(amount: int, decimals: int) -> str:
    whole, fraction = divmod(amount, 10**decimals)
    if not fraction:
        return str(whole)
    return f"{whole}.{str(fraction).rjust(decimals, '0').rstrip('0')}"


def print_entries(entries: Sequence[PortfolioEntry]) -> None:
    decimals = {symbol: meta[1] for symbol, meta in constants.MOCK_TOKEN_METADATA.items()}
    for entry in entries:
        if not entry.symbol:
            print(f"  {entry.token}: unreadable")
            continue
        amount = format_units(entry.balance, decimals.get(entry.symbol, 0))
        print(f"  {entry.symbol:<6} {entry.name:<18} {amount}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Local portfolio reader demo")
    parser.add_argument(
        "--account",
        default=DEFAULT_ACCOUNT,
        help="Account that receives the minted balances",
    )
    parser.add_argument(
        "--amount",
        type=int,
        default=500,
        help="Whole token units minted per token (default: 500)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=1,
        help="Concurrent calls for the per-token read (default: 1)",
    )
    parser.add_argument(
        "--record",
        type=Path,
        help="Write the deployment record JSON to this path",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    chain = LocalChain()
    tokens, reader_address = deploy_demo(chain)
    print(f"Deployed {len(tokens)} mock tokens and PortfolioReader at {reader_address}")

    mint_all(chain, tokens, args.account, args.amount)
    targets = tokens + [UNRELATED_ADDRESS]

    batched_caller = CountingCaller(chain)
    client = PortfolioReaderClient(batched_caller, reader_address)
    batched, batched_calls, batched_time = timed(
        batched_caller, lambda: read_portfolio(client, args.account, targets)
    )
    direct_caller = CountingCaller(chain)
    direct = PortfolioReader(direct_caller, max_workers=args.max_workers)
    individual, individual_calls, individual_time = timed(
        direct_caller, lambda: read_portfolio(direct, args.account, targets)
    )

    print("Batched through the reader contract:")
    print_entries(batched)
    print(f"  {batched_calls} calls ({batched_time * 1000:.2f} ms)")
    print("Per-token calls from this process:")
    print(f"  {individual_calls} calls ({individual_time * 1000:.2f} ms)")
    if batched != individual:
        raise SystemExit("Batched and per-token reads disagree")

    if args.record:
        path = write_deployment_record(args.record, chain.deployments)
        print(f"Recorded deployment at {path}")


if __name__ == "__main__":
    main()
