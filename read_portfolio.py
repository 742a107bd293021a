#!/usr/bin/env python3
"""Read an account's token portfolio from a JSON-RPC node."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from portfolio_contracts.common.config import load_settings  # noqa: E402
from portfolio_contracts.common.deployments import load_deployment_record  # noqa: E402
from portfolio_contracts.common.errors import ConfigError, InvalidAddress  # noqa: E402
from portfolio_contracts.common.transport import Web3Caller, web3_client  # noqa: E402
from portfolio_contracts.common.validation import ensure_address  # noqa: E402
from portfolio_contracts.reader import (  # noqa: E402
    PortfolioEntry,
    PortfolioReader,
    PortfolioReaderClient,
    read_portfolio,
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    try:
        settings = load_settings()
    except ConfigError as exc:
        raise SystemExit(f"Invalid environment configuration: {exc}") from exc

    parser = argparse.ArgumentParser(description="Read token balances and labels for an account")
    parser.add_argument("account", help="Account whose balances are read")
    parser.add_argument(
        "--token",
        action="append",
        default=[],
        help="Token contract address to query (repeatable, order is kept)",
    )
    parser.add_argument(
        "--deployment",
        type=Path,
        help="Deployment record JSON supplying token and reader addresses",
    )
    parser.add_argument(
        "--reader",
        default=settings.reader_address,
        help="Deployed PortfolioReader address; when omitted calls fan out from this process",
    )
    parser.add_argument(
        "--rpc-url",
        default=settings.rpc_url,
        help=f"JSON-RPC endpoint (default: PORTFOLIO_RPC_URL or {settings.rpc_url})",
    )
    parser.add_argument(
        "--block",
        default=settings.block_identifier,
        help="Block identifier the calls are made against (default: latest)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=settings.max_workers,
        help="Concurrent calls when fanning out locally (default: 1, sequential)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.call_timeout,
        help="Request timeout in seconds",
    )
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log absorbed per-token failures")
    return parser.parse_args(argv)


def resolve_tokens(args: argparse.Namespace) -> List[str]:
    tokens: List[str] = []
    if args.deployment is not None:
        record = load_deployment_record(args.deployment)
        tokens.extend(record.token_addresses)
        if args.reader is None:
            args.reader = record.reader_address
    tokens.extend(args.token)
    return tokens


def format_entries(entries: Sequence[PortfolioEntry]) -> str:
    lines = ["token\tsymbol\tname\tbalance"]
    for entry in entries:
        symbol = entry.symbol or "?"
        name = entry.name or "?"
        lines.append(f"{entry.token}\t{symbol}\t{name}\t{entry.balance}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        account = ensure_address(args.account)
    except InvalidAddress as exc:
        raise SystemExit(str(exc)) from exc

    tokens = resolve_tokens(args)
    if not tokens:
        raise SystemExit("No tokens to read. Use --token or --deployment.")

    w3 = web3_client(args.rpc_url, args.timeout)
    caller = Web3Caller(w3, args.block)
    if args.reader:
        source = PortfolioReaderClient(caller, args.reader)
        print(f"Reading {len(tokens)} tokens through reader {source.reader_address}")
    else:
        source = PortfolioReader(caller, max_workers=args.max_workers, call_timeout=args.timeout)
        print(f"Reading {len(tokens)} tokens directly from {args.rpc_url}")

    entries = read_portfolio(source, account, tokens)
    if args.json:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2))
    else:
        print(format_entries(entries))


if __name__ == "__main__":
    main()
