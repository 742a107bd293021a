#!/usr/bin/env python3
"""Export the JSON ABI of the portfolio contracts."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from portfolio_contracts.common.abi_types import EntryPoint  # noqa: E402
from portfolio_contracts.ledger import MockToken  # noqa: E402
from portfolio_contracts.reader import PortfolioReader  # noqa: E402

BUILD_DIR = PROJECT_ROOT / "build"

CONTRACTS: Dict[str, Tuple[EntryPoint, ...]] = {
    "mock_token": MockToken.ENTRY_POINTS,
    "portfolio_reader": PortfolioReader.ENTRY_POINTS,
}


def build_abi(entry_points: Sequence[EntryPoint]) -> list:
    return [entry.to_abi() for entry in entry_points]


def export_contract(name: str, out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{name}_abi.json"
    path.write_text(json.dumps(build_abi(CONTRACTS[name]), indent=2))
    return path


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Export portfolio contract ABIs to JSON")
    parser.add_argument(
        "--contract",
        choices=sorted(CONTRACTS.keys()),
        action="append",
        help="Export only the selected contract(s)",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=BUILD_DIR,
        help="Directory receiving the ABI files (default: build/)",
    )
    args = parser.parse_args(argv)

    names = args.contract if args.contract else sorted(CONTRACTS.keys())
    for name in names:
        path = export_contract(name, args.out_dir)
        print(f"Wrote {path} ({len(CONTRACTS[name])} functions)")


if __name__ == "__main__":
    main()
