"""Read and write deployment records keyed by contract name."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from . import constants
from .validation import ensure_address


@dataclass
class DeploymentRecord:
    tokens: Dict[str, str] = field(default_factory=dict)
    reader_address: Optional[str] = None

    @property
    def token_addresses(self) -> List[str]:
        return list(self.tokens.values())


def write_deployment_record(path: Path, deployments: Mapping[str, str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    record = {name: {"address": address} for name, address in deployments.items()}
    path.write_text(json.dumps(record, indent=2))
    return path


def load_deployment_record(path: Path) -> DeploymentRecord:
    if not path.exists():
        raise FileNotFoundError(f"Missing deployment record at {path}")
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)

    record = DeploymentRecord()
    for name, entry in raw.items():
        if not isinstance(entry, dict) or "address" not in entry:
            continue
        address = ensure_address(entry["address"])
        if name == constants.READER_DEPLOYMENT_NAME:
            record.reader_address = address
        else:
            record.tokens[name] = address
    return record
