"""Environment configuration for reader tooling."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import constants
from .errors import ConfigError, InvalidAddress
from .validation import ensure_address

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ENV_PREFIX = "PORTFOLIO_"


@dataclass
class ReaderSettings:
    rpc_url: str = constants.DEFAULT_RPC_URL
    reader_address: Optional[str] = None
    max_workers: int = constants.DEFAULT_MAX_WORKERS
    call_timeout: float = constants.DEFAULT_CALL_TIMEOUT
    block_identifier: str = constants.DEFAULT_BLOCK_IDENTIFIER


def load_env(path: str | None = None) -> dict[str, str]:
    env_path = Path(path or PROJECT_ROOT / ".env")
    if env_path.exists():
        load_dotenv(str(env_path))
    load_dotenv()
    return {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}


def load_settings(env: Optional[Mapping[str, str]] = None) -> ReaderSettings:
    env = load_env() if env is None else env
    settings = ReaderSettings()

    settings.rpc_url = env.get("PORTFOLIO_RPC_URL") or settings.rpc_url
    settings.block_identifier = env.get("PORTFOLIO_BLOCK") or settings.block_identifier

    reader = env.get("PORTFOLIO_READER_ADDRESS")
    if reader:
        try:
            settings.reader_address = ensure_address(reader)
        except InvalidAddress as exc:
            raise ConfigError(f"PORTFOLIO_READER_ADDRESS: {exc}") from exc

    workers = env.get("PORTFOLIO_MAX_WORKERS")
    if workers:
        try:
            settings.max_workers = int(workers)
        except ValueError as exc:
            raise ConfigError(f"PORTFOLIO_MAX_WORKERS must be an integer, got {workers!r}") from exc
        if settings.max_workers < 1:
            raise ConfigError("PORTFOLIO_MAX_WORKERS must be at least 1")

    timeout = env.get("PORTFOLIO_CALL_TIMEOUT")
    if timeout:
        try:
            settings.call_timeout = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"PORTFOLIO_CALL_TIMEOUT must be a number, got {timeout!r}") from exc
        if settings.call_timeout <= 0:
            raise ConfigError("PORTFOLIO_CALL_TIMEOUT must be positive")

    return settings
