"""Reusable validation routines."""

from __future__ import annotations

from typing import Any, Iterable, List

from eth_utils import is_address, to_checksum_address

from . import constants
from .errors import InvalidAddress, InvalidAmount


def ensure_address(value: Any) -> str:
    if not isinstance(value, str) or not is_address(value):
        raise InvalidAddress(f"Not a 20-byte hex address: {value!r}")
    return to_checksum_address(value)


def ensure_addresses(values: Iterable[Any]) -> List[str]:
    return [ensure_address(value) for value in values]


def ensure_uint256(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(f"Amount must be an integer, got {value!r}")
    if value < 0 or value > constants.UINT256_MAX:
        raise InvalidAmount(f"Amount {value} does not fit in uint256")
    return value
