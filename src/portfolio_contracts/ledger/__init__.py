"""Mock token ledger module."""

from .contract import MockToken

__all__ = [
    "MockToken",
]
