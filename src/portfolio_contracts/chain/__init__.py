"""Local chain module."""

from .local import LocalChain, contract_address, seed_mock_tokens

__all__ = [
    "LocalChain",
    "contract_address",
    "seed_mock_tokens",
]
