"""Error taxonomy for the portfolio contracts."""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for portfolio contract failures."""


class AlreadyInitialized(PortfolioError):
    """Raised when ``initialize`` is called on an initialized reader."""


class InvalidAddress(PortfolioError, ValueError):
    """Raised when a value is not a 20-byte hex address."""


class InvalidAmount(PortfolioError, ValueError):
    """Raised when a value does not fit in an unsigned 256-bit integer."""


class ExecutionReverted(PortfolioError):
    """Raised when a contract call reverts."""

    def __init__(self, data: bytes = b"", message: str | None = None) -> None:
        self.data = bytes(data)
        super().__init__(message or f"execution reverted: {self.data!r}")


class ReaderUnavailable(PortfolioError):
    """Raised when a deployed reader returns data that cannot be decoded."""


class ConfigError(PortfolioError, ValueError):
    """Raised when environment configuration is malformed."""
