"""Portfolio reader module."""

from .client import PortfolioEntry, PortfolioReaderClient, read_portfolio
from .contract import PortfolioReader

__all__ = [
    "PortfolioEntry",
    "PortfolioReader",
    "PortfolioReaderClient",
    "read_portfolio",
]
