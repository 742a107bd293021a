"""Shared constants for the portfolio contracts."""

from typing import Dict, Tuple

ADDRESS_BYTES = 20

UINT256_MODULUS = 2**256
UINT256_MAX = UINT256_MODULUS - 1

# Values substituted for a target that cannot be read.
DEFAULT_BALANCE = 0
DEFAULT_LABEL = ""

ALREADY_INITIALIZED_MESSAGE = "Already initialized"
ALREADY_INITIALIZED_REVERT = ALREADY_INITIALIZED_MESSAGE.encode("utf-8")

MUTABILITY_VIEW = "view"
MUTABILITY_NONPAYABLE = "nonpayable"

READER_DEPLOYMENT_NAME = "PortfolioReader"

DEFAULT_RPC_URL = "http://127.0.0.1:8547"
DEFAULT_BLOCK_IDENTIFIER = "latest"
DEFAULT_MAX_WORKERS = 1
DEFAULT_CALL_TIMEOUT = 10.0

LOCAL_CHAIN_ID = 412346
LOCAL_DEPLOYER = "0x3f1eae7d46d88f08fc2f8ed27fcb2ab183eb2d0e"

# symbol -> (name, decimals)
MOCK_TOKEN_METADATA: Dict[str, Tuple[str, int]] = {
    "WETH": ("Wrapped ETH", 18),
    "USDC": ("USD Coin", 6),
    "ARB": ("Arbitrum", 18),
    "WBTC": ("Wrapped Bitcoin", 8),
    "DAI": ("Dai Stablecoin", 18),
    "LINK": ("Chainlink", 18),
    "UNI": ("Uniswap", 18),
    "MATIC": ("Polygon", 18),
    "AAVE": ("Aave", 18),
    "CRV": ("Curve", 18),
}
