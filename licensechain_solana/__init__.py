"""LicenseChain Solana SDK.

This package provides an async client for the Solana JSON-RPC interface and
the LicenseChain license, NFT and DeFi backend, with local validation, typed
models and a unified error taxonomy.
"""

from licensechain_solana.clients import (
    AccountClient,
    ClusterClient,
    DeFiManager,
    LicenseChainSolana,
    LicenseManager,
    NFTManager,
    TransactionClient,
)
from licensechain_solana.config import SolanaConfig, get_cluster_info, get_solana_config
from licensechain_solana.logging_config import configure_logging
from licensechain_solana.utils.errors import (
    AccountError,
    AuthenticationError,
    DeFiError,
    ErrorCode,
    InsufficientFundsError,
    LicenseError,
    NetworkError,
    NFTError,
    ProgramError,
    RateLimitError,
    RPCError,
    SolanaError,
    TimeoutError,
    TransactionError,
    ValidationError,
)

__version__ = "1.0.0"
__author__ = "LicenseChain"
__email__ = "support@licensechain.com"

__all__ = [
    "LicenseChainSolana",
    "AccountClient",
    "TransactionClient",
    "ClusterClient",
    "LicenseManager",
    "NFTManager",
    "DeFiManager",
    "SolanaConfig",
    "get_solana_config",
    "get_cluster_info",
    "configure_logging",
    "ErrorCode",
    "SolanaError",
    "NetworkError",
    "AuthenticationError",
    "RateLimitError",
    "TimeoutError",
    "RPCError",
    "TransactionError",
    "AccountError",
    "ProgramError",
    "ValidationError",
    "InsufficientFundsError",
    "LicenseError",
    "NFTError",
    "DeFiError",
]
