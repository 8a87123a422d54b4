"""
Error taxonomy for the LicenseChain Solana SDK.

Every failure surfaced by the SDK is a SolanaError subclass carrying a stable
ErrorCode, so callers can branch on the kind or the code instead of the message.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    # General errors
    SOLANA_ERROR = "SOLANA_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Transport errors
    NETWORK_ERROR = "NETWORK_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"

    # Solana RPC errors
    RPC_ERROR = "RPC_ERROR"
    TRANSACTION_ERROR = "TRANSACTION_ERROR"
    ACCOUNT_ERROR = "ACCOUNT_ERROR"
    PROGRAM_ERROR = "PROGRAM_ERROR"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    BLOCK_NOT_FOUND = "BLOCK_NOT_FOUND"
    BLOCK_ERROR = "BLOCK_ERROR"
    BLOCKHASH_ERROR = "BLOCKHASH_ERROR"
    CLUSTER_ERROR = "CLUSTER_ERROR"
    VALIDATORS_ERROR = "VALIDATORS_ERROR"
    STAKE_ERROR = "STAKE_ERROR"

    # License errors
    LICENSE_CREATE_ERROR = "LICENSE_CREATE_ERROR"
    LICENSE_VALIDATE_ERROR = "LICENSE_VALIDATE_ERROR"
    LICENSE_GET_ERROR = "LICENSE_GET_ERROR"
    LICENSE_UPDATE_ERROR = "LICENSE_UPDATE_ERROR"
    LICENSE_REVOKE_ERROR = "LICENSE_REVOKE_ERROR"
    LICENSE_LIST_ERROR = "LICENSE_LIST_ERROR"
    LICENSE_EXTEND_ERROR = "LICENSE_EXTEND_ERROR"
    LICENSE_SUSPEND_ERROR = "LICENSE_SUSPEND_ERROR"
    LICENSE_UNSUSPEND_ERROR = "LICENSE_UNSUSPEND_ERROR"
    LICENSE_STATS_ERROR = "LICENSE_STATS_ERROR"

    # NFT errors
    NFT_CREATE_ERROR = "NFT_CREATE_ERROR"
    NFT_GET_ERROR = "NFT_GET_ERROR"
    NFT_TRANSFER_ERROR = "NFT_TRANSFER_ERROR"
    NFT_LIST_ERROR = "NFT_LIST_ERROR"
    NFT_UPDATE_ERROR = "NFT_UPDATE_ERROR"
    NFT_BURN_ERROR = "NFT_BURN_ERROR"
    NFT_UNLIST_ERROR = "NFT_UNLIST_ERROR"
    NFT_BUY_ERROR = "NFT_BUY_ERROR"
    NFT_STATS_ERROR = "NFT_STATS_ERROR"
    COLLECTION_CREATE_ERROR = "COLLECTION_CREATE_ERROR"
    COLLECTION_GET_ERROR = "COLLECTION_GET_ERROR"
    MARKETPLACE_LIST_ERROR = "MARKETPLACE_LIST_ERROR"

    # DeFi errors
    DEFI_POSITIONS_ERROR = "DEFI_POSITIONS_ERROR"
    DEFI_STATS_ERROR = "DEFI_STATS_ERROR"
    LIQUIDITY_POOLS_ERROR = "LIQUIDITY_POOLS_ERROR"
    ADD_LIQUIDITY_ERROR = "ADD_LIQUIDITY_ERROR"
    REMOVE_LIQUIDITY_ERROR = "REMOVE_LIQUIDITY_ERROR"
    SWAP_ERROR = "SWAP_ERROR"
    LENDING_POOLS_ERROR = "LENDING_POOLS_ERROR"
    SUPPLY_LIQUIDITY_ERROR = "SUPPLY_LIQUIDITY_ERROR"
    BORROW_LIQUIDITY_ERROR = "BORROW_LIQUIDITY_ERROR"
    REPAY_LIQUIDITY_ERROR = "REPAY_LIQUIDITY_ERROR"
    STAKING_POOLS_ERROR = "STAKING_POOLS_ERROR"
    STAKE_TOKENS_ERROR = "STAKE_TOKENS_ERROR"
    UNSTAKE_TOKENS_ERROR = "UNSTAKE_TOKENS_ERROR"
    CLAIM_REWARDS_ERROR = "CLAIM_REWARDS_ERROR"
    YIELD_FARMS_ERROR = "YIELD_FARMS_ERROR"
    FARM_YIELD_ERROR = "FARM_YIELD_ERROR"
    HARVEST_YIELD_ERROR = "HARVEST_YIELD_ERROR"


class SolanaError(Exception):
    """Base exception for all SDK errors."""

    default_code: ErrorCode = ErrorCode.SOLANA_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new SDK error.

        Args:
            message: Diagnostic message, not meant for pattern matching
            code: Error code, defaults to the class code
            details: Additional structured context
        """
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details
        }


class NetworkError(SolanaError):
    """Transport failure or non-2xx HTTP status."""

    default_code = ErrorCode.NETWORK_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        code: Optional[ErrorCode] = None
    ):
        self.status_code = status_code
        super().__init__(message, code=code, details=details)


class AuthenticationError(NetworkError):
    """Backend rejected the credentials (HTTP 401/403)."""

    default_code = ErrorCode.AUTHENTICATION_ERROR


class RateLimitError(NetworkError):
    """Backend is throttling requests (HTTP 429)."""

    default_code = ErrorCode.RATE_LIMIT_ERROR

    def __init__(
        self,
        message: str,
        retry_after: Optional[float] = None,
        status_code: Optional[int] = 429,
        details: Optional[Dict[str, Any]] = None
    ):
        self.retry_after = retry_after
        super().__init__(message, status_code=status_code, details=details)


class TimeoutError(NetworkError):
    """Request exceeded the configured deadline."""

    default_code = ErrorCode.TIMEOUT_ERROR

    def __init__(
        self,
        message: str,
        timeout: float,
        details: Optional[Dict[str, Any]] = None
    ):
        self.timeout = timeout
        super().__init__(message, details=details)


class RPCError(SolanaError):
    """JSON-RPC response carried an error object, or an unusable result."""

    default_code = ErrorCode.RPC_ERROR

    def __init__(
        self,
        message: str,
        rpc_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.rpc_code = rpc_code
        super().__init__(message, details=details)


class TransactionError(SolanaError):
    """Sending, confirming or fetching a transaction failed."""

    default_code = ErrorCode.TRANSACTION_ERROR

    def __init__(
        self,
        message: str,
        signature: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.signature = signature
        super().__init__(message, details=details)


class AccountError(SolanaError):
    """Account lookup failed or returned nothing."""

    default_code = ErrorCode.ACCOUNT_ERROR

    def __init__(
        self,
        message: str,
        account: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.account = account
        super().__init__(message, details=details)


class ProgramError(AccountError):
    """Program account lookup failed or returned nothing."""

    default_code = ErrorCode.PROGRAM_ERROR

    def __init__(
        self,
        message: str,
        program_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.program_id = program_id
        super().__init__(message, account=program_id, details=details)


class ValidationError(SolanaError):
    """Local input failed a precondition; no request was sent."""

    default_code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class InsufficientFundsError(SolanaError):
    """Balance is lower than what an operation requires."""

    default_code = ErrorCode.INSUFFICIENT_FUNDS

    def __init__(
        self,
        message: str,
        required: int,
        available: int,
        details: Optional[Dict[str, Any]] = None
    ):
        self.required = required
        self.available = available
        super().__init__(message, details=details)


class LicenseError(SolanaError):
    """License backend operation failed."""


class NFTError(SolanaError):
    """NFT backend operation failed."""


class DeFiError(SolanaError):
    """DeFi backend operation failed."""


def ensure_sufficient_funds(required: int, available: int) -> None:
    """Raise InsufficientFundsError when available lamports do not cover required.

    Args:
        required: Lamports needed
        available: Lamports held

    Raises:
        InsufficientFundsError: If available < required
    """
    if available < required:
        raise InsufficientFundsError(
            f"Insufficient funds: required {required}, available {available}",
            required=required,
            available=available,
            details={"shortfall": required - available}
        )
