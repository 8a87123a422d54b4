"""Validation, formatting and error utilities for the LicenseChain Solana SDK."""

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
    ensure_sufficient_funds,
)
from licensechain_solana.utils.estimates import calculate_rent_exempt_minimum, estimate_transaction_fee
from licensechain_solana.utils.keys import decode_private_key, derive_public_key, generate_keypair, hash_message
from licensechain_solana.utils.retry import async_retry, retry, sleep
from licensechain_solana.utils.units import (
    calculate_apy,
    format_duration,
    format_lamports,
    format_token_amount,
    format_units,
    lamports_to_sol,
    parse_lamports,
    parse_units,
    shorten_address,
)
from licensechain_solana.utils.validation import (
    format_public_key,
    is_valid_solana_address,
    sanitize_input,
    validate_private_key,
    validate_public_key,
    validate_transaction_signature,
)
from licensechain_solana.utils.webhooks import (
    create_hmac_signature,
    create_webhook_signature,
    verify_hmac_signature,
    verify_webhook_signature,
)

__all__ = [
    'AccountError',
    'AuthenticationError',
    'DeFiError',
    'ErrorCode',
    'InsufficientFundsError',
    'LicenseError',
    'NetworkError',
    'NFTError',
    'ProgramError',
    'RateLimitError',
    'RPCError',
    'SolanaError',
    'TimeoutError',
    'TransactionError',
    'ValidationError',
    'ensure_sufficient_funds',
    'calculate_rent_exempt_minimum',
    'estimate_transaction_fee',
    'decode_private_key',
    'derive_public_key',
    'generate_keypair',
    'hash_message',
    'async_retry',
    'retry',
    'sleep',
    'calculate_apy',
    'format_duration',
    'format_lamports',
    'format_token_amount',
    'format_units',
    'lamports_to_sol',
    'parse_lamports',
    'parse_units',
    'shorten_address',
    'format_public_key',
    'is_valid_solana_address',
    'sanitize_input',
    'validate_private_key',
    'validate_public_key',
    'validate_transaction_signature',
    'create_hmac_signature',
    'create_webhook_signature',
    'verify_hmac_signature',
    'verify_webhook_signature',
]
