"""Validation utilities for the LicenseChain Solana SDK.

This module provides utilities for validating Solana-specific data before it
is sent anywhere.
"""

import html
import re
from typing import Any, Dict, Optional, Union

import base58

from licensechain_solana.utils.errors import ValidationError

# Solana public key validation pattern (base58 format)
PUBKEY_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

# Transaction signatures are base58 encoded 64-byte values
SIGNATURE_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{43,128}$")

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")

BASE58_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]+")

SECRET_KEY_LENGTH = 64


def validate_public_key(pubkey: Any) -> bool:
    """Validate a Solana public key.

    Args:
        pubkey: The public key to validate

    Returns:
        True if the public key is valid, False otherwise
    """
    if not pubkey or not isinstance(pubkey, str):
        return False
    return bool(PUBKEY_PATTERN.fullmatch(pubkey))


def is_valid_solana_address(address: Any) -> bool:
    """Alias of validate_public_key for address-shaped values."""
    return validate_public_key(address)


def validate_private_key(private_key: Union[bytes, bytearray, str, None]) -> bool:
    """Validate a Solana secret key.

    Accepts 64 raw bytes, their hex encoding, or their base58 encoding
    (the format exported by the Solana CLI and most wallets).

    Args:
        private_key: The secret key to validate

    Returns:
        True if the key decodes to exactly 64 bytes, False otherwise
    """
    if isinstance(private_key, (bytes, bytearray)):
        return len(private_key) == SECRET_KEY_LENGTH
    if not private_key or not isinstance(private_key, str):
        return False

    if HEX_PATTERN.fullmatch(private_key):
        try:
            return len(bytes.fromhex(private_key)) == SECRET_KEY_LENGTH
        except ValueError:
            return False

    if not BASE58_PATTERN.fullmatch(private_key):
        return False
    try:
        return len(base58.b58decode(private_key)) == SECRET_KEY_LENGTH
    except ValueError:
        return False


def validate_transaction_signature(signature: Any) -> bool:
    """Validate a Solana transaction signature.

    Args:
        signature: The transaction signature to validate

    Returns:
        True if the signature is valid, False otherwise
    """
    if not signature or not isinstance(signature, str):
        return False
    return bool(SIGNATURE_PATTERN.fullmatch(signature))


def format_public_key(pubkey: Any) -> str:
    """Return the public key unchanged if valid.

    Args:
        pubkey: The public key to check

    Returns:
        The validated public key

    Raises:
        ValidationError: If the public key is malformed
    """
    if not validate_public_key(pubkey):
        raise ValidationError("Invalid public key format", details={"public_key": pubkey})
    return pubkey


def require_fields(message: str, **fields: Any) -> None:
    """Raise ValidationError when any of the given fields is empty.

    Args:
        message: Error message to raise with
        fields: Field name to value

    Raises:
        ValidationError: If a field is None, empty or zero
    """
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(message, details={"missing": missing})


def require_addresses(message: str = "Invalid address format", **addresses: Optional[str]) -> None:
    """Raise ValidationError when any of the given addresses is malformed.

    Args:
        message: Error message to raise with
        addresses: Field name to address

    Raises:
        ValidationError: If an address is not a valid public key
    """
    invalid = [name for name, value in addresses.items() if not validate_public_key(value)]
    if invalid:
        raise ValidationError(message, details={"invalid": invalid})


def sanitize_input(value: Any) -> Any:
    """HTML-escape strings, recursing into lists and dictionaries.

    Args:
        value: Value to sanitize

    Returns:
        Sanitized copy of the value
    """
    if isinstance(value, str):
        return html.escape(value, quote=True)
    if isinstance(value, (list, tuple)):
        return [sanitize_input(item) for item in value]
    if isinstance(value, dict):
        sanitized: Dict[Any, Any] = {}
        for key, item in value.items():
            sanitized[key] = sanitize_input(item)
        return sanitized
    return value
