"""Key helpers backed by solders' Ed25519 implementation."""

import hashlib
from typing import Tuple, Union

import base58
from solders.keypair import Keypair

from licensechain_solana.utils.errors import ValidationError
from licensechain_solana.utils.validation import HEX_PATTERN, validate_private_key


def generate_keypair() -> Tuple[str, bytes]:
    """
    Generate a new Ed25519 keypair.

    Returns:
        Tuple of (base58 public key, 64-byte secret key)

    Example:
        >>> public_key, secret_key = generate_keypair()
    """
    keypair = Keypair()
    return str(keypair.pubkey()), bytes(keypair)


def decode_private_key(private_key: Union[bytes, bytearray, str]) -> bytes:
    """
    Decode a secret key given as raw bytes, hex or base58.

    Raises:
        ValidationError: If the key does not decode to 64 bytes
    """
    if not validate_private_key(private_key):
        raise ValidationError("Invalid private key format")
    if isinstance(private_key, (bytes, bytearray)):
        return bytes(private_key)
    if HEX_PATTERN.fullmatch(private_key):
        return bytes.fromhex(private_key)
    return base58.b58decode(private_key)


def derive_public_key(private_key: Union[bytes, bytearray, str]) -> str:
    """
    Derive the base58 public key belonging to a secret key.

    Args:
        private_key: 64-byte secret key, raw or hex/base58 encoded

    Returns:
        Base58 public key

    Raises:
        ValidationError: If the key is malformed or inconsistent
    """
    secret = decode_private_key(private_key)
    try:
        keypair = Keypair.from_bytes(secret)
    except ValueError as e:
        raise ValidationError("Secret key does not match its public half", details={"reason": str(e)})
    return str(keypair.pubkey())


def hash_message(message: str) -> str:
    """Return the SHA-256 hex digest of a UTF-8 message."""
    return hashlib.sha256(message.encode("utf-8")).hexdigest()
