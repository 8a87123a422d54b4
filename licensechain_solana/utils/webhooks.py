"""Webhook payload signatures.

``create_webhook_signature`` reproduces the LicenseChain backend's legacy
scheme: the payload is XOR-ed with the repeating secret and base64 encoded.
It is NOT a message authentication code and offers no integrity guarantee;
it exists for compatibility with endpoints that still emit it. Use the
``*_hmac_signature`` functions wherever the signature is a trust boundary.
"""

import base64
import hashlib
import hmac

from licensechain_solana.utils.errors import ValidationError


def _require_secret(secret: str) -> bytes:
    if not secret:
        raise ValidationError("Webhook secret is required")
    return secret.encode("utf-8")


def create_webhook_signature(payload: str, secret: str) -> str:
    """Create a legacy XOR webhook signature.

    Args:
        payload: Raw webhook body
        secret: Shared secret

    Returns:
        Base64 encoded signature

    Raises:
        ValidationError: If the secret is empty
    """
    key = _require_secret(secret)
    data = payload.encode("utf-8")
    mixed = bytes(byte ^ key[i % len(key)] for i, byte in enumerate(data))
    return base64.b64encode(mixed).decode("ascii")


def verify_webhook_signature(payload: str, signature: str, secret: str) -> bool:
    """Check a legacy XOR webhook signature."""
    expected = create_webhook_signature(payload, secret)
    return hmac.compare_digest(signature.encode("ascii", "replace"), expected.encode("ascii"))


def create_hmac_signature(payload: str, secret: str) -> str:
    """Create an HMAC-SHA256 hex signature of the payload.

    Args:
        payload: Raw webhook body
        secret: Shared secret

    Returns:
        Lowercase hex digest
    """
    key = _require_secret(secret)
    return hmac.new(key, payload.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_hmac_signature(payload: str, signature: str, secret: str) -> bool:
    """Check an HMAC-SHA256 hex signature in constant time."""
    expected = create_hmac_signature(payload, secret)
    return hmac.compare_digest(signature.lower(), expected)
