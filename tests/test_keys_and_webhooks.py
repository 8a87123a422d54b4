"""Unit tests for key helpers and webhook signatures."""

import base64

import base58
import pytest

from licensechain_solana.utils.errors import ValidationError
from licensechain_solana.utils.keys import decode_private_key, derive_public_key, generate_keypair, hash_message
from licensechain_solana.utils.validation import validate_private_key, validate_public_key
from licensechain_solana.utils.webhooks import (
    create_hmac_signature,
    create_webhook_signature,
    verify_hmac_signature,
    verify_webhook_signature,
)


# ===============================================================
# Keys
# ===============================================================

def test_generate_keypair_returns_consistent_pair():
    public_key, secret_key = generate_keypair()

    assert validate_public_key(public_key)
    assert validate_private_key(secret_key)
    assert derive_public_key(secret_key) == public_key


def test_generated_keypairs_differ():
    assert generate_keypair()[0] != generate_keypair()[0]


def test_derive_public_key_accepts_hex_and_base58():
    public_key, secret_key = generate_keypair()

    assert derive_public_key(secret_key.hex()) == public_key
    assert derive_public_key(base58.b58encode(secret_key).decode()) == public_key


def test_decode_private_key_rejects_wrong_length():
    with pytest.raises(ValidationError):
        decode_private_key(bytes(10))


def test_hash_message():
    assert hash_message("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


# ===============================================================
# Webhooks
# ===============================================================

def test_webhook_signature_xors_payload_with_secret():
    signature = create_webhook_signature("ab", "k")

    assert base64.b64decode(signature) == bytes([ord("a") ^ ord("k"), ord("b") ^ ord("k")])


def test_webhook_signature_verification():
    payload = '{"event":"license.created","id":"L1"}'
    signature = create_webhook_signature(payload, "secret")

    assert verify_webhook_signature(payload, signature, "secret")
    assert not verify_webhook_signature(payload, signature, "other-secret")
    assert not verify_webhook_signature(payload + " ", signature, "secret")


def test_webhook_signature_requires_secret():
    with pytest.raises(ValidationError):
        create_webhook_signature("payload", "")


def test_hmac_signature_verification():
    payload = '{"event":"license.created","id":"L1"}'
    signature = create_hmac_signature(payload, "secret")

    assert len(signature) == 64
    assert verify_hmac_signature(payload, signature, "secret")
    assert verify_hmac_signature(payload, signature.upper(), "secret")
    assert not verify_hmac_signature(payload, signature, "other-secret")
