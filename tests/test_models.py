"""Unit tests for the data models."""

from datetime import datetime, timezone

import pydantic
import pytest

from licensechain_solana.models import (
    NFT,
    Account,
    DeFiStats,
    License,
    LicenseStatus,
    NFTStats,
    Transaction,
    can_transition,
)
from licensechain_solana.utils.errors import ValidationError


# ===============================================================
# License lifecycle
# ===============================================================

@pytest.mark.parametrize("current,target", [
    (LicenseStatus.ACTIVE, LicenseStatus.EXPIRED),
    (LicenseStatus.ACTIVE, LicenseStatus.SUSPENDED),
    (LicenseStatus.ACTIVE, LicenseStatus.INACTIVE),
    (LicenseStatus.SUSPENDED, LicenseStatus.ACTIVE),
])
def test_allowed_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize("current,target", [
    (LicenseStatus.EXPIRED, LicenseStatus.ACTIVE),
    (LicenseStatus.INACTIVE, LicenseStatus.ACTIVE),
    (LicenseStatus.SUSPENDED, LicenseStatus.EXPIRED),
    (LicenseStatus.ACTIVE, LicenseStatus.ACTIVE),
])
def test_forbidden_transitions(current, target):
    assert not can_transition(current, target)


def test_transition_to_returns_copy(license_data):
    record = License.model_validate(license_data)

    suspended = record.transition_to(LicenseStatus.SUSPENDED)

    assert suspended.status == LicenseStatus.SUSPENDED
    assert record.status == LicenseStatus.ACTIVE
    assert suspended.transition_to("active").is_active


def test_transition_outside_lifecycle_raises(license_data):
    record = License.model_validate({**license_data, "status": "expired"})

    with pytest.raises(ValidationError) as exc_info:
        record.transition_to(LicenseStatus.ACTIVE)

    assert exc_info.value.details["from"] == "expired"


def test_unknown_status_raises():
    with pytest.raises(ValidationError):
        can_transition("active", "deleted")


def test_license_decodes_camel_case(license_data):
    record = License.model_validate(license_data)

    assert record.id == "L1"
    assert record.user_id == "u1"
    assert record.license_key == "K1"
    assert record.metadata == {"platform": "solana", "createdVia": "sdk"}


def test_license_is_expired(license_data):
    record = License.model_validate(license_data)

    assert not record.is_expired(now=datetime(2024, 6, 1, tzinfo=timezone.utc))
    assert record.is_expired(now=datetime(2025, 6, 1, tzinfo=timezone.utc))
    assert License.model_validate({**license_data, "expiresAt": None}).is_expired() is False


def test_license_is_frozen(license_data):
    record = License.model_validate(license_data)

    with pytest.raises(pydantic.ValidationError):
        record.status = LicenseStatus.EXPIRED


# ===============================================================
# Other models
# ===============================================================

def test_account_sol_balance():
    account = Account(public_key="acc", balance=1_500_000_000, is_executable=False, owner="own",
                      lamports=1_500_000_000)

    assert account.sol_balance == "1.5"
    assert account.to_payload()["isExecutable"] is False


def test_transaction_succeeded():
    assert Transaction(signature="sig").succeeded
    assert not Transaction(signature="sig", err={"InstructionError": [0, "Custom"]}).succeeded


def test_nft_creator_shares(nft_data):
    assert NFT.model_validate(nft_data).creator_shares_valid

    split = {**nft_data, "creators": [
        {"address": "a", "verified": True, "share": 60},
        {"address": "b", "verified": False, "share": 30},
    ]}
    assert not NFT.model_validate(split).creator_shares_valid


def test_nft_metadata_keeps_snake_case_keys(nft_data):
    nft = NFT.model_validate(nft_data)

    assert nft.metadata.attributes[0].trait_type == "tier"
    assert nft.to_payload()["metadata"]["attributes"][0] == {"trait_type": "tier", "value": "gold"}


def test_stats_aliases():
    nft_stats = NFTStats.model_validate({
        "totalNFTs": 10, "totalCollections": 2, "totalVolume": 5.5, "averagePrice": 0.5, "floorPrice": 0.1
    })
    defi_stats = DeFiStats.model_validate({
        "totalValueLocked": "100", "totalVolume24h": "10", "totalFees24h": "1",
        "activeUsers": 3, "totalPools": 4, "averageAPY": 12.5,
    })

    assert nft_stats.total_nfts == 10
    assert defi_stats.average_apy == 12.5
    assert defi_stats.total_volume24h == "10"
    assert defi_stats.total_fees24h == "1"
    assert defi_stats.model_dump(by_alias=True)["totalVolume24h"] == "10"
