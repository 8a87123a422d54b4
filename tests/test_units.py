"""Unit tests for unit conversion, formatting and estimate helpers."""

from decimal import Decimal

import pytest

from licensechain_solana.utils.errors import ValidationError
from licensechain_solana.utils.estimates import calculate_rent_exempt_minimum, estimate_transaction_fee
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


@pytest.mark.parametrize("value,decimals,expected", [
    ("1.5", 9, 1_500_000_000),
    ("0.000000001", 9, 1),
    ("42", 0, 42),
    (".5", 2, 50),
    ("-2.25", 2, -225),
    ("1.23456789", 2, 123),
])
def test_parse_units(value, decimals, expected):
    assert parse_units(value, decimals) == expected


@pytest.mark.parametrize("value,decimals,expected", [
    (1_500_000_000, 9, "1.5"),
    (1_000_000_000, 9, "1"),
    (1, 9, "0.000000001"),
    (0, 9, "0"),
    (-225, 2, "-2.25"),
    ("12345", 3, "12.345"),
])
def test_format_units(value, decimals, expected):
    assert format_units(value, decimals) == expected


@pytest.mark.parametrize("text", ["1.5", "0.000000001", "123456789.987654321", "-7.25", "1000"])
def test_format_parse_round_trip(text):
    assert format_units(parse_units(text, 9), 9) == text


@pytest.mark.parametrize("value", ["", ".", "abc", "1.2.3", "1e9", None, 1.5])
def test_parse_units_rejects_malformed_input(value):
    with pytest.raises(ValidationError):
        parse_units(value, 9)


def test_format_units_rejects_non_integers():
    with pytest.raises(ValidationError):
        format_units("1.5", 9)
    with pytest.raises(ValidationError):
        format_units(True, 9)


@pytest.mark.parametrize("value", [1.9, 1.0, 1500000000.0])
def test_format_units_rejects_floats(value):
    with pytest.raises(ValidationError):
        format_units(value, 9)


def test_negative_decimals_rejected():
    with pytest.raises(ValidationError):
        parse_units("1", -1)
    with pytest.raises(ValidationError):
        format_units(1, -1)


def test_lamport_helpers():
    assert parse_lamports("2.5") == 2_500_000_000
    assert format_lamports(2_500_000_000) == "2.5"
    assert lamports_to_sol(1_500_000_000) == Decimal("1.5")


def test_format_token_amount():
    assert format_token_amount("1234567.891", 2) == "1,234,567.89"
    assert format_token_amount(1000, 2) == "1,000"
    assert format_token_amount("0.005", 2) == "0.01"
    assert format_token_amount("-1234.5", 2) == "-1,234.5"


@pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
def test_format_token_amount_rejects_invalid(value):
    with pytest.raises(ValidationError):
        format_token_amount(value)


def test_shorten_address():
    assert shorten_address("9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM") == "9WzD...AWWM"
    assert shorten_address("short") == "short"


def test_calculate_apy():
    assert calculate_apy(1000, 1, 30) == pytest.approx(36.5)
    assert calculate_apy(0, 1, 30) == 0.0
    assert calculate_apy(1000, 1, 0) == 0.0


@pytest.mark.parametrize("ms,expected", [
    (500, "500ms"),
    (5_000, "5s"),
    (125_000, "2m 5s"),
    (3_720_000, "1h 2m"),
])
def test_format_duration(ms, expected):
    assert format_duration(ms) == expected


def test_estimate_transaction_fee():
    assert estimate_transaction_fee(0) == 6000
    assert estimate_transaction_fee(3, 2) == 5000 + 600 + 2000


def test_estimate_transaction_fee_rejects_negative_counts():
    with pytest.raises(ValidationError):
        estimate_transaction_fee(-1)


def test_calculate_rent_exempt_minimum():
    assert calculate_rent_exempt_minimum(0) == 890_880
    assert calculate_rent_exempt_minimum(165) == 890_880 + 16_500
    assert calculate_rent_exempt_minimum(10, is_executable=True) == 890_880 + 1_000 + 1_000_000
