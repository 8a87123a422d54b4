"""
Unit conversion and display formatting helpers.

Amounts travel as integers in base units (lamports, raw token amounts) and as
decimal strings for display. Conversions here are exact and never go through
floating point.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from licensechain_solana.constants import LAMPORTS_PER_SOL, SOL_DECIMALS
from licensechain_solana.utils.errors import ValidationError

DECIMAL_PATTERN = re.compile(r"^(-?)(\d*)(?:\.(\d*))?$")


def parse_units(value: str, decimals: int = SOL_DECIMALS) -> int:
    """
    Convert a decimal string into an integer amount of base units.

    Fractional digits beyond ``decimals`` are truncated.

    Args:
        value: Decimal string such as "1.5"
        decimals: Number of decimal places of the unit

    Returns:
        Integer amount in base units

    Raises:
        ValidationError: If value is not a decimal string or decimals is negative

    Example:
        >>> parse_units("1.5", 9)
        1500000000
    """
    if decimals < 0:
        raise ValidationError("Decimals must be non-negative", details={"decimals": decimals})

    match = DECIMAL_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match or not (match.group(2) or match.group(3)):
        raise ValidationError("Invalid decimal amount", details={"value": value})

    sign, integer, fraction = match.group(1), match.group(2) or "0", match.group(3) or ""
    padded_fraction = fraction.ljust(decimals, "0")[:decimals]
    amount = int(integer + padded_fraction)
    return -amount if sign else amount


def format_units(value: Union[int, str], decimals: int = SOL_DECIMALS) -> str:
    """
    Convert an integer amount of base units into a decimal string.

    Trailing fractional zeros are trimmed and the decimal point is omitted
    when the amount is a whole number.

    Args:
        value: Amount in base units, as an int or an integer string
        decimals: Number of decimal places of the unit

    Returns:
        Decimal string

    Raises:
        ValidationError: If value is not an integer or decimals is negative

    Example:
        >>> format_units(1500000000, 9)
        '1.5'
    """
    if decimals < 0:
        raise ValidationError("Decimals must be non-negative", details={"decimals": decimals})
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError("Invalid integer amount", details={"value": value})
    try:
        amount = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid integer amount", details={"value": value})

    sign = "-" if amount < 0 else ""
    quotient, remainder = divmod(abs(amount), 10 ** decimals)

    if remainder == 0:
        return f"{sign}{quotient}"

    fraction = str(remainder).rjust(decimals, "0").rstrip("0")
    return f"{sign}{quotient}.{fraction}"


def format_lamports(lamports: int) -> str:
    """Format lamports as a SOL amount string."""
    return format_units(lamports, SOL_DECIMALS)


def parse_lamports(sol: str) -> int:
    """Parse a SOL amount string into lamports."""
    return parse_units(sol, SOL_DECIMALS)


def lamports_to_sol(lamports: int) -> Decimal:
    """Convert lamports to SOL as an exact Decimal."""
    return Decimal(lamports) / Decimal(LAMPORTS_PER_SOL)


def format_token_amount(amount: Union[str, int, float, Decimal], decimals: int = SOL_DECIMALS) -> str:
    """Format a token amount for display with thousands separators.

    At most ``decimals`` fractional digits are kept, rounded half up, and
    trailing zeros are dropped.

    Args:
        amount: Amount in whole tokens
        decimals: Maximum number of fractional digits

    Returns:
        Formatted string, e.g. "1,234.5"
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError("Invalid token amount", details={"amount": amount})
    if not value.is_finite():
        raise ValidationError("Invalid token amount", details={"amount": str(amount)})

    with localcontext() as ctx:
        ctx.prec = 100
        quantized = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    integer, _, fraction = f"{abs(quantized):f}".partition(".")
    fraction = fraction.rstrip("0")

    sign = "-" if quantized < 0 else ""
    grouped = f"{int(integer):,}"
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def shorten_address(address: str, chars: int = 4) -> str:
    """
    Shorten an address for display.

    Args:
        address: Full address
        chars: Number of characters to keep at each end

    Returns:
        Shortened address with ellipsis, or the address when already short
    """
    if not address or len(address) <= chars * 2:
        return address
    return f"{address[:chars]}...{address[-chars:]}"


def calculate_apy(principal: float, interest: float, time_in_days: float) -> float:
    """
    Annualize simple interest earned over a period.

    Args:
        principal: Amount invested
        interest: Interest earned per day
        time_in_days: Length of the period

    Returns:
        Annual percentage rate, 0 for non-positive principal or period
    """
    if principal <= 0 or time_in_days <= 0:
        return 0.0

    daily_rate = interest / principal
    return daily_rate * 365 * 100


def format_duration(ms: int) -> str:
    """Convert a duration in milliseconds to a short readable string."""
    if ms < 1000:
        return f"{ms}ms"
    if ms < 60_000:
        return f"{ms // 1000}s"
    if ms < 3_600_000:
        return f"{ms // 60_000}m {(ms % 60_000) // 1000}s"
    return f"{ms // 3_600_000}h {(ms % 3_600_000) // 60_000}m"
