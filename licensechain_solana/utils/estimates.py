"""Deterministic fee and rent estimates.

These are offline approximations for budgeting; they are not a substitute for
querying the cluster.
"""

from licensechain_solana.constants import (
    BASE_RENT,
    BASE_TRANSACTION_FEE,
    EXECUTABLE_RENT,
    FEE_PER_INSTRUCTION,
    FEE_PER_SIGNATURE,
    RENT_PER_BYTE,
)
from licensechain_solana.utils.errors import ValidationError


def estimate_transaction_fee(instruction_count: int, signature_count: int = 1) -> int:
    """Estimate a transaction fee in lamports.

    Args:
        instruction_count: Number of instructions in the transaction
        signature_count: Number of required signatures

    Returns:
        Base fee plus a fixed amount per instruction and per signature

    Raises:
        ValidationError: If a count is negative
    """
    if instruction_count < 0 or signature_count < 0:
        raise ValidationError(
            "Instruction and signature counts must be non-negative",
            details={"instruction_count": instruction_count, "signature_count": signature_count}
        )

    return (
        BASE_TRANSACTION_FEE
        + instruction_count * FEE_PER_INSTRUCTION
        + signature_count * FEE_PER_SIGNATURE
    )


def calculate_rent_exempt_minimum(data_length: int, is_executable: bool = False) -> int:
    """Estimate the rent-exempt minimum balance for an account, in lamports."""
    if data_length < 0:
        raise ValidationError("Data length must be non-negative", details={"data_length": data_length})

    executable_rent = EXECUTABLE_RENT if is_executable else 0
    return BASE_RENT + data_length * RENT_PER_BYTE + executable_rent
