"""
Base model and shared response shapes.

Wire payloads use camelCase keys while Python attributes are snake_case; both
spellings are accepted when validating.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class SolanaModel(BaseModel):
    """Immutable snapshot of a remote record."""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "ignore",
    }

    def to_payload(self) -> dict:
        """Serialize to a camelCase JSON-ready dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SuccessResult(SolanaModel):
    """Body of endpoints acknowledging an action."""
    success: bool


class ValidityResult(SolanaModel):
    """Body of the license validation endpoint."""
    valid: bool


class SignatureResult(SolanaModel):
    """Body of endpoints that submit an on-chain transaction."""
    transaction_signature: str
