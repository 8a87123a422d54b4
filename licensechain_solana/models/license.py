"""
License data models.

The LicenseChain backend owns licenses; these models are point-in-time copies.
LicenseStatus transitions mirror the backend's lifecycle so callers can reject
impossible requests before sending them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from licensechain_solana.models.base import SolanaModel
from licensechain_solana.utils.errors import ValidationError


class LicenseStatus(str, Enum):
    """Lifecycle states of a license."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    SUSPENDED = "suspended"


# Allowed status changes. Expiry is time-based, suspension and deactivation
# are explicit calls, and only a suspended license can be reactivated.
LICENSE_TRANSITIONS: Dict[LicenseStatus, FrozenSet[LicenseStatus]] = {
    LicenseStatus.ACTIVE: frozenset({
        LicenseStatus.EXPIRED,
        LicenseStatus.SUSPENDED,
        LicenseStatus.INACTIVE,
    }),
    LicenseStatus.SUSPENDED: frozenset({LicenseStatus.ACTIVE}),
    LicenseStatus.INACTIVE: frozenset(),
    LicenseStatus.EXPIRED: frozenset(),
}


def coerce_status(value: Any) -> LicenseStatus:
    """
    Convert a status string to LicenseStatus.

    Raises:
        ValidationError: If the value is not a known status
    """
    try:
        return LicenseStatus(value)
    except ValueError:
        raise ValidationError(
            f"Invalid license status: {value}",
            details={"allowed": [status.value for status in LicenseStatus]}
        )


def can_transition(current: LicenseStatus, target: LicenseStatus) -> bool:
    """Return True if a license may move from current to target."""
    return coerce_status(target) in LICENSE_TRANSITIONS[coerce_status(current)]


class License(SolanaModel):
    """A license issued for a user and product."""
    id: str
    user_id: Optional[str] = None
    product_id: Optional[str] = None
    license_key: str
    status: LicenseStatus
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    metadata: Optional[Dict[str, Any]] = None

    @property
    def is_active(self) -> bool:
        return self.status == LicenseStatus.ACTIVE

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Whether the license is expired, by status or by its expiry date.

        Args:
            now: Reference time, defaults to the current UTC time
        """
        if self.status == LicenseStatus.EXPIRED:
            return True
        if self.expires_at is None:
            return False

        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= expires_at

    def transition_to(self, target: LicenseStatus) -> "License":
        """
        Return a copy of the license in the target status.

        Raises:
            ValidationError: If the lifecycle does not allow the change
        """
        target = coerce_status(target)
        if not can_transition(self.status, target):
            raise ValidationError(
                f"License cannot move from {self.status.value} to {target.value}",
                details={"license_id": self.id, "from": self.status.value, "to": target.value}
            )
        return self.model_copy(update={"status": target})


class LicenseStats(SolanaModel):
    """Aggregate license counts for the API key's account."""
    total: int
    active: int
    expired: int
    suspended: int
    revenue: float = 0.0
