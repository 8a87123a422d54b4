"""License management against the LicenseChain REST backend.

Licenses live on the backend; every call returns a fresh point-in-time copy.
"""

from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel

from licensechain_solana.clients.base_client import BaseRestClient
from licensechain_solana.constants import PLATFORM, SDK_SOURCE
from licensechain_solana.logging_config import get_logger, log_with_context
from licensechain_solana.models.base import SuccessResult, ValidityResult
from licensechain_solana.models.license import License, LicenseStats, coerce_status
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import ErrorCode, LicenseError, ValidationError
from licensechain_solana.utils.validation import require_fields

# Get logger
logger = get_logger(__name__)


class LicenseManager(BaseRestClient):
    """Manager for the ``/licenses`` resource family."""

    @handle_async_exceptions(LicenseError, "Failed to create license", code=ErrorCode.LICENSE_CREATE_ERROR)
    async def create_license(
        self,
        user_id: str,
        product_id: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> License:
        """Create a license for a user and product.

        Args:
            user_id: User identifier
            product_id: Product identifier
            metadata: Optional caller metadata, tagged with the platform

        Returns:
            The created license
        """
        require_fields("User ID and Product ID are required", user_id=user_id, product_id=product_id)

        data = await self._make_request("POST", "/licenses", json={
            "userId": user_id,
            "productId": product_id,
            "metadata": {**(metadata or {}), "platform": PLATFORM, "createdVia": SDK_SOURCE},
        })
        created = self._decode(License, data)
        log_with_context(logger, "info", "License created", license_id=created.id, product_id=product_id)
        return created

    @handle_async_exceptions(LicenseError, "Failed to validate license", code=ErrorCode.LICENSE_VALIDATE_ERROR)
    async def validate_license(self, license_key: str) -> bool:
        """Check a license key with the backend.

        Returns:
            True if the backend considers the key valid
        """
        require_fields("License key is required", license_key=license_key)

        data = await self._make_request("POST", "/licenses/validate", json=self._body(licenseKey=license_key))
        return self._decode(ValidityResult, data).valid

    @handle_async_exceptions(LicenseError, "Failed to get license", code=ErrorCode.LICENSE_GET_ERROR)
    async def get_license(self, license_id: str) -> License:
        require_fields("License ID is required", license_id=license_id)

        data = await self._make_request("GET", f"/licenses/{self._segment(license_id)}")
        return self._decode(License, data)

    @handle_async_exceptions(LicenseError, "Failed to update license", code=ErrorCode.LICENSE_UPDATE_ERROR)
    async def update_license(self, license_id: str, updates: Dict[str, Any]) -> License:
        """Update license fields.

        Keys may be given in snake_case or camelCase; they are sent in
        camelCase. A ``status`` value must be a known license status.

        Args:
            license_id: License identifier
            updates: Fields to change

        Returns:
            The updated license
        """
        require_fields("License ID is required", license_id=license_id)
        if not isinstance(updates, dict):
            raise ValidationError("Updates must be a mapping", details={"received": type(updates).__name__})

        payload = {to_camel(key): value for key, value in updates.items()}
        if "status" in payload:
            payload["status"] = coerce_status(payload["status"]).value

        data = await self._make_request(
            "PUT",
            f"/licenses/{self._segment(license_id)}",
            json={**payload, "platform": PLATFORM}
        )
        return self._decode(License, data)

    @handle_async_exceptions(LicenseError, "Failed to revoke license", code=ErrorCode.LICENSE_REVOKE_ERROR)
    async def revoke_license(self, license_id: str) -> bool:
        require_fields("License ID is required", license_id=license_id)

        data = await self._make_request("DELETE", f"/licenses/{self._segment(license_id)}")
        return self._decode(SuccessResult, data).success

    @handle_async_exceptions(LicenseError, "Failed to get user licenses", code=ErrorCode.LICENSE_LIST_ERROR)
    async def get_user_licenses(self, user_id: str) -> List[License]:
        require_fields("User ID is required", user_id=user_id)

        data = await self._make_request("GET", f"/users/{self._segment(user_id)}/licenses")
        return self._decode_list(License, data)

    @handle_async_exceptions(LicenseError, "Failed to get product licenses", code=ErrorCode.LICENSE_LIST_ERROR)
    async def get_product_licenses(self, product_id: str) -> List[License]:
        require_fields("Product ID is required", product_id=product_id)

        data = await self._make_request("GET", f"/products/{self._segment(product_id)}/licenses")
        return self._decode_list(License, data)

    @handle_async_exceptions(LicenseError, "Failed to extend license", code=ErrorCode.LICENSE_EXTEND_ERROR)
    async def extend_license(self, license_id: str, days: int) -> License:
        """Push a license's expiry date back.

        Args:
            license_id: License identifier
            days: Number of days to add, must be positive

        Returns:
            The extended license
        """
        require_fields("License ID is required", license_id=license_id)
        if not isinstance(days, int) or isinstance(days, bool) or days <= 0:
            raise ValidationError("Days must be greater than 0", details={"days": days})

        data = await self._make_request(
            "POST",
            f"/licenses/{self._segment(license_id)}/extend",
            json=self._body(days=days)
        )
        return self._decode(License, data)

    @handle_async_exceptions(LicenseError, "Failed to suspend license", code=ErrorCode.LICENSE_SUSPEND_ERROR)
    async def suspend_license(self, license_id: str, reason: Optional[str] = None) -> bool:
        require_fields("License ID is required", license_id=license_id)

        data = await self._make_request(
            "POST",
            f"/licenses/{self._segment(license_id)}/suspend",
            json=self._body(reason=reason)
        )
        return self._decode(SuccessResult, data).success

    @handle_async_exceptions(LicenseError, "Failed to unsuspend license", code=ErrorCode.LICENSE_UNSUSPEND_ERROR)
    async def unsuspend_license(self, license_id: str) -> bool:
        require_fields("License ID is required", license_id=license_id)

        data = await self._make_request(
            "POST",
            f"/licenses/{self._segment(license_id)}/unsuspend",
            json=self._body()
        )
        return self._decode(SuccessResult, data).success

    @handle_async_exceptions(LicenseError, "Failed to get license stats", code=ErrorCode.LICENSE_STATS_ERROR)
    async def get_license_stats(self) -> LicenseStats:
        data = await self._make_request("GET", "/licenses/stats")
        return self._decode(LicenseStats, data)
