"""Configuration module for the LicenseChain Solana SDK.

Clients are configured with an explicit, immutable SolanaConfig. The SDK
never reads the environment on its own; get_solana_config() is an opt-in
helper for applications that keep settings in environment variables or a
.env file.
"""

# Standard library imports
import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from licensechain_solana.constants import (
    CLUSTERS,
    COMMITMENT_LEVELS,
    DEFAULT_BASE_URL,
    DEFAULT_COMMITMENT,
    DEFAULT_RETRIES,
    DEFAULT_RPC_URL,
    DEFAULT_TIMEOUT_MS,
)
from licensechain_solana.models.cluster import ClusterInfo
from licensechain_solana.utils.errors import ValidationError

URL_PATTERN = re.compile(
    r'^(https?):\/\/'  # http:// or https://
    r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
    r'localhost|'  # localhost
    r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
    r'(?::\d+)?'  # optional port
    r'(?:/?|[/?]\S+)$', re.IGNORECASE)


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ValidationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ValidationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ValidationError(f"Required environment variable '{key}' not found")
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ValidationError(f"Invalid value for environment variable '{key}': {e}")

    return value


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def url_validator(value: str) -> str:
    """Validate URL format.

    Raises:
        ValueError: If not a valid URL format
    """
    if not URL_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def commitment_validator(value: str) -> str:
    """Validate Solana commitment level.

    Raises:
        ValueError: If not a valid commitment level
    """
    if value.lower() not in COMMITMENT_LEVELS:
        raise ValueError(f"Commitment must be one of: {', '.join(COMMITMENT_LEVELS)}")
    return value.lower()


@dataclass(frozen=True)
class SolanaConfig:
    """Configuration shared by the facade and every manager.

    Attributes:
        api_key: LicenseChain API key, sent as a bearer token
        base_url: LicenseChain REST backend URL
        rpc_url: Solana JSON-RPC endpoint
        timeout: Per-request deadline in milliseconds
        retries: Attempts used by LicenseChainSolana.with_retry
        commitment: Default commitment level for RPC queries
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    rpc_url: str = DEFAULT_RPC_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    retries: int = DEFAULT_RETRIES
    commitment: str = DEFAULT_COMMITMENT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.api_key or not isinstance(self.api_key, str):
            raise ValidationError("API key is required")

        for field_name in ("base_url", "rpc_url"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not URL_PATTERN.fullmatch(value):
                raise ValidationError(f"Invalid {field_name}", details={field_name: value})

        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ValidationError("Timeout must be a positive number of milliseconds",
                                  details={"timeout": self.timeout})

        if not isinstance(self.retries, int) or self.retries < 0:
            raise ValidationError("Retries must be a non-negative integer", details={"retries": self.retries})

        if self.commitment not in COMMITMENT_LEVELS:
            raise ValidationError(f"Commitment must be one of: {', '.join(COMMITMENT_LEVELS)}",
                                  details={"commitment": self.commitment})

        # Trailing slashes would double up when paths are appended
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def timeout_seconds(self) -> float:
        """Per-request deadline in seconds."""
        return self.timeout / 1000

    def __repr__(self) -> str:
        return (
            f"SolanaConfig(api_key='***', base_url={self.base_url!r}, rpc_url={self.rpc_url!r}, "
            f"timeout={self.timeout!r}, retries={self.retries!r}, commitment={self.commitment!r})"
        )


def get_solana_config(env_file: Optional[str] = None) -> SolanaConfig:
    """Build a SolanaConfig from environment variables.

    Loads ``env_file`` (or a ``.env`` in the working directory) first without
    overriding variables that are already set.

    Returns:
        SolanaConfig instance

    Raises:
        ValidationError: If environment variables are missing or fail validation
    """
    load_dotenv(env_file)

    return SolanaConfig(
        api_key=get_env_var("LICENSECHAIN_API_KEY", required=True),
        base_url=get_env_var("LICENSECHAIN_BASE_URL", DEFAULT_BASE_URL, validator=url_validator),
        rpc_url=get_env_var("SOLANA_RPC_URL", DEFAULT_RPC_URL, validator=url_validator),
        timeout=get_env_var("LICENSECHAIN_TIMEOUT", DEFAULT_TIMEOUT_MS, validator=int_validator),
        retries=get_env_var("LICENSECHAIN_RETRIES", DEFAULT_RETRIES, validator=int_validator),
        commitment=get_env_var("SOLANA_COMMITMENT", DEFAULT_COMMITMENT, validator=commitment_validator)
    )


def get_cluster_info(cluster: str) -> ClusterInfo:
    """Return the well-known endpoints of a public cluster.

    Args:
        cluster: One of "mainnet-beta", "testnet", "devnet"

    Raises:
        ValidationError: If the cluster is unknown
    """
    preset = CLUSTERS.get(cluster)
    if preset is None:
        raise ValidationError(f"Unknown cluster: {cluster}", details={"known": sorted(CLUSTERS)})
    return ClusterInfo(**preset)


def find_cluster(rpc_url: str) -> Optional[ClusterInfo]:
    """Return the public cluster served at rpc_url, if any."""
    normalized = rpc_url.rstrip("/")
    for preset in CLUSTERS.values():
        if preset["rpc_url"] == normalized:
            return ClusterInfo(**preset)
    return None
