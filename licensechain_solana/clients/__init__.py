"""Client modules for the LicenseChain Solana SDK.

This package provides the Solana RPC clients, the LicenseChain REST managers
and the facade composing them.
"""

from licensechain_solana.clients.base_client import BaseHttpClient, BaseRestClient, BaseSolanaClient
from licensechain_solana.clients.account_client import AccountClient
from licensechain_solana.clients.transaction_client import TransactionClient
from licensechain_solana.clients.cluster_client import ClusterClient
from licensechain_solana.clients.license_client import LicenseManager
from licensechain_solana.clients.nft_client import NFTManager
from licensechain_solana.clients.defi_client import DeFiManager
from licensechain_solana.clients.solana_client import LicenseChainSolana

__all__ = [
    'BaseHttpClient',
    'BaseRestClient',
    'BaseSolanaClient',
    'AccountClient',
    'TransactionClient',
    'ClusterClient',
    'LicenseManager',
    'NFTManager',
    'DeFiManager',
    'LicenseChainSolana',
]
