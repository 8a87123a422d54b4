"""Constants used throughout the LicenseChain Solana SDK.

This module defines common constants to avoid duplication and ensure consistency.
"""

# Solana program IDs
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
STAKE_PROGRAM_ID = "Stake11111111111111111111111111111111111111"

# Byte offset of the staker authority inside a stake account
STAKE_AUTHORITY_OFFSET = 12

# Units
SOL_DECIMALS = 9
LAMPORTS_PER_SOL = 10 ** SOL_DECIMALS

# Fee and rent estimates, in lamports
BASE_TRANSACTION_FEE = 5000
FEE_PER_INSTRUCTION = 200
FEE_PER_SIGNATURE = 1000
BASE_RENT = 890880
RENT_PER_BYTE = 100
EXECUTABLE_RENT = 1000000

# Defaults
DEFAULT_BASE_URL = "https://api.licensechain.com"
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_RETRIES = 3
DEFAULT_COMMITMENT = "confirmed"

COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")

# REST backend headers
API_VERSION = "1.0"
PLATFORM = "solana"
SDK_SOURCE = "sdk"

# Known clusters
CLUSTERS = {
    "mainnet-beta": {
        "name": "Mainnet Beta",
        "rpc_url": "https://api.mainnet-beta.solana.com",
        "ws_url": "wss://api.mainnet-beta.solana.com",
        "explorer_url": "https://explorer.solana.com",
        "commitment": "confirmed",
    },
    "testnet": {
        "name": "Testnet",
        "rpc_url": "https://api.testnet.solana.com",
        "ws_url": "wss://api.testnet.solana.com",
        "explorer_url": "https://explorer.solana.com/?cluster=testnet",
        "commitment": "confirmed",
    },
    "devnet": {
        "name": "Devnet",
        "rpc_url": "https://api.devnet.solana.com",
        "ws_url": "wss://api.devnet.solana.com",
        "explorer_url": "https://explorer.solana.com/?cluster=devnet",
        "commitment": "confirmed",
    },
}
