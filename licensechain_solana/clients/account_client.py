"""Account-related Solana RPC client operations.

This module provides specialized client functionality for Solana account,
token account, program and stake queries.
"""

import base64
import binascii
from typing import Any, Dict, List, Optional

from licensechain_solana.clients.base_client import BaseSolanaClient
from licensechain_solana.constants import STAKE_AUTHORITY_OFFSET, STAKE_PROGRAM_ID, TOKEN_PROGRAM_ID
from licensechain_solana.logging_config import get_logger
from licensechain_solana.models.account import Account, Program, StakeAccount, TokenAccount
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import (
    AccountError,
    ErrorCode,
    ProgramError,
    RPCError,
    SolanaError,
)
from licensechain_solana.utils.validation import format_public_key

# Get logger
logger = get_logger(__name__)


class AccountClient(BaseSolanaClient):
    """Client for Solana account operations."""

    @handle_async_exceptions(AccountError, "Failed to get account", context={"account": "public_key"})
    async def get_account(self, public_key: str) -> Account:
        """Get account information.

        Args:
            public_key: The account public key

        Returns:
            Account snapshot

        Raises:
            ValidationError: If the public key is malformed
            AccountError: If the account does not exist or the lookup fails
        """
        public_key = format_public_key(public_key)

        result = await self._make_request(
            "getAccountInfo",
            [public_key, self._options(encoding="base64")]
        )
        value = self._value(result, "getAccountInfo")
        if value is None:
            raise AccountError("Account not found", account=public_key)

        lamports = self._get_path(value, "lamports")
        return self._decode(Account, {
            "public_key": public_key,
            "balance": lamports,
            "is_executable": self._get_path(value, "executable"),
            "owner": self._get_path(value, "owner"),
            "lamports": lamports,
        })

    @handle_async_exceptions(AccountError, "Failed to get balance", context={"account": "public_key"})
    async def get_balance(self, public_key: str) -> int:
        """Get account balance.

        Args:
            public_key: The account public key

        Returns:
            Account balance in lamports
        """
        public_key = format_public_key(public_key)

        result = await self._make_request("getBalance", [public_key, self._options()])
        value = self._value(result, "getBalance")
        if value is None:
            raise AccountError("Account not found", account=public_key)
        if not isinstance(value, int) or isinstance(value, bool):
            raise RPCError("getBalance returned a non-integer balance", details={"value": value})
        return value

    @handle_async_exceptions(AccountError, "Failed to get token accounts", context={"account": "owner"})
    async def get_token_accounts(self, owner: str, mint: Optional[str] = None) -> List[TokenAccount]:
        """Get the SPL token accounts owned by a wallet.

        Args:
            owner: The wallet public key
            mint: Restrict the result to accounts of this mint

        Returns:
            List of token accounts
        """
        owner = format_public_key(owner)
        account_filter: Dict[str, str] = (
            {"mint": format_public_key(mint)} if mint is not None else {"programId": TOKEN_PROGRAM_ID}
        )

        result = await self._make_request(
            "getTokenAccountsByOwner",
            [owner, account_filter, self._options(encoding="jsonParsed")]
        )
        value = self._value(result, "getTokenAccountsByOwner")
        if value is None:
            raise AccountError("Token accounts not found", account=owner)

        return [self._token_account(entry) for entry in value]

    def _token_account(self, entry: Any) -> TokenAccount:
        info = self._get_path(entry, "account", "data", "parsed", "info")
        token_amount = self._get_path(info, "tokenAmount")
        return self._decode(TokenAccount, {
            "address": self._get_path(entry, "pubkey"),
            "mint": self._get_path(info, "mint"),
            "owner": self._get_path(info, "owner"),
            "amount": self._get_path(token_amount, "amount"),
            "decimals": self._get_path(token_amount, "decimals"),
            "state": self._get_path(info, "state"),
        })

    @handle_async_exceptions(ProgramError, "Failed to get program", context={"program_id": "program_id"})
    async def get_program(self, program_id: str) -> Program:
        """Get a program account.

        Args:
            program_id: The program ID

        Returns:
            Program account with its raw data

        Raises:
            ValidationError: If the program ID is malformed
            ProgramError: If the program does not exist or the lookup fails
        """
        program_id = format_public_key(program_id)

        result = await self._make_request(
            "getAccountInfo",
            [program_id, self._options(encoding="base64")]
        )
        value = self._value(result, "getAccountInfo")
        if value is None:
            raise ProgramError("Program not found", program_id=program_id)

        encoded = self._get_path(value, "data", 0)
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, TypeError) as e:
            raise RPCError("Program data is not valid base64", details={"program_id": program_id}) from e

        return self._decode(Program, {
            "program_id": program_id,
            "data": data,
            "owner": self._get_path(value, "owner"),
            "executable": self._get_path(value, "executable"),
            "rent_epoch": value.get("rentEpoch"),
        })

    @handle_async_exceptions(SolanaError, "Failed to get stake accounts", code=ErrorCode.STAKE_ERROR)
    async def get_stake_accounts(self, owner: str) -> List[StakeAccount]:
        """Get the stake accounts whose staker authority is the owner.

        Args:
            owner: Staker authority public key

        Returns:
            List of stake accounts
        """
        owner = format_public_key(owner)

        result = await self._make_request(
            "getProgramAccounts",
            [
                STAKE_PROGRAM_ID,
                self._options(
                    encoding="jsonParsed",
                    filters=[{"memcmp": {"offset": STAKE_AUTHORITY_OFFSET, "bytes": owner}}]
                )
            ]
        )
        if not isinstance(result, list):
            raise RPCError("getProgramAccounts returned a non-list result", details={"owner": owner})

        logger.debug(f"Found {len(result)} stake accounts for {owner}")
        return [self._stake_account(entry) for entry in result]

    def _stake_account(self, entry: Any) -> StakeAccount:
        account = self._get_path(entry, "account")
        info = self._get_path(account, "data", "parsed", "info")
        meta = self._get_path(info, "meta")
        authorized = self._get_path(meta, "authorized")

        # Undelegated stake accounts have no stake section
        delegation = (info.get("stake") or {}).get("delegation") or {}

        return self._decode(StakeAccount, {
            "address": self._get_path(entry, "pubkey"),
            "stake": self._get_path(account, "lamports"),
            "activation_epoch": delegation.get("activationEpoch"),
            "deactivation_epoch": delegation.get("deactivationEpoch"),
            "voter": delegation.get("voter"),
            "withdrawer": self._get_path(authorized, "withdrawer"),
            "staker": self._get_path(authorized, "staker"),
            "rent_exempt_reserve": self._get_path(meta, "rentExemptReserve"),
        })
