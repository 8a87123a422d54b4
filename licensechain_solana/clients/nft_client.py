"""NFT and marketplace management against the LicenseChain REST backend."""

from typing import Any, Dict, List, Optional, Union

from licensechain_solana.clients.base_client import BaseRestClient
from licensechain_solana.logging_config import get_logger
from licensechain_solana.models.base import SignatureResult, SuccessResult
from licensechain_solana.models.nft import NFT, MarketplaceListing, NFTCollection, NFTMetadata, NFTStats
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import ErrorCode, NFTError, ValidationError
from licensechain_solana.utils.validation import require_addresses, require_fields

# Get logger
logger = get_logger(__name__)

MetadataInput = Union[NFTMetadata, Dict[str, Any]]
CollectionInput = Union[NFTCollection, Dict[str, Any]]

LISTING_FILTERS = {
    "collection": "collection",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "seller": "seller",
    "status": "status",
}


def _metadata_payload(metadata: MetadataInput, partial: bool = False) -> Dict[str, Any]:
    """Validate NFT metadata and serialize it with Metaplex key spelling.

    Args:
        metadata: Metadata model or mapping
        partial: Accept a subset of fields, for updates

    Raises:
        ValidationError: If a full metadata document is malformed
    """
    if isinstance(metadata, NFTMetadata):
        return metadata.model_dump(mode="json", exclude_none=True)
    if not isinstance(metadata, dict):
        raise ValidationError("Metadata must be a mapping", details={"received": type(metadata).__name__})
    if partial:
        return dict(metadata)

    try:
        return NFTMetadata.model_validate(metadata).model_dump(mode="json", exclude_none=True)
    except ValueError as e:
        raise ValidationError("Invalid NFT metadata", details={"reason": str(e)}) from e


class NFTManager(BaseRestClient):
    """Manager for the ``/nfts`` resource family."""

    @handle_async_exceptions(NFTError, "Failed to create NFT", code=ErrorCode.NFT_CREATE_ERROR)
    async def create_nft(self, metadata: MetadataInput, owner: str) -> NFT:
        """Mint an NFT through the backend.

        Args:
            metadata: Token metadata
            owner: Owner wallet address

        Returns:
            The minted NFT
        """
        require_fields("Metadata and owner are required", metadata=metadata, owner=owner)
        require_addresses("Invalid owner public key", owner=owner)

        data = await self._make_request(
            "POST",
            "/nfts",
            json=self._body(metadata=_metadata_payload(metadata), owner=owner)
        )
        return self._decode(NFT, data)

    @handle_async_exceptions(NFTError, "Failed to get NFT", code=ErrorCode.NFT_GET_ERROR)
    async def get_nft(self, mint: str) -> NFT:
        require_fields("Mint address is required", mint=mint)
        require_addresses("Invalid mint address", mint=mint)

        data = await self._make_request("GET", f"/nfts/{mint}")
        return self._decode(NFT, data)

    @handle_async_exceptions(NFTError, "Failed to transfer NFT", code=ErrorCode.NFT_TRANSFER_ERROR)
    async def transfer_nft(self, mint: str, from_owner: str, to_owner: str) -> str:
        """Transfer an NFT between wallets.

        Args:
            mint: NFT mint address
            from_owner: Current owner
            to_owner: New owner

        Returns:
            Transaction signature
        """
        require_fields(
            "Mint, from, and to addresses are required",
            mint=mint, from_owner=from_owner, to_owner=to_owner
        )
        require_addresses(mint=mint, from_owner=from_owner, to_owner=to_owner)

        data = await self._make_request(
            "POST",
            f"/nfts/{mint}/transfer",
            json=self._body(**{"from": from_owner, "to": to_owner})
        )
        return self._decode(SignatureResult, data).transaction_signature

    @handle_async_exceptions(NFTError, "Failed to get owner NFTs", code=ErrorCode.NFT_LIST_ERROR)
    async def get_owner_nfts(self, owner: str) -> List[NFT]:
        require_fields("Owner address is required", owner=owner)
        require_addresses("Invalid owner address", owner=owner)

        data = await self._make_request("GET", f"/nfts/owner/{owner}")
        return self._decode_list(NFT, data)

    @handle_async_exceptions(NFTError, "Failed to get collection NFTs", code=ErrorCode.NFT_LIST_ERROR)
    async def get_collection_nfts(self, collection: str) -> List[NFT]:
        require_fields("Collection address is required", collection=collection)
        require_addresses("Invalid collection address", collection=collection)

        data = await self._make_request("GET", f"/nfts/collection/{collection}")
        return self._decode_list(NFT, data)

    @handle_async_exceptions(NFTError, "Failed to update NFT metadata", code=ErrorCode.NFT_UPDATE_ERROR)
    async def update_nft_metadata(self, mint: str, metadata: MetadataInput) -> NFT:
        """Update some or all metadata fields of a mutable NFT.

        Args:
            mint: NFT mint address
            metadata: Fields to change

        Returns:
            The updated NFT
        """
        require_fields("Mint and metadata are required", mint=mint, metadata=metadata)
        require_addresses("Invalid mint address", mint=mint)

        data = await self._make_request(
            "PUT",
            f"/nfts/{mint}/metadata",
            json=self._body(metadata=_metadata_payload(metadata, partial=True))
        )
        return self._decode(NFT, data)

    @handle_async_exceptions(NFTError, "Failed to burn NFT", code=ErrorCode.NFT_BURN_ERROR)
    async def burn_nft(self, mint: str, owner: str) -> str:
        require_fields("Mint and owner are required", mint=mint, owner=owner)
        require_addresses(mint=mint, owner=owner)

        data = await self._make_request("POST", f"/nfts/{mint}/burn", json=self._body(owner=owner))
        return self._decode(SignatureResult, data).transaction_signature

    @handle_async_exceptions(NFTError, "Failed to create collection", code=ErrorCode.COLLECTION_CREATE_ERROR)
    async def create_collection(self, collection: CollectionInput, creator: str) -> NFTCollection:
        """Create an NFT collection.

        Args:
            collection: Collection definition
            creator: Creator wallet address

        Returns:
            The created collection
        """
        require_fields("Collection data and creator are required", collection=collection, creator=creator)
        require_addresses("Invalid creator address", creator=creator)

        definition = (
            collection if isinstance(collection, NFTCollection) else self._decode(NFTCollection, collection)
        )
        data = await self._make_request(
            "POST",
            "/nfts/collections",
            json=self._body(**definition.to_payload(), creator=creator)
        )
        return self._decode(NFTCollection, data)

    @handle_async_exceptions(NFTError, "Failed to get collection", code=ErrorCode.COLLECTION_GET_ERROR)
    async def get_collection(self, collection_id: str) -> NFTCollection:
        require_fields("Collection ID is required", collection_id=collection_id)

        data = await self._make_request("GET", f"/nfts/collections/{self._segment(collection_id)}")
        return self._decode(NFTCollection, data)

    @handle_async_exceptions(NFTError, "Failed to list NFT", code=ErrorCode.NFT_LIST_ERROR)
    async def list_nft(
        self,
        mint: str,
        price: float,
        seller: str,
        marketplace: str = "default"
    ) -> MarketplaceListing:
        """List an NFT for sale.

        Args:
            mint: NFT mint address
            price: Asking price, must be positive
            seller: Seller wallet address
            marketplace: Marketplace identifier

        Returns:
            The new listing
        """
        require_fields("Mint, price, and seller are required", mint=mint, price=price, seller=seller)
        require_addresses(mint=mint, seller=seller)
        self._require_price(price)

        data = await self._make_request(
            "POST",
            f"/nfts/{mint}/list",
            json=self._body(price=price, seller=seller, marketplace=marketplace)
        )
        return self._decode(MarketplaceListing, data)

    @handle_async_exceptions(NFTError, "Failed to unlist NFT", code=ErrorCode.NFT_UNLIST_ERROR)
    async def unlist_nft(self, mint: str, seller: str) -> bool:
        require_fields("Mint and seller are required", mint=mint, seller=seller)
        require_addresses(mint=mint, seller=seller)

        data = await self._make_request("POST", f"/nfts/{mint}/unlist", json=self._body(seller=seller))
        return self._decode(SuccessResult, data).success

    @handle_async_exceptions(NFTError, "Failed to buy NFT", code=ErrorCode.NFT_BUY_ERROR)
    async def buy_nft(self, mint: str, buyer: str, price: float) -> str:
        """Buy a listed NFT.

        Returns:
            Transaction signature
        """
        require_fields("Mint, buyer, and price are required", mint=mint, buyer=buyer, price=price)
        require_addresses(mint=mint, buyer=buyer)
        self._require_price(price)

        data = await self._make_request("POST", f"/nfts/{mint}/buy", json=self._body(buyer=buyer, price=price))
        return self._decode(SignatureResult, data).transaction_signature

    @handle_async_exceptions(NFTError, "Failed to get marketplace listings", code=ErrorCode.MARKETPLACE_LIST_ERROR)
    async def get_marketplace_listings(
        self,
        collection: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        seller: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[MarketplaceListing]:
        """Query marketplace listings.

        Filters are sent as query parameters; omitted filters are not sent.

        Returns:
            Matching listings
        """
        addresses = {
            name: value for name, value in (("collection", collection), ("seller", seller)) if value is not None
        }
        if addresses:
            require_addresses(**addresses)

        values = {
            "collection": collection,
            "min_price": min_price,
            "max_price": max_price,
            "seller": seller,
            "status": status,
        }
        params = {LISTING_FILTERS[name]: value for name, value in values.items() if value is not None}

        data = await self._make_request("GET", "/nfts/marketplace/listings", params=params or None)
        return self._decode_list(MarketplaceListing, data)

    @handle_async_exceptions(NFTError, "Failed to get NFT stats", code=ErrorCode.NFT_STATS_ERROR)
    async def get_nft_stats(self) -> NFTStats:
        data = await self._make_request("GET", "/nfts/stats")
        return self._decode(NFTStats, data)

    @staticmethod
    def _require_price(price: Any) -> None:
        if isinstance(price, bool) or not isinstance(price, (int, float)) or price <= 0:
            raise ValidationError("Price must be a positive number", details={"price": price})
