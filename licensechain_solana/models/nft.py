"""
NFT data models for the LicenseChain Solana SDK.

Token metadata follows the Metaplex JSON standard, whose keys are snake_case
(``external_url``, ``trait_type``), so metadata models do not use the camelCase
alias generator of the other models.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from licensechain_solana.models.base import SolanaModel


class MetadataModel(BaseModel):
    """Base for models that follow the Metaplex JSON key spelling."""

    model_config = {
        "frozen": True,
        "extra": "allow",
    }


class NFTCreator(SolanaModel):
    """Creator entry with its royalty share in percent."""
    address: str
    verified: bool = False
    share: int = Field(..., ge=0, le=100)


class NFTAttribute(MetadataModel):
    trait_type: str
    value: Union[str, int, float]


class NFTFile(MetadataModel):
    uri: str
    type: str


class NFTProperties(MetadataModel):
    files: Optional[List[NFTFile]] = None
    category: Optional[str] = None
    creators: Optional[List[NFTCreator]] = None


class NFTMetadata(MetadataModel):
    """
    Off-chain token metadata.

    Example:
        >>> NFTMetadata(name="My NFT", symbol="MNFT", description="...",
        ...             image="https://example.com/nft.png")
    """
    name: str
    symbol: str
    description: str
    image: str
    external_url: Optional[str] = None
    attributes: Optional[List[NFTAttribute]] = None
    properties: Optional[NFTProperties] = None


class CollectionFamily(SolanaModel):
    name: str
    family: str


class NFTCollection(SolanaModel):
    """Collection definition."""
    name: str
    symbol: str
    description: str
    image: str
    external_url: Optional[str] = None
    seller_fee_basis_points: int = Field(0, ge=0, le=10000)
    creators: List[NFTCreator] = Field(default_factory=list)
    collection: Optional[CollectionFamily] = None
    attributes: Optional[List[NFTAttribute]] = None


class NFT(SolanaModel):
    """A minted NFT and its metadata."""
    mint: str
    owner: str
    metadata: NFTMetadata
    collection: Optional[NFTCollection] = None
    supply: Optional[int] = None
    is_mutable: bool = True
    primary_sale_happened: bool = False
    seller_fee_basis_points: int = 0
    creators: List[NFTCreator] = Field(default_factory=list)

    @property
    def creator_shares_valid(self) -> bool:
        """Whether creator shares add up to 100, as the convention requires."""
        return not self.creators or sum(creator.share for creator in self.creators) == 100


class MarketplaceListing(SolanaModel):
    """An NFT offered for sale."""
    mint: str
    price: float
    seller: str
    marketplace: str
    listed_at: int
    expires_at: Optional[int] = None
    currency: str = "SOL"
    status: Literal["active", "sold", "cancelled", "expired"]


class NFTStats(SolanaModel):
    total_nfts: int = Field(..., alias="totalNFTs")
    total_collections: int
    total_volume: float
    average_price: float
    floor_price: float
