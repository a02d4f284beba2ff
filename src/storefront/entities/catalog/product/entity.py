"""Entity: Product."""

from typing import Any

from pydantic import BaseModel, Field

from src.storefront.entities.catalog.channel.entity import Channel
from src.storefront.entities.catalog.platform.entity import Platform
from src.storefront.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a software product listed in the storefront.

    The slug is the public URL identifier of the product detail page. It is
    unset until the slug assigner fills it in and is unique across products.
    """

    name: str = Field(min_length=1, description="Display name, may contain CJK text")
    subtitle: str | None = Field(default=None, description="Short tagline")
    description: str | None = Field(default=None, description="Rich-text description")
    original_price: float = Field(default=0, ge=0, description="List price")
    sale_price: float = Field(default=0, ge=0, description="Discounted price")
    cps_link: str = Field(description="Affiliate purchase link")
    download_url: str | None = Field(default=None, description="Download link")
    cover_image: str | None = Field(default=None, description="Cover image URL")
    logo: str | None = Field(default=None, description="Logo image URL")
    slug: str | None = Field(default=None, description="URL-safe unique identifier")
    is_active: bool = Field(default=True, description="Listed in the public catalog")
    view_count: int = Field(default=0, ge=0, description="Detail page views")
    channel_id: str | None = Field(default=None, description="Sales channel")
    platform_ids: list[str] = Field(
        default_factory=list, description="Platforms the product runs on"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.slug == other.slug
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name, self.slug))


class ProductCreate(BaseModel):
    """Payload for creating a product; `slug` is an optional preferred slug."""

    name: str = Field(min_length=1)
    subtitle: str | None = None
    description: str | None = None
    original_price: float = Field(default=0, ge=0)
    sale_price: float = Field(default=0, ge=0)
    cps_link: str = Field(min_length=1)
    download_url: str | None = None
    cover_image: str | None = None
    logo: str | None = None
    slug: str | None = None
    is_active: bool = True
    channel_id: str | None = None
    platform_ids: list[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """Partial update payload; only fields that are sent are changed."""

    name: str | None = Field(default=None, min_length=1)
    subtitle: str | None = None
    description: str | None = None
    original_price: float | None = Field(default=None, ge=0)
    sale_price: float | None = Field(default=None, ge=0)
    cps_link: str | None = Field(default=None, min_length=1)
    download_url: str | None = None
    cover_image: str | None = None
    logo: str | None = None
    slug: str | None = None
    is_active: bool | None = None
    channel_id: str | None = None
    platform_ids: list[str] | None = None


class ProductDetail(Product):
    """Product with its platforms and channel resolved, for the detail page."""

    platforms: list[Platform] = Field(default_factory=list)
    channel: Channel | None = None
