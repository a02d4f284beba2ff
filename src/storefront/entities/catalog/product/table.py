"""Product database table model."""

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.storefront.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    `slug` carries a UNIQUE index. NULL is used for "no slug yet" so any
    number of unslugged products can coexist.
    """

    __tablename__ = "product"

    name: str = Field(index=True)
    subtitle: str | None = None
    description: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    original_price: float = 0
    sale_price: float = 0
    cps_link: str
    download_url: str | None = None
    cover_image: str | None = None
    logo: str | None = None
    slug: str | None = Field(default=None, unique=True, index=True)
    is_active: bool = True
    view_count: int = 0
    channel_id: str | None = Field(default=None, foreign_key="channel.id", index=True)


class ProductPlatformLink(SQLModel, table=True):
    """Association between products and the platforms they support."""

    __tablename__ = "product_platform"

    product_id: str = Field(
        foreign_key="product.id", primary_key=True, ondelete="CASCADE"
    )
    platform_id: str = Field(
        foreign_key="platform.id", primary_key=True, ondelete="CASCADE"
    )
