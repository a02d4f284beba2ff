"""Channel database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable


class ChannelTable(EntityTable, table=True):
    """Database persistence model for sales channels."""

    __tablename__ = "channel"

    name: str = Field(unique=True, index=True)
    color: str | None = None
