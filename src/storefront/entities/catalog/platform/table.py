"""Platform database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable


class PlatformTable(EntityTable, table=True):
    """Database persistence model for platforms."""

    __tablename__ = "platform"

    name: str = Field(unique=True, index=True)
    icon: str | None = None
