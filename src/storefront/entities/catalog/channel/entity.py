"""Entity: Channel."""

from typing import Any

from pydantic import BaseModel, Field

from src.storefront.entities.core._base import Entity


class Channel(Entity):
    """Sales channel a product is sourced from, shown as a coloured badge."""

    name: str = Field(min_length=1, description="Channel name, unique")
    color: str | None = Field(default=None, description="Badge colour, e.g. #3B82F6")

    def __eq__(self, other: Any) -> bool:
        """Compare channels by business attributes, ignoring timestamps."""
        if not isinstance(other, Channel):
            return False

        return self.id == other.id and self.name == other.name and self.color == other.color

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name, self.color))


class ChannelWrite(BaseModel):
    name: str = Field(min_length=1)
    color: str | None = None


class ChannelWithCount(Channel):
    product_count: int = 0
