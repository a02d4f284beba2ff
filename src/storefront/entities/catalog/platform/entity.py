"""Entity: Platform."""

from typing import Any

from pydantic import BaseModel, Field

from src.storefront.entities.core._base import Entity


class Platform(Entity):
    """Operating system a product runs on (Windows, Mac, iOS, Android)."""

    name: str = Field(min_length=1, description="Platform name, unique")
    icon: str | None = Field(default=None, description="Icon key used by the frontend")

    def __eq__(self, other: Any) -> bool:
        """Compare platforms by business attributes, ignoring timestamps."""
        if not isinstance(other, Platform):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name))


class PlatformWrite(BaseModel):
    name: str = Field(min_length=1)
    icon: str | None = None
