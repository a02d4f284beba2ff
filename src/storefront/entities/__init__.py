"""Entities module with hybrid entity-centric structure.

Each catalog entity has its own package containing:
- entity.py: Domain model exposed by the API and services
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .catalog.channel import Channel, ChannelRepository, ChannelTable
from .catalog.platform import Platform, PlatformRepository, PlatformTable
from .catalog.product import (
    Product,
    ProductPlatformLink,
    ProductRepository,
    ProductTable,
)
from .catalog.site_config import (
    BannerSlide,
    SiteConfigRepository,
    SiteConfigTable,
)

__all__ = [
    "BannerSlide",
    "Channel",
    "ChannelRepository",
    "ChannelTable",
    "Platform",
    "PlatformRepository",
    "PlatformTable",
    "Product",
    "ProductPlatformLink",
    "ProductRepository",
    "ProductTable",
    "SiteConfigRepository",
    "SiteConfigTable",
]
