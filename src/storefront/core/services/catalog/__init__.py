"""Catalog services orchestrating repositories and slug assignment."""

from .channel_service import ChannelService
from .errors import CatalogError, ChannelInUseError, DuplicateNameError, NotFoundError
from .platform_service import DEFAULT_PLATFORMS, PlatformService
from .product_service import ProductService
from .site_settings_service import PUBLIC_KEYS, SITE_KEYS, SiteSettingsService

__all__ = [
    "DEFAULT_PLATFORMS",
    "PUBLIC_KEYS",
    "SITE_KEYS",
    "CatalogError",
    "ChannelInUseError",
    "ChannelService",
    "DuplicateNameError",
    "NotFoundError",
    "PlatformService",
    "ProductService",
    "SiteSettingsService",
]
