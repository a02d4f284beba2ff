"""Entity package: site configuration."""

from .entity import BannerSlide, SiteConfigEntry
from .repository import SiteConfigRepository
from .table import SiteConfigTable

__all__ = ["BannerSlide", "SiteConfigEntry", "SiteConfigRepository", "SiteConfigTable"]
