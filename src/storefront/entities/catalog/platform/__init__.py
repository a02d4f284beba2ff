"""Entity package: Platform."""

from .entity import Platform, PlatformWrite
from .repository import PlatformRepository
from .table import PlatformTable

__all__ = ["Platform", "PlatformRepository", "PlatformTable", "PlatformWrite"]
