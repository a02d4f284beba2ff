"""Core services. Catalog services live in `core.services.catalog`."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = ["DbManageService", "DbSessionService"]
