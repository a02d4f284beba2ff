"""Schema management for the storefront database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def register_tables() -> None:
    """Import every table model so it is registered on SQLModel.metadata."""
    from src.storefront.entities.catalog.channel.table import ChannelTable  # noqa: F401
    from src.storefront.entities.catalog.platform.table import PlatformTable  # noqa: F401
    from src.storefront.entities.catalog.product.table import (  # noqa: F401
        ProductPlatformLink,
        ProductTable,
    )
    from src.storefront.entities.catalog.site_config.table import (  # noqa: F401
        SiteConfigTable,
    )


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
