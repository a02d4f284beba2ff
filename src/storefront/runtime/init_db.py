"""Database initialization script."""

from src.storefront.core.services import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables for the configured database."""
    database_service = DbSessionService()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
