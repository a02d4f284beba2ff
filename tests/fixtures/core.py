from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.storefront.core.services.database.db_manage import register_tables

__all__ = ["engine", "session", "client", "product_payload"]


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_tables()
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()


@pytest.fixture
def client(session: Session) -> Generator[TestClient]:
    """TestClient whose request sessions all use the test database session.

    The lifespan is not run, so no file database is created.
    """
    from src.storefront.api.http.app import app
    from src.storefront.api.http.app_data import ApplicationDependencies
    from src.storefront.api.http.deps import get_db_session
    from src.storefront.core.services import DbSessionService
    from src.storefront.runtime.config.config_data import ConfigData, DatabaseConfig

    def _override_session() -> Generator[Session]:
        yield session

    app.state.app_dependencies = ApplicationDependencies(
        database_service=DbSessionService(
            ConfigData(database=DatabaseConfig(url="sqlite://"))
        )
    )
    app.dependency_overrides[get_db_session] = _override_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app.state.app_dependencies.database_service.dispose()


@pytest.fixture
def product_payload() -> dict:
    """Minimal valid product creation body."""
    return {
        "name": "Office 365",
        "cps_link": "https://shop.example.com/buy/office",
        "original_price": 399,
        "sale_price": 299,
    }
