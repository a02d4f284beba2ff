"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.services.catalog import (
    ChannelService,
    PlatformService,
    ProductService,
    SiteSettingsService,
)
from src.storefront.core.services.slug import SlugAssigner
from src.storefront.entities.catalog.product import ProductRepository
from src.storefront.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed when the request finishes.

    Services commit their own units of work; anything left uncommitted is
    rolled back on close.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_slug_assigner(session: Session = Depends(get_db_session)) -> SlugAssigner:
    return SlugAssigner(ProductRepository(session), config=get_config().slug)


def get_product_service(
    session: Session = Depends(get_db_session),
    assigner: SlugAssigner = Depends(get_slug_assigner),
) -> ProductService:
    return ProductService(session, assigner)


def get_channel_service(session: Session = Depends(get_db_session)) -> ChannelService:
    return ChannelService(session)


def get_platform_service(session: Session = Depends(get_db_session)) -> PlatformService:
    return PlatformService(session)


def get_site_settings_service(
    session: Session = Depends(get_db_session),
) -> SiteSettingsService:
    return SiteSettingsService(session)
