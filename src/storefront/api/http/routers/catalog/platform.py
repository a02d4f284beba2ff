"""Platform API router."""

from fastapi import APIRouter, Depends

from src.storefront.api.http.deps import get_platform_service
from src.storefront.core.services.catalog import PlatformService
from src.storefront.entities.catalog.platform import Platform, PlatformWrite

router = APIRouter(prefix="/api/platforms", tags=["platforms"])


@router.get("", response_model=list[Platform])
def list_platforms(
    service: PlatformService = Depends(get_platform_service),
) -> list[Platform]:
    return service.list_platforms()


@router.post("", response_model=Platform)
def upsert_platform(
    payload: PlatformWrite,
    service: PlatformService = Depends(get_platform_service),
) -> Platform:
    """Create a platform, or update the icon of the one with the same name."""
    return service.upsert_platform(payload)
