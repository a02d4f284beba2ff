"""Site configuration routers: public settings and the admin editor."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from src.storefront.api.http.deps import get_site_settings_service
from src.storefront.core.services.catalog import SiteSettingsService
from src.storefront.entities.catalog.site_config import BannerSlide

router = APIRouter(tags=["site-config"])


@router.get("/api/config")
def get_public_config(
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> dict[str, str]:
    """Settings the public site needs to render its header, banner and footer."""
    return service.get_public()


@router.get("/api/config/banners", response_model=list[BannerSlide], response_model_by_alias=True)
def get_banners(
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> list[BannerSlide]:
    return service.get_banner_slides()


@router.get("/api/admin/settings")
def get_settings(
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> dict[str, str]:
    return service.get_all()


@router.post("/api/admin/settings")
def update_settings(
    values: dict[str, Any] = Body(...),
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> dict[str, Any]:
    """Upsert known site keys; unknown keys are ignored."""
    try:
        updated = service.update(values)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"success": True, "updated": updated}


@router.put("/api/admin/banners", response_model=list[BannerSlide], response_model_by_alias=True)
def replace_banners(
    slides: list[BannerSlide],
    service: SiteSettingsService = Depends(get_site_settings_service),
) -> list[BannerSlide]:
    return service.set_banner_slides(slides)
