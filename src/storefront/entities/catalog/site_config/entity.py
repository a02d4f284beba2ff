"""Entity: site configuration entries and banner slides."""

from pydantic import BaseModel, Field


class BannerSlide(BaseModel):
    """One slide of the home page banner carousel."""

    id: str = Field(min_length=1)
    image_url: str = Field(min_length=1, alias="imageUrl")
    link_url: str | None = Field(default=None, alias="linkUrl")
    title: str | None = None

    model_config = {"populate_by_name": True}


class SiteConfigEntry(BaseModel):
    key: str
    value: str
