"""Site-wide settings stored as key/value pairs, including banner slides."""

import json
from collections.abc import Mapping

from loguru import logger
from pydantic import TypeAdapter, ValidationError
from sqlmodel import Session

from src.storefront.entities.catalog.site_config import BannerSlide, SiteConfigRepository

BANNER_SLIDES_KEY = "banner_slides"

PUBLIC_KEYS: tuple[str, ...] = (
    "site_name",
    "site_description",
    "site_logo",
    BANNER_SLIDES_KEY,
    "footer_copyright",
    "footer_description",
)

SITE_KEYS: tuple[str, ...] = (*PUBLIC_KEYS, "site_title")

_slides_adapter = TypeAdapter(list[BannerSlide])


class SiteSettingsService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._settings = SiteConfigRepository(session)

    def get_public(self) -> dict[str, str]:
        return self._settings.get_many(PUBLIC_KEYS)

    def get_all(self) -> dict[str, str]:
        return self._settings.get_many()

    def update(self, values: Mapping[str, object]) -> list[str]:
        """Upsert the known site keys from `values` and return the keys written.

        Unknown keys are ignored. A `banner_slides` value must be a JSON array
        of slides, either as a string or as a list.

        Raises:
            ValueError: If `banner_slides` is not a valid slide list
        """
        written = []
        for key in SITE_KEYS:
            if key not in values or values[key] is None:
                continue
            value = values[key]
            if key == BANNER_SLIDES_KEY:
                value = self._dump_slides(self._parse_slides(value))
            self._settings.upsert(key, str(value))
            written.append(key)

        ignored = set(values) - set(SITE_KEYS)
        if ignored:
            logger.debug("Ignoring unknown site settings: {}", sorted(ignored))
        self._session.commit()
        return written

    def get_banner_slides(self) -> list[BannerSlide]:
        raw = self._settings.get(BANNER_SLIDES_KEY)
        if not raw:
            return []
        try:
            return _slides_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Stored banner slides are malformed, serving none: {}", e)
            return []

    def set_banner_slides(self, slides: list[BannerSlide]) -> list[BannerSlide]:
        self._settings.upsert(BANNER_SLIDES_KEY, self._dump_slides(slides))
        self._session.commit()
        logger.info("Banner updated with {} slides", len(slides))
        return slides

    @staticmethod
    def _parse_slides(value: object) -> list[BannerSlide]:
        try:
            if isinstance(value, str):
                return _slides_adapter.validate_json(value)
            return _slides_adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"Invalid banner slides: {e}") from e

    @staticmethod
    def _dump_slides(slides: list[BannerSlide]) -> str:
        return json.dumps([slide.model_dump(by_alias=True) for slide in slides])
