"""Platform lookup and upsert, plus the default platform seed."""

from loguru import logger
from sqlmodel import Session

from src.storefront.entities.catalog.platform import (
    Platform,
    PlatformRepository,
    PlatformWrite,
)

DEFAULT_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("Windows", "windows"),
    ("Mac", "apple"),
    ("iOS", "apple"),
    ("Android", "android"),
)


class PlatformService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._platforms = PlatformRepository(session)

    def list_platforms(self) -> list[Platform]:
        return self._platforms.list_all()

    def upsert_platform(self, payload: PlatformWrite) -> Platform:
        platform = self._platforms.upsert(payload.name, payload.icon)
        self._session.commit()
        return platform

    def seed_defaults(self) -> list[Platform]:
        """Create or refresh the built-in platforms; safe to run repeatedly."""
        seeded = [self._platforms.upsert(name, icon) for name, icon in DEFAULT_PLATFORMS]
        self._session.commit()
        logger.info("Seeded {} platforms", len(seeded))
        return seeded
