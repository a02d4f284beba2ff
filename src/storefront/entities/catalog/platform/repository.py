"""Platform repository."""

from collections.abc import Sequence

from sqlmodel import Session, col, select

from src.storefront.entities.catalog.platform.entity import Platform
from src.storefront.entities.catalog.platform.table import PlatformTable


class PlatformRepository:
    """Data-access layer for platforms."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_name(self, name: str) -> Platform | None:
        row = self._session.exec(select(PlatformTable).where(PlatformTable.name == name)).first()
        if row is None:
            return None
        return Platform.model_validate(row, from_attributes=True)

    def get_many(self, platform_ids: Sequence[str]) -> list[Platform]:
        if not platform_ids:
            return []
        statement = (
            select(PlatformTable)
            .where(col(PlatformTable.id).in_(list(platform_ids)))
            .order_by(col(PlatformTable.name))
        )
        return [
            Platform.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def list_all(self) -> list[Platform]:
        statement = select(PlatformTable).order_by(col(PlatformTable.name))
        return [
            Platform.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]

    def upsert(self, name: str, icon: str | None = None) -> Platform:
        """Create the platform, or update the icon of the existing one with that name."""
        row = self._session.exec(select(PlatformTable).where(PlatformTable.name == name)).first()
        if row is None:
            row = PlatformTable(name=name, icon=icon)
        else:
            row.icon = icon
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Platform.model_validate(row, from_attributes=True)
