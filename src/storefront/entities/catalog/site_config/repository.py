"""Site configuration repository."""

from collections.abc import Iterable

from sqlmodel import Session, col, select

from src.storefront.entities.catalog.site_config.entity import SiteConfigEntry
from src.storefront.entities.catalog.site_config.table import SiteConfigTable


class SiteConfigRepository:
    """Data-access layer for site configuration entries."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, key: str) -> str | None:
        row = self._session.get(SiteConfigTable, key)
        return None if row is None else row.value

    def get_many(self, keys: Iterable[str] | None = None) -> dict[str, str]:
        """Return `{key: value}` for the given keys, or for every key when None."""
        statement = select(SiteConfigTable)
        if keys is not None:
            statement = statement.where(col(SiteConfigTable.key).in_(list(keys)))
        return {row.key: row.value for row in self._session.exec(statement).all()}

    def upsert(self, key: str, value: str) -> SiteConfigEntry:
        row = self._session.get(SiteConfigTable, key)
        if row is None:
            row = SiteConfigTable(key=key, value=value)
        else:
            row.value = value
        self._session.add(row)
        self._session.flush()
        return SiteConfigEntry(key=row.key, value=row.value)
