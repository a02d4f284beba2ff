"""Product repository: CRUD access plus the slug store operations."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlmodel import Session, col, select

from src.storefront.core.services.slug.errors import (
    PersistenceConflictError,
    PersistenceError,
    StoreUnavailableError,
)
from src.storefront.core.services.slug.store import SlugCandidate
from src.storefront.entities.catalog.platform.table import PlatformTable
from src.storefront.entities.catalog.product.entity import Product
from src.storefront.entities.catalog.product.table import (
    ProductPlatformLink,
    ProductTable,
)


class ProductRepository:
    """Data-access layer for products.

    Also implements the ProductStore protocol used by the slug assigner.
    Writes other than `assign_slug` only flush; the caller owns the commit.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        try:
            yield
        except OperationalError as exc:
            self._session.rollback()
            logger.error("Product store unavailable: {}", exc)
            raise StoreUnavailableError(str(exc)) from exc

    def _platform_ids(self, product_id: str) -> list[str]:
        statement = select(ProductPlatformLink.platform_id).where(
            ProductPlatformLink.product_id == product_id
        )
        return list(self._session.exec(statement).all())

    def _to_entity(self, row: ProductTable) -> Product:
        data = row.model_dump()
        data["platform_ids"] = self._platform_ids(row.id)
        return Product.model_validate(data)

    def _set_platforms(self, product_id: str, platform_ids: Sequence[str]) -> None:
        existing = self._session.exec(
            select(ProductPlatformLink).where(
                ProductPlatformLink.product_id == product_id
            )
        ).all()
        for link in existing:
            self._session.delete(link)
        self._session.flush()
        for platform_id in dict.fromkeys(platform_ids):
            self._session.add(
                ProductPlatformLink(product_id=product_id, platform_id=platform_id)
            )
        self._session.flush()

    def _slug_owner_id(self, slug: str) -> str | None:
        statement = select(ProductTable.id).where(ProductTable.slug == slug)
        return self._session.exec(statement).first()

    def _flush_or_conflict(self, product_id: str, slug: str | None) -> None:
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            owner = self._slug_owner_id(slug) if slug else None
            if owner is not None and owner != product_id:
                raise PersistenceConflictError(slug, product_id) from exc
            raise

    def create(self, product: Product) -> Product:
        """Insert a product; raises PersistenceConflictError if its slug is taken."""
        with self._store_errors():
            row = ProductTable.model_validate(
                product.model_dump(exclude={"platform_ids"})
            )
            row.slug = product.slug or None
            self._session.add(row)
            self._flush_or_conflict(product.id, row.slug)
            self._set_platforms(product.id, product.platform_ids)
            self._session.refresh(row)
            return self._to_entity(row)

    def get(self, product_id: str) -> Product | None:
        with self._store_errors():
            row = self._session.get(ProductTable, product_id)
            if row is None:
                return None
            return self._to_entity(row)

    def update(self, product: Product) -> Product:
        """Persist changes to an existing product.

        Raises:
            ValueError: If the product does not exist
            PersistenceConflictError: If the new slug is held by another product
        """
        with self._store_errors():
            row = self._session.get(ProductTable, product.id)
            if row is None:
                raise ValueError(f"Product {product.id} not found")

            data = product.model_dump(exclude={"id", "created_at", "updated_at", "platform_ids"})
            data["slug"] = product.slug or None
            for key, value in data.items():
                setattr(row, key, value)
            self._session.add(row)
            self._flush_or_conflict(product.id, data["slug"])
            self._set_platforms(product.id, product.platform_ids)
            self._session.refresh(row)
            return self._to_entity(row)

    def delete(self, product_id: str) -> bool:
        with self._store_errors():
            row = self._session.get(ProductTable, product_id)
            if row is None:
                return False
            self._set_platforms(product_id, [])
            self._session.delete(row)
            self._session.flush()
            return True

    def list_all(
        self,
        *,
        include_inactive: bool = False,
        platform: str | None = None,
        search: str | None = None,
    ) -> list[Product]:
        """List products newest first.

        `platform` keeps products linked to that platform name. `search` keeps
        products whose name or subtitle contains it, ignoring case.
        """
        with self._store_errors():
            statement = select(ProductTable)
            if not include_inactive:
                statement = statement.where(col(ProductTable.is_active).is_(True))
            if platform:
                statement = (
                    statement.join(
                        ProductPlatformLink,
                        col(ProductPlatformLink.product_id) == ProductTable.id,
                    )
                    .join(PlatformTable, col(PlatformTable.id) == ProductPlatformLink.platform_id)
                    .where(PlatformTable.name == platform)
                )
            if search:
                pattern = f"%{search}%"
                statement = statement.where(
                    or_(
                        col(ProductTable.name).ilike(pattern),
                        col(ProductTable.subtitle).ilike(pattern),
                    )
                )
            statement = statement.order_by(col(ProductTable.created_at).desc())
            return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def increment_view_count(self, product_id: str) -> None:
        with self._store_errors():
            row = self._session.get(ProductTable, product_id)
            if row is None:
                raise ValueError(f"Product {product_id} not found")
            row.view_count += 1
            self._session.add(row)
            self._session.flush()

    def count_by_channel(self, channel_id: str) -> int:
        with self._store_errors():
            statement = select(func.count()).select_from(ProductTable).where(
                ProductTable.channel_id == channel_id
            )
            return self._session.exec(statement).one()

    # --- ProductStore -------------------------------------------------------

    def find_by_slug(self, slug: str) -> Product | None:
        """Exact-match lookup of the product holding `slug`."""
        with self._store_errors():
            row = self._session.exec(
                select(ProductTable).where(ProductTable.slug == slug)
            ).first()
            if row is None:
                return None
            return self._to_entity(row)

    def list_with_missing_slug(self) -> list[SlugCandidate]:
        """Products whose slug is NULL or empty, oldest first."""
        with self._store_errors():
            statement = (
                select(ProductTable.id, ProductTable.name)
                .where(or_(col(ProductTable.slug).is_(None), ProductTable.slug == ""))
                .order_by(col(ProductTable.created_at), col(ProductTable.id))
            )
            return [SlugCandidate(id=pid, name=name) for pid, name in self._session.exec(statement).all()]

    def assign_slug(self, product_id: str, slug: str) -> None:
        """Set and commit the slug of one product.

        Commits immediately so every backfilled product is durable on its
        own and later lookups see it.
        """
        with self._store_errors():
            row = self._session.get(ProductTable, product_id)
            if row is None:
                raise PersistenceError(f"Product {product_id} not found")
            row.slug = slug
            self._session.add(row)
            try:
                self._session.commit()
            except IntegrityError as exc:
                self._session.rollback()
                raise PersistenceConflictError(slug, product_id) from exc
            except OperationalError:
                raise
            except SQLAlchemyError as exc:
                self._session.rollback()
                raise PersistenceError(f"Failed to save slug for {product_id}: {exc}") from exc
