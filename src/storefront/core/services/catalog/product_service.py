"""Product use cases: creation with slug assignment, updates, detail lookup."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.catalog.errors import NotFoundError
from src.storefront.core.services.slug import SlugAssigner, normalize
from src.storefront.entities.catalog.channel import ChannelRepository
from src.storefront.entities.catalog.platform import PlatformRepository
from src.storefront.entities.catalog.product import (
    Product,
    ProductCreate,
    ProductDetail,
    ProductRepository,
    ProductUpdate,
)
from src.storefront.runtime.context import get_config

# Fields that cannot be cleared by sending null in an update
_NON_NULLABLE = ("name", "cps_link", "original_price", "sale_price", "is_active", "platform_ids")


class ProductService:
    """Orchestrates product writes; owns the commit of each unit of work."""

    def __init__(self, session: Session, assigner: SlugAssigner | None = None) -> None:
        self._session = session
        self._products = ProductRepository(session)
        self._platforms = PlatformRepository(session)
        self._channels = ChannelRepository(session)
        self._assigner = assigner or SlugAssigner(self._products, config=get_config().slug)

    def _save(self, product: Product, *, create: bool):
        def write(slug: str) -> Product:
            candidate = product.model_copy(update={"slug": slug})
            if create:
                saved = self._products.create(candidate)
            else:
                saved = self._products.update(candidate)
            self._session.commit()
            return saved

        return write

    def create_product(self, payload: ProductCreate) -> Product:
        """Create a product and assign its slug.

        `payload.slug`, when given, is used as the preferred slug; otherwise
        the slug is derived from the name.

        Raises:
            SlugError: If no unique slug could be assigned or persisted
        """
        product = Product.model_validate(payload.model_dump(exclude={"slug"}))
        created = self._assigner.persist_with_retry(
            product.name,
            payload.slug,
            product_id=product.id,
            write=self._save(product, create=True),
        )
        logger.info("Created product {} with slug '{}'", created.id, created.slug)
        return created

    def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        """Apply a partial update.

        The slug only changes when a different non-empty slug is requested,
        or when the product has none yet. Renaming a product keeps its slug.
        """
        current = self._products.get(product_id)
        if current is None:
            raise NotFoundError("Product", product_id)

        changes = payload.model_dump(exclude_unset=True)
        requested_slug = changes.pop("slug", None)
        for key in _NON_NULLABLE:
            if key in changes and changes[key] is None:
                changes.pop(key)
        updated = Product.model_validate({**current.model_dump(), **changes})
        write = self._save(updated, create=False)

        if requested_slug and requested_slug.strip():
            if normalize(requested_slug) == current.slug:
                return write(current.slug)
            saved = self._assigner.persist_with_retry(
                updated.name, requested_slug, product_id=product_id, write=write
            )
            logger.info("Product {} slug changed '{}' -> '{}'", product_id, current.slug, saved.slug)
            return saved

        if current.slug:
            return write(current.slug)

        return self._assigner.persist_with_retry(
            updated.name, None, product_id=product_id, write=write
        )

    def delete_product(self, product_id: str) -> None:
        if not self._products.delete(product_id):
            raise NotFoundError("Product", product_id)
        self._session.commit()

    def get_product(self, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def record_view(self, product_id: str) -> Product:
        """Return the product and count one detail view."""
        try:
            self._products.increment_view_count(product_id)
        except ValueError as e:
            raise NotFoundError("Product", product_id) from e
        self._session.commit()
        return self.get_product(product_id)

    def list_products(
        self,
        *,
        include_inactive: bool = False,
        platform: str | None = None,
        search: str | None = None,
    ) -> list[Product]:
        return self._products.list_all(
            include_inactive=include_inactive, platform=platform, search=search
        )

    def get_detail_by_slug(self, slug: str) -> ProductDetail:
        """Public detail page lookup; inactive products are treated as missing."""
        product = self._products.find_by_slug(slug)
        if product is None or not product.is_active:
            raise NotFoundError("Product", slug)

        channel = self._channels.get(product.channel_id) if product.channel_id else None
        return ProductDetail(
            **product.model_dump(),
            platforms=self._platforms.get_many(product.platform_ids),
            channel=channel,
        )
