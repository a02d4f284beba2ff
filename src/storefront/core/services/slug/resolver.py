"""Collision numbering against the product store."""

from loguru import logger

from src.storefront.core.services.slug.errors import UniquenessExhaustedError
from src.storefront.core.services.slug.normalizer import SEPARATOR
from src.storefront.core.services.slug.store import ProductStore


class UniquenessResolver:
    """Find the first free slug among `base`, `base-1`, `base-2`, ...

    The check runs against committed store state with no lock held. Two
    writers racing for the same candidate are caught by the storage layer's
    unique constraint, which surfaces as PersistenceConflictError on write.
    """

    def __init__(self, store: ProductStore, max_attempts: int = 10_000) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._store = store
        self._max_attempts = max_attempts

    def resolve(self, base: str, exclude_id: str | None = None) -> str:
        """Return a slug derived from `base` that no other product holds.

        A product owning the candidate whose id equals `exclude_id` does not
        count as a conflict, so recomputing a product's own slug is stable.
        """
        candidate = base
        counter = 1
        for _ in range(self._max_attempts):
            owner = self._store.find_by_slug(candidate)
            if owner is None or owner.id == exclude_id:
                if candidate != base:
                    logger.debug("Slug '{}' taken; using '{}'", base, candidate)
                return candidate
            candidate = f"{base}{SEPARATOR}{counter}"
            counter += 1

        raise UniquenessExhaustedError(base, self._max_attempts)
