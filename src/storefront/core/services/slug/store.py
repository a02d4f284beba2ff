"""Persistence capability required by the slug assigner."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from src.storefront.entities.catalog.product.entity import Product


class SlugCandidate(NamedTuple):
    """A product that still needs a slug."""

    id: str
    name: str


class ProductStore(Protocol):
    """Read and write paths the slug assigner needs from product storage.

    `assign_slug` must raise PersistenceConflictError when the storage layer
    rejects the slug as a duplicate, and every method raises
    StoreUnavailableError when storage cannot be reached.
    """

    def find_by_slug(self, slug: str) -> Product | None: ...

    def list_with_missing_slug(self) -> Sequence[SlugCandidate]: ...

    def assign_slug(self, product_id: str, slug: str) -> None: ...
