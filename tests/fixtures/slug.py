"""In-memory ProductStore for slug assigner unit tests."""

from __future__ import annotations

import pytest

from src.storefront.core.services.slug import (
    PersistenceConflictError,
    SlugAssigner,
    SlugCandidate,
)
from src.storefront.entities.catalog.product import Product

__all__ = ["InMemoryProductStore", "memory_store", "assigner", "make_product"]


def make_product(name: str, slug: str | None = None, **kwargs) -> Product:
    return Product(name=name, slug=slug, cps_link="https://shop.example.com/buy", **kwargs)


class InMemoryProductStore:
    """Dict-backed store honouring the same uniqueness rule as the database."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products: dict[str, Product] = {}
        self.assign_calls: list[tuple[str, str]] = []
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    def find_by_slug(self, slug: str) -> Product | None:
        for product in self.products.values():
            if product.slug == slug:
                return product
        return None

    def list_with_missing_slug(self) -> list[SlugCandidate]:
        return [
            SlugCandidate(id=p.id, name=p.name)
            for p in self.products.values()
            if not p.slug
        ]

    def assign_slug(self, product_id: str, slug: str) -> None:
        self.assign_calls.append((product_id, slug))
        owner = self.find_by_slug(slug)
        if owner is not None and owner.id != product_id:
            raise PersistenceConflictError(slug, product_id)
        self.products[product_id] = self.products[product_id].model_copy(
            update={"slug": slug}
        )

    def slugs(self) -> list[str | None]:
        return [p.slug for p in self.products.values()]


@pytest.fixture
def memory_store() -> InMemoryProductStore:
    return InMemoryProductStore()


@pytest.fixture
def assigner(memory_store: InMemoryProductStore) -> SlugAssigner:
    return SlugAssigner(memory_store)
