"""Unit tests for the batch slug backfill."""

import threading
from unittest.mock import patch

import pytest

from src.storefront.core.services.slug import (
    BackfillAbortedError,
    PersistenceConflictError,
    PersistenceError,
    SlugAssigner,
    StoreUnavailableError,
    is_valid_slug,
)
from src.storefront.runtime.config.config_data import SlugConfig
from tests.fixtures.slug import InMemoryProductStore, make_product


@pytest.fixture
def catalog_store() -> InMemoryProductStore:
    return InMemoryProductStore(
        [
            make_product("Office 365", "office-365"),
            make_product("Office 365"),
            make_product("微软365"),
            make_product("!!!", id="3f2b8c1e-0d4a-4b7e-9c2f-5a1b2c3d4e5f"),
            make_product("Office 365", ""),
        ]
    )


class TestBackfillAllMissingSlugs:
    def test_assigns_every_missing_slug(self, catalog_store):
        report = SlugAssigner(catalog_store).backfill_all_missing_slugs()

        assert report.processed == 4
        assert report.skipped == 0
        assert not report.stopped
        assert sorted(catalog_store.slugs()) == [
            "office-365",
            "office-365-1",
            "office-365-2",
            "product-3d4e5f",
            "wei-ruan-365",
        ]
        assert all(is_valid_slug(slug) for slug in catalog_store.slugs())

    def test_existing_slugs_are_untouched(self, catalog_store):
        original = next(p for p in catalog_store.products.values() if p.slug == "office-365")

        SlugAssigner(catalog_store).backfill_all_missing_slugs()

        assert catalog_store.products[original.id].slug == "office-365"
        assert original.id not in [pid for pid, _ in catalog_store.assign_calls]

    def test_second_run_is_a_no_op(self, catalog_store):
        assigner = SlugAssigner(catalog_store)
        assigner.backfill_all_missing_slugs()
        slugs_after_first = dict((pid, p.slug) for pid, p in catalog_store.products.items())
        calls_after_first = len(catalog_store.assign_calls)

        report = assigner.backfill_all_missing_slugs()

        assert report.processed == 0
        assert len(catalog_store.assign_calls) == calls_after_first
        assert {pid: p.slug for pid, p in catalog_store.products.items()} == slugs_after_first

    def test_failure_on_one_product_does_not_stop_the_run(self):
        broken = make_product("Broken")
        store = InMemoryProductStore([make_product("Alpha"), broken, make_product("Gamma")])
        original_assign = store.assign_slug

        def assign(product_id: str, slug: str) -> None:
            if product_id == broken.id:
                raise PersistenceError("disk quota exceeded")
            original_assign(product_id, slug)

        with patch.object(store, "assign_slug", side_effect=assign):
            report = SlugAssigner(store).backfill_all_missing_slugs()

        assert report.processed == 2
        assert report.skipped == 1
        assert report.failures[0].product_id == broken.id
        assert "disk quota" in report.failures[0].error
        assert store.products[broken.id].slug is None

    def test_exhausted_candidates_skip_only_that_product(self):
        crowded = make_product("Office 365")
        store = InMemoryProductStore(
            [
                make_product("Office 365", "office-365"),
                make_product("Alpha"),
                crowded,
                make_product("Gamma"),
            ]
        )

        report = SlugAssigner(store, config=SlugConfig(max_attempts=1)).backfill_all_missing_slugs()

        assert report.processed == 2
        assert report.skipped == 1
        assert report.failures[0].product_id == crowded.id
        assert store.products[crowded.id].slug is None
        assert sorted(s for s in store.slugs() if s) == ["alpha", "gamma", "office-365"]

    def test_repeated_write_conflict_skips_only_that_product(self):
        contested = make_product("Beta")
        store = InMemoryProductStore([make_product("Alpha"), contested, make_product("Gamma")])
        original_assign = store.assign_slug
        contested_writes = []

        def assign(product_id: str, slug: str) -> None:
            if product_id == contested.id:
                contested_writes.append(slug)
                raise PersistenceConflictError(slug, product_id)
            original_assign(product_id, slug)

        with patch.object(store, "assign_slug", side_effect=assign):
            report = SlugAssigner(store).backfill_all_missing_slugs()

        assert contested_writes == ["beta", "beta"]
        assert report.processed == 2
        assert report.skipped == 1
        assert report.failures[0].product_id == contested.id
        assert store.products[contested.id].slug is None
        assert sorted(s for s in store.slugs() if s) == ["alpha", "gamma"]

    def test_store_unavailable_aborts_with_partial_report(self):
        products = [make_product("Alpha"), make_product("Beta"), make_product("Gamma")]
        store = InMemoryProductStore(products)
        original_assign = store.assign_slug

        def assign(product_id: str, slug: str) -> None:
            if product_id == products[1].id:
                raise StoreUnavailableError("connection lost")
            original_assign(product_id, slug)

        with patch.object(store, "assign_slug", side_effect=assign):
            with pytest.raises(BackfillAbortedError) as exc_info:
                SlugAssigner(store).backfill_all_missing_slugs()

        assert exc_info.value.report.processed == 1
        assert store.products[products[0].id].slug == "alpha"
        assert store.products[products[2].id].slug is None

    def test_store_unavailable_while_listing(self):
        store = InMemoryProductStore()

        with patch.object(
            store, "list_with_missing_slug", side_effect=StoreUnavailableError("down")
        ):
            with pytest.raises(BackfillAbortedError) as exc_info:
                SlugAssigner(store).backfill_all_missing_slugs()

        assert exc_info.value.report.processed == 0

    def test_stop_event_halts_between_products(self):
        products = [make_product("Alpha"), make_product("Beta"), make_product("Gamma")]
        store = InMemoryProductStore(products)
        stop_event = threading.Event()
        original_assign = store.assign_slug

        def assign(product_id: str, slug: str) -> None:
            original_assign(product_id, slug)
            stop_event.set()

        with patch.object(store, "assign_slug", side_effect=assign):
            report = SlugAssigner(store).backfill_all_missing_slugs(stop_event)

        assert report.processed == 1
        assert report.stopped
        assert store.products[products[0].id].slug == "alpha"
        assert store.products[products[1].id].slug is None

    def test_empty_store(self, memory_store):
        report = SlugAssigner(memory_store).backfill_all_missing_slugs()

        assert report.processed == 0
        assert report.failures == []
