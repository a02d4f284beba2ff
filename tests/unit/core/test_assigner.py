"""Unit tests for SlugAssigner: single assignment and the write retry."""

from unittest.mock import Mock

import pytest

from src.storefront.core.services.slug import (
    PersistenceConflictError,
    SlugAssigner,
    StoreUnavailableError,
    is_valid_slug,
)
from src.storefront.runtime.config.config_data import SlugConfig
from tests.fixtures.slug import InMemoryProductStore, make_product


class TestAssignSlugForName:
    """Test the transliterate -> normalize -> resolve pipeline."""

    def test_chinese_name(self, assigner):
        assert assigner.assign_slug_for_name("微软365") == "wei-ruan-365"

    def test_latin_name(self, assigner):
        assert assigner.assign_slug_for_name("Office 365") == "office-365"

    def test_surrounding_whitespace_is_ignored(self, assigner):
        assert assigner.assign_slug_for_name("  Office 365  ") == "office-365"

    def test_collision_appends_counter(self):
        store = InMemoryProductStore([make_product("Office 365", "office-365")])
        assigner = SlugAssigner(store)

        assert assigner.assign_slug_for_name("Office 365") == "office-365-1"

    def test_deterministic_for_same_state(self, assigner):
        first = assigner.assign_slug_for_name("迅雷 会员")
        second = assigner.assign_slug_for_name("迅雷 会员")

        assert first == second

    @pytest.mark.parametrize(
        "name",
        ["Adobe® Photoshop 2024", "WPS Office 专业版", "C++ / C#", "Ünïcode ñame", "a\tb\nc"],
    )
    def test_result_is_url_safe(self, assigner, name):
        assert is_valid_slug(assigner.assign_slug_for_name(name))

    def test_preferred_slug_skips_transliteration(self):
        transliterator = Mock()
        assigner = SlugAssigner(InMemoryProductStore(), transliterator=transliterator)

        assert assigner.assign_slug_for_name("微软365", "My Cool Slug!!") == "my-cool-slug"
        transliterator.transliterate.assert_not_called()

    def test_preferred_slug_overrides_latin_name(self, assigner):
        assert assigner.assign_slug_for_name("Adobe Photoshop", "My Cool Slug!!") == "my-cool-slug"

    def test_blank_preferred_slug_uses_name(self, assigner):
        assert assigner.assign_slug_for_name("Office 365", "   ") == "office-365"

    def test_preferred_slug_is_made_unique(self):
        store = InMemoryProductStore([make_product("Other", "my-cool-slug")])
        assigner = SlugAssigner(store)

        assert assigner.assign_slug_for_name("X", "My Cool Slug") == "my-cool-slug-1"

    @pytest.mark.parametrize("name", ["!!!", "   ", "™™"])
    def test_empty_normalization_falls_back(self, assigner, name):
        product_id = "3f2b8c1e-0d4a-4b7e-9c2f-5a1b2c3d4e5f"

        assert assigner.assign_slug_for_name(name, product_id=product_id) == "product-3d4e5f"

    def test_fallback_uses_configured_prefix(self, memory_store):
        assigner = SlugAssigner(
            memory_store, config=SlugConfig(fallback_prefix="item", fallback_suffix_length=4)
        )

        assert assigner.assign_slug_for_name("???", product_id="abcd1234") == "item-1234"

    def test_fallback_without_id_is_deterministic(self, assigner):
        first = assigner.assign_slug_for_name("!!!")
        second = assigner.assign_slug_for_name("!!!")

        assert first == second
        assert first.startswith("product-")
        assert is_valid_slug(first)

    def test_transliteration_failure_uses_raw_name(self, memory_store):
        transliterator = Mock()
        transliterator.transliterate.side_effect = RuntimeError("dictionary missing")
        assigner = SlugAssigner(memory_store, transliterator=transliterator)

        assert assigner.assign_slug_for_name("Office 365") == "office-365"

    def test_transliteration_failure_on_cjk_falls_back(self, memory_store):
        transliterator = Mock()
        transliterator.transliterate.side_effect = RuntimeError("boom")
        assigner = SlugAssigner(memory_store, transliterator=transliterator)

        assert assigner.assign_slug_for_name("微软", product_id="ffff000111") == "product-000111"

    def test_own_slug_is_stable(self):
        own = make_product("Office 365", "office-365")
        assigner = SlugAssigner(InMemoryProductStore([own]))

        assert assigner.assign_slug_for_name("Office 365", product_id=own.id) == "office-365"

    def test_store_unavailable_propagates(self):
        store = Mock()
        store.find_by_slug.side_effect = StoreUnavailableError("connection refused")

        with pytest.raises(StoreUnavailableError):
            SlugAssigner(store).assign_slug_for_name("Office 365")


class TestPersistWithRetry:
    """Test the single retry on a write conflict."""

    def test_write_receives_computed_slug(self, assigner):
        write = Mock(return_value="saved")

        result = assigner.persist_with_retry("Office 365", None, product_id="p1", write=write)

        assert result == "saved"
        write.assert_called_once_with("office-365")

    def test_conflict_recomputes_and_retries_once(self, memory_store):
        assigner = SlugAssigner(memory_store)

        def write(slug: str) -> str:
            if slug == "office-365":
                # Another writer claims the slug between check and write
                memory_store.add(make_product("Office 365", "office-365"))
                raise PersistenceConflictError(slug)
            return slug

        assert assigner.persist_with_retry("Office 365", None, product_id="p1", write=write) == (
            "office-365-1"
        )

    def test_second_conflict_propagates(self, assigner):
        write = Mock(side_effect=PersistenceConflictError("office-365"))

        with pytest.raises(PersistenceConflictError):
            assigner.persist_with_retry("Office 365", None, product_id="p1", write=write)

        assert write.call_count == 2

    def test_other_errors_are_not_retried(self, assigner):
        write = Mock(side_effect=StoreUnavailableError("down"))

        with pytest.raises(StoreUnavailableError):
            assigner.persist_with_retry("Office 365", None, product_id="p1", write=write)

        assert write.call_count == 1
