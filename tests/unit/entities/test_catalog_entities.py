"""Unit tests for channel, platform and site config repositories."""

from src.storefront.entities.catalog.channel import Channel, ChannelRepository
from src.storefront.entities.catalog.platform import PlatformRepository
from src.storefront.entities.catalog.product import Product, ProductRepository
from src.storefront.entities.catalog.site_config import (
    BannerSlide,
    SiteConfigRepository,
)


class TestChannelRepository:
    def test_list_with_counts(self, session):
        channels = ChannelRepository(session)
        official = channels.create(Channel(name="Official", color="#3B82F6"))
        channels.create(Channel(name="Reseller"))
        ProductRepository(session).create(
            Product(name="Office", cps_link="https://x.test", channel_id=official.id)
        )
        session.commit()

        counts = {c.name: c.product_count for c in channels.list_with_counts()}

        assert counts == {"Official": 1, "Reseller": 0}

    def test_get_by_name(self, session):
        channels = ChannelRepository(session)
        created = channels.create(Channel(name="Official"))

        assert channels.get_by_name("Official") == created
        assert channels.get_by_name("Nope") is None


class TestPlatformRepository:
    def test_upsert_updates_icon(self, session):
        platforms = PlatformRepository(session)
        first = platforms.upsert("Mac", "finder")
        second = platforms.upsert("Mac", "apple")

        assert first.id == second.id
        assert second.icon == "apple"
        assert len(platforms.list_all()) == 1

    def test_list_all_ordered_by_name(self, session):
        platforms = PlatformRepository(session)
        for name in ["Windows", "Android", "Mac"]:
            platforms.upsert(name)

        assert [p.name for p in platforms.list_all()] == ["Android", "Mac", "Windows"]


class TestSiteConfigRepository:
    def test_upsert_and_get_many(self, session):
        settings = SiteConfigRepository(session)
        settings.upsert("site_name", "Soft Shop")
        settings.upsert("site_name", "Software Shop")
        settings.upsert("footer_copyright", "2024")

        assert settings.get("site_name") == "Software Shop"
        assert settings.get_many(["site_name"]) == {"site_name": "Software Shop"}
        assert len(settings.get_many()) == 2


class TestBannerSlide:
    def test_accepts_camel_case_aliases(self):
        slide = BannerSlide.model_validate(
            {"id": "1", "imageUrl": "/a.png", "linkUrl": "/products/a"}
        )

        assert slide.image_url == "/a.png"
        assert slide.model_dump(by_alias=True)["linkUrl"] == "/products/a"
