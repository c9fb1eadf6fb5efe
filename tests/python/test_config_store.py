import pytest

from seo_builder import ConfigStore, ConfigurationError, DynamicAttributeMap, ValidationError
from seo_builder.config.defaults import SECTION_NAMES, default_config


def test_defaults_are_seeded() -> None:
    store = ConfigStore()

    assert store.site_name is None
    assert store.default_locale == "en"
    assert store.default_locale in store.available_locales
    assert store.meta_tags.title_separator == " | "
    assert store.meta_tags.append_site_name is True
    assert store.open_graph.enabled is True
    assert store.open_graph.default_image.width == 1200
    assert store.twitter.card_type == "summary_large_image"
    assert store.sitemap.enabled is False
    assert store.sitemap.output_path == "public/sitemap.xml"
    assert store.sitemap.defaults.changefreq == "weekly"
    assert store.robots.user_agents["*"].allow == ["/"]
    assert store.images.sizes.og_image.crop is True
    assert store.images.sizes.small.to_dict() == {"width": 300}
    assert store.i18n.load_path == "config/locales/seo/**/*.yml"
    for name in SECTION_NAMES:
        assert isinstance(getattr(store, name), DynamicAttributeMap)


def test_instances_never_share_state() -> None:
    first = ConfigStore()
    second = ConfigStore()

    first.meta_tags.default_keywords.append("seo")
    first.open_graph.default_image.width = 1

    assert second.meta_tags.default_keywords == []
    assert second.open_graph.default_image.width == 1200
    assert default_config()["open_graph"]["default_image"]["width"] == 1200


def test_load_from_dict_overwrites_scalars_and_merges_sections() -> None:
    store = ConfigStore().load_from_dict(
        {
            "site_name": "Example",
            "available_locales": ["en", "it"],
            "open_graph": {"default_image": {"url": "https://example.com/og.png"}},
            "sitemap": {"enabled": True, "host": "https://example.com"},
        }
    )

    assert store.site_name == "Example"
    assert store.available_locales == ["en", "it"]
    assert store.default_locale == "en"
    assert store.open_graph.default_image.url == "https://example.com/og.png"
    assert store.open_graph.default_image.height == 630
    assert store.open_graph.default_type == "website"
    assert store.sitemap.compress is False
    assert store.sitemap_enabled()


def test_load_from_dict_adds_new_keys() -> None:
    store = ConfigStore().load_from_dict({"structured_data": {"organization": {"name": "Acme"}}})

    assert store.structured_data.organization.name == "Acme"


def test_to_dict_round_trips_through_fresh_store() -> None:
    store = ConfigStore().load_from_dict(
        {"site_name": "Example", "twitter": {"site": "@example"}, "robots": {"enabled": True}}
    )

    flattened = store.to_dict()
    restored = ConfigStore().load_from_dict(flattened).to_dict()

    assert restored == flattened
    assert set(flattened) == {"site_name", "default_locale", "available_locales", *SECTION_NAMES}


def test_validate_returns_true_for_defaults() -> None:
    assert ConfigStore().validate() is True


def test_validate_requires_sitemap_host_when_enabled() -> None:
    store = ConfigStore()
    store.sitemap.enabled = True

    with pytest.raises(ValidationError, match="sitemap.host"):
        store.validate()

    store.sitemap.host = "https://example.com"
    assert store.validate() is True


def test_validate_default_locale_membership() -> None:
    store = ConfigStore()
    store.default_locale = "fr"

    with pytest.raises(ValidationError, match="default_locale must be included in available_locales"):
        store.validate()


def test_validate_rejects_empty_or_non_list_locales() -> None:
    store = ConfigStore()
    store.available_locales = []
    with pytest.raises(ValidationError, match="available_locales must be a non-empty list"):
        store.validate()

    store.available_locales = "en"
    with pytest.raises(ValidationError, match="available_locales must be a non-empty list"):
        store.validate()


def test_validate_collects_every_failure_in_order() -> None:
    store = ConfigStore()
    store.available_locales = []
    store.sitemap.enabled = True
    store.meta_tags.default_title = "x" * 61
    store.meta_tags.default_description = "y" * 161

    with pytest.raises(ValidationError) as exc_info:
        store.validate()

    assert str(exc_info.value) == ", ".join(
        [
            "available_locales must be a non-empty list",
            "default_locale must be included in available_locales",
            "sitemap.host is required when sitemap is enabled",
            "meta_tags.default_title should be max 60 characters",
            "meta_tags.default_description should be max 160 characters",
        ]
    )


def test_validate_accepts_boundary_lengths() -> None:
    store = ConfigStore()
    store.meta_tags.default_title = "x" * 60
    store.meta_tags.default_description = "y" * 160

    assert store.validate() is True


def test_feature_queries_require_literal_true() -> None:
    store = ConfigStore()

    assert store.open_graph_enabled()
    assert store.twitter_enabled()
    assert store.structured_data_enabled()
    assert not store.sitemap_enabled()
    assert not store.robots_enabled()
    assert not store.images_enabled()

    store.robots.enabled = "yes"
    store.images.enabled = 1
    assert not store.robots_enabled()
    assert not store.images_enabled()


def test_section_lookup() -> None:
    store = ConfigStore()

    assert store.section("i18n") is store.i18n


def test_sections_cannot_be_replaced() -> None:
    store = ConfigStore()
    section = store.open_graph

    with pytest.raises(ConfigurationError, match="open_graph"):
        store.open_graph = {"enabled": True, "default_type": "article"}

    assert store.open_graph is section
    assert store.to_dict()["open_graph"]["default_type"] == "website"


def test_load_from_dict_copies_list_scalars() -> None:
    data = {"available_locales": ["en"]}
    first = ConfigStore().load_from_dict(data)
    second = ConfigStore().load_from_dict(data)

    first.available_locales.append("it")

    assert second.available_locales == ["en"]
    assert data["available_locales"] == ["en"]
