import logging

import pytest

from seo_builder import (
    ConfigStore,
    ConfigurationError,
    FeatureState,
    ValidationError,
    configure,
    current_config,
    enabled,
    feature_state,
    reset_configuration,
)


def test_current_config_is_lazy_singleton() -> None:
    first = current_config()

    assert isinstance(first, ConfigStore)
    assert current_config() is first


def test_configure_applies_mutator_and_validates() -> None:
    def mutator(config: ConfigStore) -> None:
        config.site_name = "Example"
        config.sitemap.enabled = True
        config.sitemap.host = "https://example.com"

    store = configure(mutator)

    assert store is current_config()
    assert store.site_name == "Example"
    assert enabled("sitemap")


def test_configure_propagates_validation_error() -> None:
    def mutator(config: ConfigStore) -> None:
        config.sitemap.enabled = True

    with pytest.raises(ValidationError, match="sitemap.host"):
        configure(mutator)


def test_configure_without_mutator_never_validates() -> None:
    current_config().default_locale = "fr"

    store = configure()

    assert store.default_locale == "fr"


def test_configure_rejects_non_callable() -> None:
    with pytest.raises(ConfigurationError):
        configure({"site_name": "Example"})


def test_reset_recreates_default_instance() -> None:
    configure(lambda config: setattr(config, "site_name", "Example"))
    before = current_config()

    reset_configuration()

    after = current_config()
    assert after is not before
    assert after.site_name is None


def test_feature_state_distinguishes_unknown_names() -> None:
    assert feature_state("open_graph") is FeatureState.ENABLED
    assert feature_state("sitemap") is FeatureState.DISABLED
    assert feature_state("teleport") is FeatureState.UNKNOWN


def test_enabled_returns_false_and_warns_for_unknown_name(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="seo_builder.config.registry"):
        assert enabled("teleport") is False

    assert "teleport" in caplog.text


def test_enabled_accepts_injected_store() -> None:
    store = ConfigStore()
    store.images.enabled = True

    assert enabled("images", store=store)
    assert not enabled("images")
