import pytest

from seo_builder import DSLError, DynamicAttributeMap, NoSuchKeyError


def test_nested_mappings_are_wrapped_at_every_depth() -> None:
    amap = DynamicAttributeMap({"sizes": {"og_image": {"width": 1200, "crop": True}}})

    assert isinstance(amap.sizes, DynamicAttributeMap)
    assert isinstance(amap.sizes.og_image, DynamicAttributeMap)
    assert amap.sizes.og_image.width == 1200

    amap.sizes.og_image.width = 800
    assert amap["sizes"]["og_image"]["width"] == 800


def test_constructor_copies_backing_storage() -> None:
    source = {"webp": {"quality": 80}, "tags": ["a"]}
    amap = DynamicAttributeMap(source)

    source["webp"]["quality"] = 10
    source["tags"].append("b")

    assert amap.webp.quality == 80
    assert amap.tags == ["a"]


def test_set_preserves_identity_of_wrapped_value() -> None:
    amap = DynamicAttributeMap()
    child = DynamicAttributeMap({"url": "https://example.com"})

    assert amap.set("image", child) is amap
    assert amap.get("image") is child


def test_set_wraps_plain_mapping_and_stores_none_verbatim() -> None:
    amap = DynamicAttributeMap()
    amap["image"] = {"url": None}
    amap.host = None

    assert isinstance(amap.image, DynamicAttributeMap)
    assert "url" in amap.image
    assert amap.image.url is None
    assert amap.host is None
    assert "host" in amap


def test_named_access_on_unwritten_key_raises_but_index_access_does_not() -> None:
    amap = DynamicAttributeMap({"enabled": True})

    assert amap["missing"] is None
    assert amap.get("missing") is None
    with pytest.raises(NoSuchKeyError, match="missing"):
        amap.missing
    assert not hasattr(amap, "missing")

    amap["missing"] = "now set"
    assert amap.missing == "now set"


def test_no_such_key_error_is_a_dsl_error() -> None:
    with pytest.raises(DSLError):
        DynamicAttributeMap().unknown


def test_deep_merge_keeps_siblings() -> None:
    amap = DynamicAttributeMap({"default_image": {"url": None, "width": 1200, "height": 630}})

    amap.merge({"default_image": {"url": "https://example.com/og.png"}})

    assert amap.default_image.url == "https://example.com/og.png"
    assert amap.default_image.width == 1200
    assert amap.default_image.height == 630


def test_merge_is_incremental() -> None:
    amap = DynamicAttributeMap()

    amap.merge({"a": 1})
    result = amap.merge({"b": 2})

    assert result is amap
    assert amap.to_dict() == {"a": 1, "b": 2}


def test_merge_overwrites_non_map_values_and_accepts_wrapped_maps() -> None:
    amap = DynamicAttributeMap({"defaults": {"priority": 0.5}, "host": None})
    other = DynamicAttributeMap({"defaults": {"changefreq": "daily"}, "host": "https://example.com"})

    amap.merge(other)

    assert amap.to_dict() == {
        "defaults": {"priority": 0.5, "changefreq": "daily"},
        "host": "https://example.com",
    }
    other.defaults.changefreq = "hourly"
    assert amap.defaults.changefreq == "daily"


def test_merge_defines_named_access_for_new_keys() -> None:
    amap = DynamicAttributeMap()
    amap.merge({"user_agents": {"*": {"allow": ["/"]}}})

    assert amap.user_agents["*"]["allow"] == ["/"]


def test_merge_rejects_unsupported_type() -> None:
    with pytest.raises(DSLError, match="Cannot merge str"):
        DynamicAttributeMap().merge("invalid")


def test_to_dict_returns_independent_plain_copy() -> None:
    amap = DynamicAttributeMap({"sizes": {"small": {"width": 300}}, "items": [{"name": "x"}]})

    plain = amap.to_dict()
    plain["sizes"]["small"]["width"] = 1

    assert type(plain["sizes"]) is dict
    assert type(plain["items"][0]) is dict
    assert amap.sizes.small.width == 300


def test_mapping_helpers() -> None:
    amap = DynamicAttributeMap({"a": 1, "b": {"c": 2}})

    assert len(amap) == 2
    assert list(amap) == ["a", "b"]
    assert amap == {"a": 1, "b": {"c": 2}}
    assert amap == DynamicAttributeMap({"a": 1, "b": {"c": 2}})
