"""
목적:
- SEO 설정의 루트 객체(ConfigStore)를 제공한다.

설명:
- 최상위 스칼라 3개(site_name, default_locale, available_locales)와
  8개 섹션(DynamicAttributeMap)을 보유한다.
- 불변 조건은 변경 시점이 아니라 `validate()` 호출 시점에만 검사하며,
  발견된 위반을 모두 모아 하나의 ValidationError로 발생시킨다.
- 섹션은 읽기 전용이다. 값 변경은 섹션 내부 키 대입 또는 `merge`/`load_from_dict`로 한다.
- 기능 플래그 조회는 섹션의 `enabled` 값이 정확히 True일 때만 참이다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/seo_builder/config/attribute_map.py
- src_py/seo_builder/config/defaults.py
- src_py/seo_builder/config/registry.py
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from seo_builder.config.attribute_map import DynamicAttributeMap
from seo_builder.config.defaults import SECTION_NAMES, default_config
from seo_builder.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

MAX_DEFAULT_TITLE_LENGTH = 60
MAX_DEFAULT_DESCRIPTION_LENGTH = 160

_SCALAR_NAMES = ("site_name", "default_locale", "available_locales")


class _Section:
    """ConfigStore 섹션 읽기 전용 디스크립터."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: ConfigStore | None, owner: type | None = None):
        if instance is None:
            return self
        return instance._sections[self._name]

    def __set__(self, instance: ConfigStore, value: Any) -> None:
        raise ConfigurationError(
            f"{self._name} 섹션은 교체할 수 없습니다. merge() 또는 load_from_dict()를 사용하세요"
        )


class ConfigStore:
    """SEO 설정 루트 객체."""

    meta_tags = _Section()
    open_graph = _Section()
    twitter = _Section()
    structured_data = _Section()
    sitemap = _Section()
    robots = _Section()
    images = _Section()
    i18n = _Section()

    def __init__(self) -> None:
        defaults = default_config()

        self.site_name: str | None = defaults["site_name"]
        self.default_locale: str = defaults["default_locale"]
        self.available_locales: list[str] = defaults["available_locales"]

        self._sections: dict[str, DynamicAttributeMap] = {
            name: DynamicAttributeMap(defaults[name]) for name in SECTION_NAMES
        }

    def load_from_dict(self, data: Mapping[str, Any]) -> ConfigStore:
        """dict 설정을 병합한다.

        존재하는 최상위 스칼라는 덮어쓰고, 존재하는 섹션은 깊은 병합한다.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"설정은 매핑이어야 합니다: {type(data).__name__}")

        for name in _SCALAR_NAMES:
            if name in data:
                setattr(self, name, _copy_scalar(data[name]))

        for name in SECTION_NAMES:
            section = data.get(name)
            if section is not None:
                self.section(name).merge(section)
        return self

    def section(self, name: str) -> DynamicAttributeMap:
        """이름으로 섹션을 반환한다."""
        if name not in SECTION_NAMES:
            raise ConfigurationError(f"알 수 없는 설정 섹션입니다: {name}")
        return self._sections[name]

    def validate(self) -> bool:
        """설정 불변 조건을 검사하고 위반 사항을 모두 모아 발생시킨다."""
        errors: list[str] = []
        locales = self.available_locales

        if not isinstance(locales, list) or not locales:
            errors.append("available_locales must be a non-empty list")

        if isinstance(locales, list) and self.default_locale not in locales:
            errors.append("default_locale must be included in available_locales")

        if self.sitemap.get("enabled") and self.sitemap.get("host") is None:
            errors.append("sitemap.host is required when sitemap is enabled")

        title = self.meta_tags.get("default_title")
        if title and len(title) > MAX_DEFAULT_TITLE_LENGTH:
            errors.append(f"meta_tags.default_title should be max {MAX_DEFAULT_TITLE_LENGTH} characters")

        description = self.meta_tags.get("default_description")
        if description and len(description) > MAX_DEFAULT_DESCRIPTION_LENGTH:
            errors.append(
                f"meta_tags.default_description should be max {MAX_DEFAULT_DESCRIPTION_LENGTH} characters"
            )

        if errors:
            logger.debug("configuration validation failed: %s", errors)
            raise ValidationError(", ".join(errors))
        return True

    def sitemap_enabled(self) -> bool:
        return self.sitemap.get("enabled") is True

    def robots_enabled(self) -> bool:
        return self.robots.get("enabled") is True

    def images_enabled(self) -> bool:
        return self.images.get("enabled") is True

    def open_graph_enabled(self) -> bool:
        return self.open_graph.get("enabled") is True

    def twitter_enabled(self) -> bool:
        return self.twitter.get("enabled") is True

    def structured_data_enabled(self) -> bool:
        return self.structured_data.get("enabled") is True

    def to_dict(self) -> dict[str, Any]:
        """전체 설정을 일반 dict로 변환한다."""
        data: dict[str, Any] = {
            "site_name": self.site_name,
            "default_locale": self.default_locale,
            "available_locales": _copy_scalar(self.available_locales),
        }
        for name in SECTION_NAMES:
            data[name] = self.section(name).to_dict()
        return data

    def __repr__(self) -> str:
        return (
            f"ConfigStore(site_name={self.site_name!r}, default_locale={self.default_locale!r}, "
            f"available_locales={self.available_locales!r})"
        )


def _copy_scalar(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value
