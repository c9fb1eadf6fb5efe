"""
목적:
- Open Graph 프로토콜용 빌더를 제공한다.

설명:
- og:title/type/image/url을 필수로 검증하며, 누락된 필드를 모두 모아 한 번에 보고한다.
- og:article 속성은 전용 ArticleBuilder 블록으로 구성한다.
- image/video는 URL 문자열 또는 속성 dict(url/width/height/alt 등)를 받는다.

디자인 패턴:
- 빌더(Builder).

참조:
- src_py/seo_builder/dsl/base.py
- src_py/seo_builder/contracts/payload_models.py
"""

from __future__ import annotations

from typing import Any

from seo_builder.contracts.payload_models import ArticlePayload, OpenGraphPayload
from seo_builder.dsl.base import Block, BuilderBase, flatten_values
from seo_builder.exceptions import ValidationError

REQUIRED_FIELDS: tuple[str, ...] = ("title", "type", "image", "url")


class ArticleBuilder(BuilderBase):
    """og:article 속성 빌더."""

    payload_model = ArticlePayload

    def author(self, value: str | None = None):
        return self._field("author", value)

    def published_time(self, value: str | None = None):
        return self._field("published_time", value)

    def modified_time(self, value: str | None = None):
        return self._field("modified_time", value)

    def expiration_time(self, value: str | None = None):
        return self._field("expiration_time", value)

    def section(self, value: str | None = None):
        return self._field("section", value)

    def tag(self, *values: Any):
        if not values:
            return self.get("tag")
        return self.set("tag", flatten_values(values))


class OpenGraphBuilder(BuilderBase):
    """Open Graph 빌더."""

    payload_model = OpenGraphPayload

    def title(self, value: str | None = None):
        return self._field("title", value)

    def description(self, value: str | None = None):
        return self._field("description", value)

    def type(self, value: str | None = None):
        return self._field("type", value)

    def url(self, value: str | None = None):
        return self._field("url", value)

    def image(self, value: str | dict[str, Any] | None = None):
        return self._field("image", value)

    def site_name(self, value: str | None = None):
        return self._field("site_name", value)

    def locale(self, value: str | None = None):
        return self._field("locale", value)

    def locale_alternate(self, *values: Any):
        if not values:
            return self.get("locale_alternate")
        return self.set("locale_alternate", flatten_values(values))

    def article(self, block: Block | None = None):
        """block이 있으면 ArticleBuilder로 구성해 저장하고, 없으면 현재 값을 반환한다."""
        if block is None:
            return self.get("article")
        return self.set("article", ArticleBuilder().evaluate(block).build())

    def video(self, value: str | dict[str, Any] | None = None):
        return self._field("video", value)

    def audio(self, value: str | dict[str, Any] | None = None):
        return self._field("audio", value)

    def validate(self) -> bool:
        errors = [f"og:{name} is required" for name in REQUIRED_FIELDS if self._config.get(name) is None]
        if errors:
            raise ValidationError(", ".join(errors))
        return True
