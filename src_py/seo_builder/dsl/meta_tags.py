"""
목적:
- HTML 메타 태그용 빌더를 제공한다.

설명:
- title/description/keywords/author/canonical/robots/viewport/charset 필드를 명시적으로 선언한다.
- 필수 필드는 없고, title/description 길이 권장치만 검증한다.

디자인 패턴:
- 빌더(Builder).

참조:
- src_py/seo_builder/dsl/base.py
- src_py/seo_builder/contracts/payload_models.py
"""

from __future__ import annotations

from typing import Any

from seo_builder.contracts.payload_models import MetaTagsPayload
from seo_builder.dsl.base import BuilderBase, flatten_values
from seo_builder.exceptions import ValidationError

MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160

DEFAULT_VIEWPORT = "width=device-width, initial-scale=1.0"
DEFAULT_CHARSET = "UTF-8"


class MetaTagsBuilder(BuilderBase):
    """메타 태그 빌더."""

    payload_model = MetaTagsPayload

    def title(self, value: str | None = None):
        return self._field("title", value)

    def description(self, value: str | None = None):
        return self._field("description", value)

    def keywords(self, *values: Any):
        if not values:
            return self.get("keywords")
        return self.set("keywords", flatten_values(values))

    def author(self, value: str | None = None):
        return self._field("author", value)

    def canonical(self, value: str | None = None):
        return self._field("canonical", value)

    def robots(self, index: bool = True, follow: bool = True, **options: Any) -> MetaTagsBuilder:
        """robots 지시어를 저장한다. 추가 지시어(noarchive 등)는 키워드 인자로 전달한다."""
        return self.set("robots", {"index": index, "follow": follow, **options})

    def viewport(self, value: str = DEFAULT_VIEWPORT) -> MetaTagsBuilder:
        return self.set("viewport", value)

    def charset(self, value: str = DEFAULT_CHARSET) -> MetaTagsBuilder:
        return self.set("charset", value)

    def validate(self) -> bool:
        errors: list[str] = []

        title = self._config.get("title")
        if title and len(title) > MAX_TITLE_LENGTH:
            errors.append(f"Title too long ({len(title)} chars, max {MAX_TITLE_LENGTH} recommended)")

        description = self._config.get("description")
        if description and len(description) > MAX_DESCRIPTION_LENGTH:
            errors.append(
                f"Description too long ({len(description)} chars, max {MAX_DESCRIPTION_LENGTH} recommended)"
            )

        if errors:
            raise ValidationError(", ".join(errors))
        return True
