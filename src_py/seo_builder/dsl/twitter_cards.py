"""
목적:
- Twitter Cards용 빌더를 제공한다.

설명:
- site/creator 핸들은 "@" 접두사가 없으면 자동으로 붙인다.
- app_name/app_id/app_url은 플랫폼(iphone/ipad/googleplay)별 dict로 저장한다.
- 카드 타입, 필수 필드, summary_large_image의 이미지 필수 여부, 길이 권장치를 검증한다.

디자인 패턴:
- 빌더(Builder).

참조:
- src_py/seo_builder/dsl/base.py
- src_py/seo_builder/contracts/payload_models.py
"""

from __future__ import annotations

from typing import Any

from seo_builder.contracts.payload_models import TwitterCardsPayload
from seo_builder.dsl.base import BuilderBase
from seo_builder.exceptions import ValidationError

VALID_CARD_TYPES: tuple[str, ...] = ("summary", "summary_large_image", "app", "player")
APP_PLATFORMS: tuple[str, ...] = ("iphone", "ipad", "googleplay")

MAX_TITLE_LENGTH = 70
MAX_DESCRIPTION_LENGTH = 200


class TwitterCardsBuilder(BuilderBase):
    """Twitter Cards 빌더."""

    payload_model = TwitterCardsPayload

    def card(self, value: str | None = None):
        return self._field("card", value)

    def site(self, value: str | None = None):
        return self._field("site", _handle(value))

    def creator(self, value: str | None = None):
        return self._field("creator", _handle(value))

    def title(self, value: str | None = None):
        return self._field("title", value)

    def description(self, value: str | None = None):
        return self._field("description", value)

    def image(self, value: str | dict[str, Any] | None = None):
        return self._field("image", value)

    def image_alt(self, value: str | None = None):
        return self._field("image_alt", value)

    def player(self, value: str | None = None):
        return self._field("player", value)

    def player_width(self, value: int | None = None):
        return self._field("player_width", value)

    def player_height(self, value: int | None = None):
        return self._field("player_height", value)

    def player_stream(self, value: str | None = None):
        return self._field("player_stream", value)

    def app_name(self, value: str | None = None, platform: str | None = None):
        return self._app_field("app_name", value, platform)

    def app_id(self, value: str | None = None, platform: str | None = None):
        return self._app_field("app_id", value, platform)

    def app_url(self, value: str | None = None, platform: str | None = None):
        return self._app_field("app_url", value, platform)

    def _app_field(self, name: str, value: Any, platform: str | None):
        # platform이 없으면 모든 플랫폼에 같은 값을 지정한다.
        if value is None:
            return self.get(name)
        if platform is None:
            return self.set(name, {key: value for key in APP_PLATFORMS})
        current = dict(self.get(name) or {})
        current[platform] = value
        return self.set(name, current)

    def validate(self) -> bool:
        errors: list[str] = []
        config = self._config

        card_type = config.get("card")
        if card_type is not None and card_type not in VALID_CARD_TYPES:
            errors.append(f"Invalid card type: {card_type}. Valid types: {', '.join(VALID_CARD_TYPES)}")

        if config.get("title") is None:
            errors.append("twitter:title is required")
        if config.get("description") is None:
            errors.append("twitter:description is required")

        if card_type == "summary_large_image" and config.get("image") is None:
            errors.append("twitter:image is required for summary_large_image card")

        title = config.get("title")
        if title and len(title) > MAX_TITLE_LENGTH:
            errors.append(f"Title too long ({len(title)} chars, max {MAX_TITLE_LENGTH} recommended)")

        description = config.get("description")
        if description and len(description) > MAX_DESCRIPTION_LENGTH:
            errors.append(
                f"Description too long ({len(description)} chars, max {MAX_DESCRIPTION_LENGTH} recommended)"
            )

        if errors:
            raise ValidationError(", ".join(errors))
        return True


def _handle(value: str | None) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.startswith("@") else f"@{text}"
