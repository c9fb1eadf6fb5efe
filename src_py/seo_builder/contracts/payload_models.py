"""
목적:
- 빌더 `build()` 결과의 형태를 pydantic 모델로 정의한다.

설명:
- 렌더러 계층이 의존하는 키 구조를 명시한다. 키 이름/형태 변경은 렌더러 호환성을 깨뜨린다.
- 빌더는 스키마 없이 임의 키를 허용하므로 모델도 추가 키를 허용한다.
- 필수 여부/길이 규칙은 각 빌더의 `validate()`가 담당하고, 이 모델은 타입 형태만 확인한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/seo_builder/dsl/meta_tags.py
- src_py/seo_builder/dsl/open_graph.py
- src_py/seo_builder/dsl/twitter_cards.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RobotsDirective(BaseModel):
    """robots 메타 지시어 모델."""

    model_config = ConfigDict(extra="allow")

    index: bool = Field(default=True)
    follow: bool = Field(default=True)


class MetaTagsPayload(BaseModel):
    """메타 태그 빌더 결과 모델."""

    model_config = ConfigDict(extra="allow")

    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    keywords: list[str] | None = Field(default=None)
    author: str | None = Field(default=None)
    canonical: str | None = Field(default=None)
    robots: RobotsDirective | None = Field(default=None)
    viewport: str | None = Field(default=None)
    charset: str | None = Field(default=None)


class ArticlePayload(BaseModel):
    """og:article 속성 모델."""

    model_config = ConfigDict(extra="allow")

    author: str | None = Field(default=None)
    published_time: str | None = Field(default=None)
    modified_time: str | None = Field(default=None)
    expiration_time: str | None = Field(default=None)
    section: str | None = Field(default=None)
    tag: list[str] | None = Field(default=None)


class OpenGraphPayload(BaseModel):
    """Open Graph 빌더 결과 모델."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    description: str | None = Field(default=None)
    type: str = Field(min_length=1)
    url: str = Field(min_length=1)
    image: str | dict[str, Any]
    site_name: str | None = Field(default=None)
    locale: str | None = Field(default=None)
    locale_alternate: list[str] | None = Field(default=None)
    article: ArticlePayload | None = Field(default=None)
    video: str | dict[str, Any] | None = Field(default=None)
    audio: str | dict[str, Any] | None = Field(default=None)


class TwitterCardsPayload(BaseModel):
    """Twitter Cards 빌더 결과 모델."""

    model_config = ConfigDict(extra="allow")

    card: str | None = Field(default=None)
    site: str | None = Field(default=None)
    creator: str | None = Field(default=None)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: str | dict[str, Any] | None = Field(default=None)
    image_alt: str | None = Field(default=None)
    player: str | None = Field(default=None)
    player_width: int | None = Field(default=None)
    player_height: int | None = Field(default=None)
    player_stream: str | None = Field(default=None)
    app_name: dict[str, Any] | None = Field(default=None)
    app_id: dict[str, Any] | None = Field(default=None)
    app_url: dict[str, Any] | None = Field(default=None)
