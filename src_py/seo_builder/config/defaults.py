"""
목적:
- ConfigStore가 복사해 사용하는 기본 설정 스키마를 정의한다.

설명:
- 섹션별 기본값을 pydantic 모델로 선언하고, `default_config()`가 매 호출마다
  새 dict를 만들어 인스턴스 간 상태 공유를 막는다.
- 기본값 선언 용도이며 사용자 입력 검증은 ConfigStore.validate()가 담당한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/seo_builder/config/store.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

SECTION_NAMES: tuple[str, ...] = (
    "meta_tags",
    "open_graph",
    "twitter",
    "structured_data",
    "sitemap",
    "robots",
    "images",
    "i18n",
)


class MetaTagsDefaults(BaseModel):
    """메타 태그 기본값 모델."""

    default_title: str | None = Field(default=None)
    title_separator: str = Field(default=" | ")
    append_site_name: bool = Field(default=True)
    default_description: str | None = Field(default=None)
    default_keywords: list[str] = Field(default_factory=list)
    default_author: str | None = Field(default=None)


class ImageDefaults(BaseModel):
    """Open Graph 기본 이미지 모델."""

    url: str | None = Field(default=None)
    width: int = Field(default=1200, ge=1)
    height: int = Field(default=630, ge=1)


class OpenGraphDefaults(BaseModel):
    """Open Graph 기본값 모델."""

    enabled: bool = Field(default=True)
    site_name: str | None = Field(default=None)
    default_type: str = Field(default="website")
    default_locale: str = Field(default="en_US")
    default_image: ImageDefaults = Field(default_factory=ImageDefaults)


class TwitterDefaults(BaseModel):
    """Twitter Cards 기본값 모델."""

    enabled: bool = Field(default=True)
    site: str | None = Field(default=None)
    creator: str | None = Field(default=None)
    card_type: str = Field(default="summary_large_image")


class StructuredDataDefaults(BaseModel):
    """구조화 데이터(JSON-LD) 기본값 모델."""

    enabled: bool = Field(default=True)
    organization: dict[str, Any] = Field(default_factory=dict)
    website: dict[str, Any] = Field(default_factory=dict)


class SitemapEntryDefaults(BaseModel):
    """사이트맵 URL 항목 기본값 모델."""

    changefreq: str = Field(default="weekly")
    priority: float = Field(default=0.5, ge=0.0, le=1.0)


class SitemapDefaults(BaseModel):
    """사이트맵 기본값 모델."""

    enabled: bool = Field(default=False)
    output_path: str = Field(default="public/sitemap.xml", min_length=1)
    host: str | None = Field(default=None)
    compress: bool = Field(default=False)
    ping_search_engines: bool = Field(default=False)
    defaults: SitemapEntryDefaults = Field(default_factory=SitemapEntryDefaults)


class UserAgentRule(BaseModel):
    """robots.txt user-agent 규칙 모델."""

    allow: list[str] = Field(default_factory=lambda: ["/"])
    disallow: list[str] = Field(default_factory=list)
    crawl_delay: float | None = Field(default=None)


class RobotsDefaults(BaseModel):
    """robots.txt 기본값 모델."""

    enabled: bool = Field(default=False)
    output_path: str = Field(default="public/robots.txt", min_length=1)
    user_agents: dict[str, UserAgentRule] = Field(default_factory=lambda: {"*": UserAgentRule()})


class WebpDefaults(BaseModel):
    """WebP 변환 기본값 모델."""

    enabled: bool = Field(default=True)
    quality: int = Field(default=80, ge=1, le=100)


def _default_image_sizes() -> dict[str, dict[str, Any]]:
    # 크기별로 보유 키가 다르므로 None 채움 없이 dict로 둔다.
    return {
        "thumbnail": {"width": 150, "height": 150},
        "small": {"width": 300},
        "medium": {"width": 600},
        "large": {"width": 1200},
        "og_image": {"width": 1200, "height": 630, "crop": True},
    }


class ImagesDefaults(BaseModel):
    """이미지 최적화 기본값 모델."""

    enabled: bool = Field(default=False)
    webp: WebpDefaults = Field(default_factory=WebpDefaults)
    sizes: dict[str, dict[str, Any]] = Field(default_factory=_default_image_sizes)


class I18nDefaults(BaseModel):
    """다국어 리소스 기본값 모델."""

    load_path: str = Field(default="config/locales/seo/**/*.yml", min_length=1)
    auto_reload: bool = Field(default=False)


class SeoDefaults(BaseModel):
    """전체 기본 설정 스키마 모델."""

    site_name: str | None = Field(default=None)
    default_locale: str = Field(default="en", min_length=1)
    available_locales: list[str] = Field(default_factory=lambda: ["en"])
    meta_tags: MetaTagsDefaults = Field(default_factory=MetaTagsDefaults)
    open_graph: OpenGraphDefaults = Field(default_factory=OpenGraphDefaults)
    twitter: TwitterDefaults = Field(default_factory=TwitterDefaults)
    structured_data: StructuredDataDefaults = Field(default_factory=StructuredDataDefaults)
    sitemap: SitemapDefaults = Field(default_factory=SitemapDefaults)
    robots: RobotsDefaults = Field(default_factory=RobotsDefaults)
    images: ImagesDefaults = Field(default_factory=ImagesDefaults)
    i18n: I18nDefaults = Field(default_factory=I18nDefaults)


def default_config() -> dict[str, Any]:
    """기본 설정을 새 dict로 생성한다."""
    return SeoDefaults().model_dump()
