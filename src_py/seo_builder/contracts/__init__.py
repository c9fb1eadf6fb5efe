"""
목적:
- 빌더 결과 계약 모델의 공개 심볼을 제공한다.

설명:
- 메타 태그/Open Graph/Twitter Cards 결과 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/seo_builder/contracts/payload_models.py
"""

from .payload_models import (
    ArticlePayload,
    MetaTagsPayload,
    OpenGraphPayload,
    RobotsDirective,
    TwitterCardsPayload,
)

__all__ = [
    "MetaTagsPayload",
    "RobotsDirective",
    "OpenGraphPayload",
    "ArticlePayload",
    "TwitterCardsPayload",
]
