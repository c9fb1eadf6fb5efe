"""
목적:
- DSL 빌더 계층의 공개 심볼을 제공한다.

설명:
- 공통 베이스와 메타 태그/Open Graph/Twitter Cards 빌더를 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/seo_builder/dsl/base.py
"""

from .base import BuilderBase, flatten_values
from .meta_tags import MetaTagsBuilder
from .open_graph import ArticleBuilder, OpenGraphBuilder
from .twitter_cards import TwitterCardsBuilder

__all__ = [
    "BuilderBase",
    "MetaTagsBuilder",
    "OpenGraphBuilder",
    "ArticleBuilder",
    "TwitterCardsBuilder",
    "flatten_values",
]
