"""
목적:
- SEO Builder Python 패키지의 공개 진입점을 제공한다.

설명:
- 핵심 구성은 설정 저장소(`ConfigStore`, `DynamicAttributeMap`)와 선언형 빌더(`BuilderBase` 계열)다.
- 전역 설정 생명주기 함수와 결과 계약 모델, 예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/seo_builder/config/registry.py
- src_py/seo_builder/dsl/base.py
"""

from .config.attribute_map import DynamicAttributeMap
from .config.registry import (
    FEATURES,
    FeatureState,
    configure,
    current_config,
    enabled,
    feature_state,
    reset_configuration,
)
from .config.store import ConfigStore
from .contracts.payload_models import (
    ArticlePayload,
    MetaTagsPayload,
    OpenGraphPayload,
    RobotsDirective,
    TwitterCardsPayload,
)
from .dsl import (
    ArticleBuilder,
    BuilderBase,
    MetaTagsBuilder,
    OpenGraphBuilder,
    TwitterCardsBuilder,
)
from .exceptions import (
    ConfigurationError,
    DSLError,
    InvalidBuilderError,
    NoSuchKeyError,
    SeoBuilderError,
    ValidationError,
)
from .version import __version__

__all__ = [
    "__version__",
    "ConfigStore",
    "DynamicAttributeMap",
    "FEATURES",
    "FeatureState",
    "configure",
    "current_config",
    "enabled",
    "feature_state",
    "reset_configuration",
    "BuilderBase",
    "MetaTagsBuilder",
    "OpenGraphBuilder",
    "ArticleBuilder",
    "TwitterCardsBuilder",
    "MetaTagsPayload",
    "RobotsDirective",
    "OpenGraphPayload",
    "ArticlePayload",
    "TwitterCardsPayload",
    "SeoBuilderError",
    "ConfigurationError",
    "ValidationError",
    "DSLError",
    "InvalidBuilderError",
    "NoSuchKeyError",
]
