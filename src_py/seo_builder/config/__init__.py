"""
목적:
- 설정 계층의 공개 진입점을 제공한다.

설명:
- 라이브러리는 설정 파일을 직접 읽지 않고, dict 또는 mutator로 전달된 값을 병합한다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/seo_builder/config/store.py
- src_py/seo_builder/config/registry.py
"""

from .attribute_map import DynamicAttributeMap
from .defaults import SECTION_NAMES, SeoDefaults, default_config
from .registry import (
    FEATURES,
    FeatureState,
    configure,
    current_config,
    enabled,
    feature_state,
    reset_configuration,
)
from .store import ConfigStore

__all__ = [
    "DynamicAttributeMap",
    "ConfigStore",
    "SeoDefaults",
    "SECTION_NAMES",
    "default_config",
    "FEATURES",
    "FeatureState",
    "configure",
    "current_config",
    "enabled",
    "feature_state",
    "reset_configuration",
]
