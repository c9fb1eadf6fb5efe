"""
목적:
- 프로세스 전역 ConfigStore의 생명주기(생성/설정/초기화)를 관리한다.

설명:
- 전역 인스턴스는 처음 접근할 때 생성되며, `reset_configuration()` 이후
  다음 접근에서 기본값으로 다시 생성된다.
- 단일 작성자 규칙을 전제로 하며 내부 잠금은 제공하지 않는다.
  `configure()`/`reset_configuration()`은 동시 읽기 시작 전에 호출해야 한다.
- 테스트나 다중 설정이 필요한 호출자는 ConfigStore를 직접 만들어 `store=` 인자로 주입한다.
- 기능 플래그 조회는 알 수 없는 이름을 UNKNOWN으로 명시적으로 구분한다.

디자인 패턴:
- 지연 초기화 싱글턴(Lazy Singleton).

참조:
- src_py/seo_builder/config/store.py
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from seo_builder.config.store import ConfigStore
from seo_builder.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

FEATURES: tuple[str, ...] = (
    "sitemap",
    "robots",
    "open_graph",
    "twitter",
    "images",
    "structured_data",
)

_current: ConfigStore | None = None


class FeatureState(str, Enum):
    """기능 플래그 조회 결과."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    UNKNOWN = "unknown"


def current_config() -> ConfigStore:
    """전역 설정 객체를 반환한다. 없으면 기본값으로 생성한다."""
    global _current
    if _current is None:
        _current = ConfigStore()
        logger.debug("created default configuration store")
    return _current


def configure(mutator: Callable[[ConfigStore], object] | None = None) -> ConfigStore:
    """전역 설정에 mutator를 적용한다.

    mutator가 주어진 경우에만 적용 후 `validate()`를 호출하며,
    ValidationError는 그대로 전파된다.
    """
    store = current_config()
    if mutator is None:
        return store
    if not callable(mutator):
        raise ConfigurationError(f"mutator는 호출 가능해야 합니다: {type(mutator).__name__}")

    mutator(store)
    store.validate()
    logger.debug("configuration updated: %r", store)
    return store


def reset_configuration() -> None:
    """전역 설정을 폐기한다. 다음 접근 시 기본값으로 재생성된다."""
    global _current
    _current = None
    logger.debug("configuration store reset")


def feature_state(name: str, store: ConfigStore | None = None) -> FeatureState:
    """기능 플래그 상태를 ENABLED/DISABLED/UNKNOWN 중 하나로 반환한다."""
    if name not in FEATURES:
        return FeatureState.UNKNOWN
    target = store if store is not None else current_config()
    query = getattr(target, f"{name}_enabled")
    return FeatureState.ENABLED if query() else FeatureState.DISABLED


def enabled(name: str, store: ConfigStore | None = None) -> bool:
    """기능 활성화 여부를 반환한다. 알 수 없는 이름은 경고 후 False를 반환한다."""
    state = feature_state(name, store)
    if state is FeatureState.UNKNOWN:
        logger.warning("unknown feature name: %s (known: %s)", name, ", ".join(FEATURES))
    return state is FeatureState.ENABLED
