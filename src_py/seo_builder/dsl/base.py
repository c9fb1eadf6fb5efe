"""
목적:
- 선언형 빌더(DSL)의 공통 베이스 클래스를 제공한다.

설명:
- 평면 dict 버퍼에 키/값을 누적하고, `build()` 시점에만 `validate()`를 실행한 뒤
  버퍼의 깊은 복사본을 반환한다.
- 선언되지 않은 필드는 동적 필드 프록시로 해석된다.
  - `builder.title()` -> 조회
  - `builder.title("값")` / `builder.title = "값"` -> 저장(빌더 반환)
  - `builder.og(block=fn)` -> 같은 클래스의 새 빌더에서 fn을 실행하고 빌드 결과를 저장
- 블록은 빌더 하나를 인자로 받는 호출 가능 객체다.

디자인 패턴:
- 빌더(Builder) + 템플릿 메서드(validate 재정의).

참조:
- src_py/seo_builder/dsl/meta_tags.py
- src_py/seo_builder/dsl/open_graph.py
- src_py/seo_builder/dsl/twitter_cards.py
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from seo_builder.config.attribute_map import DynamicAttributeMap
from seo_builder.exceptions import DSLError, InvalidBuilderError, ValidationError

logger = logging.getLogger(__name__)

BuilderT = TypeVar("BuilderT", bound="BuilderBase")
Block = Callable[[Any], object]


class BuilderBase:
    """평면 키/값 버퍼 기반 빌더."""

    payload_model: ClassVar[type[BaseModel] | None] = None

    def __init__(self) -> None:
        object.__setattr__(self, "_config", {})

    def set(self: BuilderT, key: str, value: Any) -> BuilderT:
        """값을 저장하고 빌더를 반환한다."""
        self._config[_normalize_key(key)] = value
        return self

    def get(self, key: str) -> Any:
        """값을 반환한다. 저장되지 않은 키는 None을 반환한다."""
        return self._config.get(_normalize_key(key))

    def nested(self: BuilderT, name: str, block: Block) -> BuilderT:
        """같은 클래스의 새 빌더에서 block을 실행하고 빌드 결과를 name에 저장한다."""
        child = type(self)()
        child.evaluate(block)
        return self.set(name, child.build())

    def evaluate(self: BuilderT, block: Block | None = None) -> BuilderT:
        """block(self)를 실행한다. block이 없으면 아무것도 하지 않는다."""
        if block is not None:
            block(self)
        return self

    def validate(self) -> bool:
        """하위 클래스에서 재정의하는 검증 훅."""
        return True

    def build(self) -> dict[str, Any]:
        """검증 후 버퍼의 분리된 깊은 복사본을 반환한다."""
        self.validate()
        result = copy.deepcopy(self._config)
        logger.debug("%s built: keys=%s", type(self).__name__, list(result))
        return result

    def build_model(self) -> BaseModel:
        """`build()` 결과를 결과 계약 모델로 검증해 반환한다."""
        if self.payload_model is None:
            raise InvalidBuilderError(f"{type(self).__name__}에는 결과 모델이 없습니다")

        payload = self.build()
        try:
            return self.payload_model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(str(exc)) from exc

    def to_dict(self) -> dict[str, Any]:
        """검증 없이 현재 버퍼의 깊은 복사본을 반환한다."""
        return copy.deepcopy(self._config)

    def merge(self: BuilderT, other: Mapping[str, Any] | DynamicAttributeMap | BuilderBase) -> BuilderT:
        """dict, 설정 섹션 또는 다른 빌더의 현재 버퍼를 얕은 병합한다."""
        if isinstance(other, Mapping):
            incoming = other
        elif isinstance(other, (DynamicAttributeMap, BuilderBase)):
            incoming = other.to_dict()
        else:
            raise DSLError(f"Cannot merge {type(other).__name__}")

        for key, value in incoming.items():
            self._config[_normalize_key(key)] = value
        return self

    def _field(self, name: str, value: Any = None) -> Any:
        # 명명 필드 공통 처리: None이면 조회, 아니면 저장.
        if value is None:
            return self.get(name)
        return self.set(name, value)

    def __getattr__(self, name: str) -> _DynamicField:
        if name.startswith("_"):
            raise AttributeError(name)
        return _DynamicField(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self.set(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


class _DynamicField:
    """선언되지 않은 필드 호출을 get/set/nested로 분기한다."""

    __slots__ = ("_builder", "_name")

    def __init__(self, builder: BuilderBase, name: str) -> None:
        self._builder = builder
        self._name = name

    def __call__(self, *values: Any, block: Block | None = None) -> Any:
        if len(values) > 1:
            raise InvalidBuilderError(f"{self._name}: 값은 하나만 전달할 수 있습니다 (받은 개수: {len(values)})")
        if block is not None:
            if values:
                raise InvalidBuilderError(f"{self._name}: 값과 블록을 함께 전달할 수 없습니다")
            return self._builder.nested(self._name, block)
        if values:
            return self._builder.set(self._name, values[0])
        return self._builder.get(self._name)

    def __repr__(self) -> str:
        return f"<field {self._name!r} of {type(self._builder).__name__}>"


def flatten_values(values: Iterable[Any]) -> list[Any]:
    """중첩 list/tuple을 평탄화한다."""
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(flatten_values(value))
        else:
            flat.append(value)
    return flat


def _normalize_key(key: object) -> str:
    return key if isinstance(key, str) else str(key)
