"""
목적:
- 스키마 없는 중첩 키/값 저장소(DynamicAttributeMap)를 제공한다.

설명:
- 중첩 매핑은 모든 깊이에서 DynamicAttributeMap으로 감싸 동일한 접근 방식을 보장한다.
- 이미 감싼 인스턴스는 다시 감싸지 않고 동일 객체를 그대로 저장한다.
- 인덱스 접근(`amap[key]`, `get`)은 예외를 던지지 않고 None을 반환한다.
- 이름 접근(`amap.key`)은 한 번이라도 기록된 키에만 허용되며,
  기록된 적 없는 키는 NoSuchKeyError를 발생시킨다.
- 명시적으로 저장한 None은 "기록되지 않음"과 구분된다(`key in amap`).

디자인 패턴:
- 복합 객체(Composite) + 동적 속성(Dynamic Attribute).

참조:
- src_py/seo_builder/config/store.py
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from seo_builder.exceptions import DSLError, NoSuchKeyError


class DynamicAttributeMap:
    """재귀적으로 감싸지는 설정 섹션 저장소."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | DynamicAttributeMap | None = None) -> None:
        object.__setattr__(self, "_data", {})
        if data is None:
            return
        if isinstance(data, DynamicAttributeMap):
            data = data._data
        elif not isinstance(data, Mapping):
            raise DSLError(f"Cannot wrap {type(data).__name__}")
        for key, value in data.items():
            self._data[_normalize_key(key)] = _wrap(value)

    def get(self, key: str, default: Any = None) -> Any:
        """키 값을 반환한다. 기록되지 않은 키는 default를 반환한다."""
        return self._data.get(_normalize_key(key), default)

    def set(self, key: str, value: Any) -> DynamicAttributeMap:
        """키 값을 저장한다. 매핑 값은 DynamicAttributeMap으로 감싼다."""
        self._data[_normalize_key(key)] = _wrap(value, preserve_identity=True)
        return self

    def merge(self, other: Mapping[str, Any] | DynamicAttributeMap) -> DynamicAttributeMap:
        """다른 매핑을 깊은 병합한다.

        양쪽 값이 모두 매핑이면 재귀 병합하고, 그 외에는 들어온 값의 구조 복사본으로 덮어쓴다.
        `other`에 없는 키는 그대로 유지된다.
        """
        if isinstance(other, DynamicAttributeMap):
            items = other._data.items()
        elif isinstance(other, Mapping):
            items = other.items()
        else:
            raise DSLError(f"Cannot merge {type(other).__name__}")

        for raw_key, incoming in items:
            key = _normalize_key(raw_key)
            current = self._data.get(key)
            if isinstance(current, DynamicAttributeMap) and _is_map(incoming):
                current.merge(incoming)
            else:
                self._data[key] = _wrap(incoming)
        return self

    def to_dict(self) -> dict[str, Any]:
        """일반 dict/list/스칼라로 재귀 변환한 독립 복사본을 반환한다."""
        return {key: _unwrap(value) for key, value in self._data.items()}

    def keys(self):
        return self._data.keys()

    def items(self):
        return self._data.items()

    def __getitem__(self, key: str) -> Any:
        return self._data.get(_normalize_key(key))

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return _normalize_key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        # 일반 속성 조회가 실패했을 때만 호출된다.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise NoSuchKeyError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self.set(name, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicAttributeMap):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicAttributeMap({self.to_dict()!r})"


def _normalize_key(key: object) -> str:
    return key if isinstance(key, str) else str(key)


def _is_map(value: Any) -> bool:
    return isinstance(value, (DynamicAttributeMap, Mapping))


def _wrap(value: Any, preserve_identity: bool = False) -> Any:
    if isinstance(value, DynamicAttributeMap):
        return value if preserve_identity else DynamicAttributeMap(value)
    if isinstance(value, Mapping):
        return DynamicAttributeMap(value)
    if isinstance(value, (list, tuple)):
        return [_wrap(item) for item in value]
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, DynamicAttributeMap):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value
