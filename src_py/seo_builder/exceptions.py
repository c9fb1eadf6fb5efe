"""
목적:
- SEO Builder 라이브러리의 예외 타입을 표준화한다.

설명:
- 사용자 데이터 문제(ValidationError)와 사용 방식 문제(DSLError)를 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.
- ValidationError는 한 번의 검증에서 발견된 모든 위반을 하나로 모은다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/seo_builder/config/store.py
- src_py/seo_builder/dsl/base.py
"""


class SeoBuilderError(Exception):
    """SEO Builder 공통 베이스 예외."""


class ConfigurationError(SeoBuilderError):
    """설정 API를 잘못 사용했을 때 발생한다."""


class ValidationError(SeoBuilderError):
    """설정/빌더 값이 검증 규칙을 위반할 때 발생한다."""


class DSLError(SeoBuilderError):
    """빌더/속성 맵을 잘못된 방식으로 호출했을 때 발생한다."""


class InvalidBuilderError(DSLError):
    """필드 호출 형태가 올바르지 않을 때 발생한다."""


class NoSuchKeyError(DSLError, AttributeError):
    """한 번도 기록되지 않은 키를 이름 접근으로 읽을 때 발생한다."""

    def __init__(self, key: str) -> None:
        super().__init__(f"undefined key: {key}")
        self.key = key
