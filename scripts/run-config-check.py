"""
목적:
- JSON 설정 파일을 읽어 전역 SEO 설정에 적용하고 검증하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 설정 파일을 직접 읽지 않는다.
- 이 스크립트는 파일 로드 -> configure(검증 포함) -> 평탄화 결과/기능 상태 출력 흐름을 데모한다.
- 검증 실패 시 위반 목록을 출력하고 종료 코드 1을 반환한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/seo_builder/config/registry.py
- src_py/seo_builder/config/store.py
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from seo_builder import FEATURES, ValidationError, configure, feature_state


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SEO Builder 설정 검증 드라이버")
    parser.add_argument("--config", type=Path, required=True, help="JSON 설정 파일 경로")
    parser.add_argument(
        "--feature",
        action="append",
        default=None,
        help="상태를 출력할 기능 이름 (반복 지정 가능, 기본: 전체)",
    )
    parser.add_argument("--verbose", action="store_true", help="디버그 로그 출력")
    return parser.parse_args()


def load_config_file(path: Path) -> dict[str, object]:
    if not path.exists():
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"설정 파일 최상위는 객체여야 합니다: {path}")
    return payload


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    data = load_config_file(args.config)

    try:
        store = configure(lambda config: config.load_from_dict(data))
    except ValidationError as exc:
        print(f"[invalid] {exc}", file=sys.stderr)
        return 1

    features = args.feature or list(FEATURES)
    report = {
        "config": store.to_dict(),
        "features": {name: feature_state(name, store).value for name in features},
    }
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
