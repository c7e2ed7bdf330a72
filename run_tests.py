#!/usr/bin/env python3
"""
warnmap 테스트 실행 스크립트

이 스크립트는 다양한 테스트 시나리오를 실행합니다.
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# 테스트 유형별 경로
TEST_DIRS = {
    "core": ("tests/unit/core/", "Core 모듈 테스트 실행"),
    "controller": ("tests/unit/controller/", "Controller 모듈 테스트 실행"),
    "adapters": ("tests/unit/adapters/", "Adapters 모듈 테스트 실행"),
    "observability": ("tests/unit/observability/", "Observability 모듈 테스트 실행"),
}


def run_command(cmd, description):
    """명령어 실행"""
    print(f"\n{'='*60}")
    print(f"실행 중: {description}")
    print(f"명령어: {cmd}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)

    if result.returncode == 0:
        print("성공")
        if result.stdout:
            print(result.stdout)
    else:
        print("실패")
        if result.stderr:
            print(result.stderr)
        return False

    return True


def main():
    """메인 함수"""
    parser = argparse.ArgumentParser(description="warnmap 테스트 실행")
    parser.add_argument(
        "--type",
        choices=["unit", "all", *TEST_DIRS],
        default="all",
        help="실행할 테스트 유형"
    )
    parser.add_argument(
        "--coverage",
        action="store_true",
        help="코드 커버리지 포함"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="상세 출력"
    )

    args = parser.parse_args()

    # 프로젝트 루트 디렉토리로 이동
    project_root = Path(__file__).parent
    os.chdir(project_root)

    # 기본 pytest 옵션
    pytest_opts = []

    if args.verbose:
        pytest_opts.append("-v")

    if args.coverage:
        pytest_opts.extend(["--cov=warnmap", "--cov-report=html", "--cov-report=term"])

    opts = ' '.join(pytest_opts)
    if args.type == "all":
        success = run_command(f"python -m pytest {opts} tests/", "전체 테스트 실행")
    elif args.type == "unit":
        success = run_command(f"python -m pytest {opts} tests/unit/", "단위 테스트 실행")
    else:
        path, description = TEST_DIRS[args.type]
        success = run_command(f"python -m pytest {opts} {path}", description)

    # 결과 출력
    print(f"\n{'='*60}")
    if success:
        print("모든 테스트가 성공적으로 완료되었습니다!")
    else:
        print("일부 테스트가 실패했습니다.")
        sys.exit(1)
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
