#!/usr/bin/env python3
"""
Firmware Update Report
Windows Update에서 펌웨어 관련 업데이트를 조회하여 설치 가능 / 설치됨 / 다운로드 대기 항목을 표로 출력
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

# 로깅 설정 (기본은 경고 이상만, --verbose 시 진행 상황 출력)
logging.basicConfig(
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    level=logging.WARNING
)
logger = logging.getLogger(__name__)

# 모듈 경로 설정
sys.path.insert(0, str(Path(__file__).parent))

from models import FirmwareReport
from collectors import UpdateServiceClient, UpdateServiceError, WindowsUpdateClient
from filters import FirmwarePipeline, FIRMWARE_KEYWORDS
from reporting import ConsoleReporter


DEFAULT_SEARCH_CRITERIA = "IsInstalled=0 and Type='Driver'"

DEFAULT_CONFIG = {
    "firmware_keywords": list(FIRMWARE_KEYWORDS),
    "search": {"criteria": DEFAULT_SEARCH_CRITERIA},
}


def load_config(config_path: str = None) -> dict:
    """설정 파일 로드 (경로가 없으면 내장 기본값 사용)"""
    config = {
        "firmware_keywords": list(DEFAULT_CONFIG["firmware_keywords"]),
        "search": dict(DEFAULT_CONFIG["search"]),
    }
    if config_path is None:
        return config

    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"설정 파일 형식 오류: 최상위는 매핑이어야 합니다 ({config_path})")

    if loaded.get("firmware_keywords") is not None:
        config["firmware_keywords"] = _validate_keywords(loaded["firmware_keywords"])

    # "search:"만 있고 값이 없으면 None으로 로드됨
    search = loaded.get("search") or {}
    if not isinstance(search, dict):
        raise ValueError("설정 오류: search는 매핑이어야 합니다")
    criteria = search.get("criteria")
    if criteria is not None:
        if not isinstance(criteria, str) or not criteria.strip():
            raise ValueError("설정 오류: search.criteria는 비어 있지 않은 문자열이어야 합니다")
        config["search"]["criteria"] = criteria

    return config


def _validate_keywords(value) -> list:
    """firmware_keywords 검증, 단일 문자열은 리스트로 감쌈"""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError("설정 오류: firmware_keywords는 문자열 리스트여야 합니다")
    for keyword in value:
        if not isinstance(keyword, str):
            raise ValueError(f"설정 오류: firmware_keywords 항목은 문자열이어야 합니다 ({keyword!r})")
    return list(value)


def run_report(
    config: dict,
    client: UpdateServiceClient = None,
    reporter: ConsoleReporter = None,
    verbose: bool = False,
) -> Optional[FirmwareReport]:
    """메인 조회 실행, 실패 시 오류 한 줄 출력 후 None 반환"""
    client = client or WindowsUpdateClient()
    reporter = reporter or ConsoleReporter()

    criteria = (config.get("search") or {}).get("criteria", DEFAULT_SEARCH_CRITERIA)
    pipeline = FirmwarePipeline(config.get("firmware_keywords"))

    try:
        # 1. 세션 생성
        logger.info("=" * 50)
        logger.info(f"[1/4] {client.service_name} 세션 생성 중...")
        client.create_session()

        # 2. 미설치 업데이트 검색
        logger.info(f"[2/4] 업데이트 검색 중... ({criteria})")
        updates = client.search(criteria)
        logger.info(f"      검색 결과: {len(updates)}개")

        # 3. 업데이트 이력 조회
        logger.info("[3/4] 업데이트 이력 조회 중...")
        history_count = client.get_history_count()
        history = client.query_history(0, history_count) if history_count > 0 else []
        logger.info(f"      이력: {len(history)}개")

    except UpdateServiceError as e:
        logger.error(f"펌웨어 업데이트 조회 실패: {e}")
        return None

    report = pipeline.build_report(updates, history)
    stats = pipeline.get_stats(updates, history, report)

    if verbose:
        logger.info(f"      판별 키워드: {', '.join(pipeline.keyword_filter.get_all_keywords())}")
        for update in report.available:
            state = "다운로드됨" if update.is_downloaded else "다운로드 대기"
            logger.info(f"        - [{state}] {update.title[:60]}")
        for entry in report.installed:
            logger.info(f"        - [{entry.result}] {entry.title[:60]}")

    # 4. 결과 출력
    logger.info("[4/4] 결과 출력 중...")
    reporter.print_report(report)

    if report.is_empty:
        logger.info("펌웨어 관련 업데이트 없음")
    logger.info("=" * 50)
    logger.info(f"[완료] 검색: {stats['searched']} → 설치 가능: {stats['available']} → 다운로드 대기: {stats['pending']} / 이력: {stats['history_total']} → 설치됨: {stats['installed']}")

    return report


def main(argv=None):
    parser = argparse.ArgumentParser(description="Firmware Update Report")
    parser.add_argument("--config", "-c", help="설정 파일 경로")
    parser.add_argument("--verbose", "-v", action="store_true", help="진행 상황 상세 출력")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    config = load_config(args.config)
    run_report(config, verbose=args.verbose)


if __name__ == "__main__":
    main()
