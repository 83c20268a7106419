"""
공통 데이터 모델 정의
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class UpdateRecord:
    """업데이트 검색 결과 항목 (설치되지 않은 업데이트)"""
    title: str                   # 제목
    kb_article_ids: List[str] = field(default_factory=list)  # KB 번호 목록
    classification: str = ""     # 분류 (Drivers, Firmware 등)
    is_downloaded: bool = False  # 다운로드 완료 여부
    is_installed: bool = False   # 설치 여부 (검색 조건상 항상 False)

    @property
    def kb_display(self) -> str:
        return ", ".join(f"KB{kb}" for kb in self.kb_article_ids)


@dataclass
class HistoryEntry:
    """업데이트 이력 항목"""
    date: datetime               # 실행 시간
    title: str                   # 제목
    result: str                  # Succeeded | Failed | ...


@dataclass
class FirmwareReport:
    """펌웨어 업데이트 분류 결과 (실행 시마다 새로 계산)"""
    available: List[UpdateRecord] = field(default_factory=list)
    installed: List[HistoryEntry] = field(default_factory=list)
    pending: List[UpdateRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.available or self.installed or self.pending)
