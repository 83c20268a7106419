"""
펌웨어 분류 파이프라인
검색 결과 / 업데이트 이력에서 설치 가능, 설치됨, 다운로드 대기 항목 도출
"""

from typing import List, Dict

from models import UpdateRecord, HistoryEntry, FirmwareReport
from .keyword_filter import FirmwareKeywordFilter


class FirmwarePipeline:
    """펌웨어 분류 파이프라인"""

    def __init__(self, keywords: List[str] = None):
        self.keyword_filter = FirmwareKeywordFilter(keywords)

    def filter_available(self, updates: List[UpdateRecord]) -> List[UpdateRecord]:
        """설치 가능한 펌웨어 업데이트"""
        return self.keyword_filter.filter(updates)

    def filter_installed(self, history: List[HistoryEntry]) -> List[HistoryEntry]:
        """설치 이력 중 펌웨어 업데이트"""
        return self.keyword_filter.filter(history)

    def pending_downloads(self, available: List[UpdateRecord]) -> List[UpdateRecord]:
        """아직 다운로드되지 않은 항목"""
        return [update for update in available if not update.is_downloaded]

    def build_report(
        self,
        updates: List[UpdateRecord],
        history: List[HistoryEntry],
    ) -> FirmwareReport:
        """
        세 가지 분류 결과 생성

        Returns:
            FirmwareReport(available, installed, pending)
        """
        available = self.filter_available(updates)
        return FirmwareReport(
            available=available,
            installed=self.filter_installed(history),
            pending=self.pending_downloads(available),
        )

    def get_stats(
        self,
        updates: List[UpdateRecord],
        history: List[HistoryEntry],
        report: FirmwareReport,
    ) -> Dict:
        """처리 결과 통계"""
        return {
            "searched": len(updates),
            "history_total": len(history),
            "available": len(report.available),
            "installed": len(report.installed),
            "pending": len(report.pending),
        }
