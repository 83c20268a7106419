"""
Windows Update Agent (COM) 클라이언트
Microsoft.Update.Session을 통해 업데이트 검색 및 이력 조회
"""

from datetime import datetime
from typing import Callable, List

from models import UpdateRecord, HistoryEntry
from .base import UpdateServiceClient, UpdateServiceError


# IUpdateHistoryEntry.ResultCode (OperationResultCode)
RESULT_CODES = {
    0: "NotStarted",
    1: "InProgress",
    2: "Succeeded",
    3: "SucceededWithErrors",
    4: "Failed",
    5: "Aborted",
}


def _iter_collection(collection):
    """COM 컬렉션 순회 (Count / Item(i))"""
    if collection is None:
        return
    for i in range(collection.Count):
        yield collection.Item(i)


def _default_dispatch(prog_id: str):
    try:
        import win32com.client
    except ImportError as e:
        raise UpdateServiceError("pywin32(win32com)를 불러올 수 없음, Windows 환경이 필요합니다", e) from e
    return win32com.client.Dispatch(prog_id)


class WindowsUpdateClient(UpdateServiceClient):
    """Windows Update Agent COM API 클라이언트"""

    PROG_ID = "Microsoft.Update.Session"

    def __init__(self, dispatch: Callable = None):
        self._dispatch = dispatch or _default_dispatch
        self._session = None
        self._searcher = None

    @property
    def service_name(self) -> str:
        return "windows_update"

    def create_session(self) -> None:
        """업데이트 세션 및 검색기 생성"""
        try:
            self._session = self._dispatch(self.PROG_ID)
            self._searcher = self._session.CreateUpdateSearcher()
        except UpdateServiceError:
            raise
        except Exception as e:
            raise UpdateServiceError("Windows Update 세션 생성 실패", e) from e

    def search(self, criteria: str) -> List[UpdateRecord]:
        """업데이트 검색 후 UpdateRecord 리스트로 변환"""
        searcher = self._require_searcher()
        try:
            result = searcher.Search(criteria)
            return [self._parse_update(update) for update in _iter_collection(result.Updates)]
        except Exception as e:
            raise UpdateServiceError(f"업데이트 검색 실패 ({criteria})", e) from e

    def get_history_count(self) -> int:
        searcher = self._require_searcher()
        try:
            return int(searcher.GetTotalHistoryCount())
        except Exception as e:
            raise UpdateServiceError("업데이트 이력 개수 조회 실패", e) from e

    def query_history(self, offset: int, count: int) -> List[HistoryEntry]:
        """업데이트 이력을 HistoryEntry 리스트로 변환"""
        searcher = self._require_searcher()
        try:
            history = searcher.QueryHistory(offset, count)
            return [self._parse_history_entry(entry) for entry in _iter_collection(history)]
        except Exception as e:
            raise UpdateServiceError("업데이트 이력 조회 실패", e) from e

    def _require_searcher(self):
        if self._searcher is None:
            raise UpdateServiceError("Windows Update 세션이 생성되지 않음")
        return self._searcher

    def _parse_update(self, update) -> UpdateRecord:
        """IUpdate를 UpdateRecord로 변환"""
        return UpdateRecord(
            title=update.Title or "",
            kb_article_ids=[str(kb) for kb in _iter_collection(update.KBArticleIDs)],
            classification=self._get_classification(update),
            is_downloaded=bool(update.IsDownloaded),
            is_installed=bool(update.IsInstalled),
        )

    def _get_classification(self, update) -> str:
        """UpdateClassification 카테고리 이름, 없으면 전체 카테고리 이름"""
        categories = list(_iter_collection(update.Categories))
        for category in categories:
            if category.Type == "UpdateClassification":
                return category.Name
        return ", ".join(category.Name for category in categories)

    def _parse_history_entry(self, entry) -> HistoryEntry:
        """IUpdateHistoryEntry를 HistoryEntry로 변환"""
        return HistoryEntry(
            date=self._parse_date(entry.Date),
            title=entry.Title or "",
            result=RESULT_CODES.get(entry.ResultCode, "Unknown"),
        )

    def _parse_date(self, value) -> datetime:
        # pywintypes.datetime은 datetime 하위 클래스, COM 날짜는 UTC
        if isinstance(value, datetime):
            parsed = datetime(
                value.year, value.month, value.day,
                value.hour, value.minute, value.second,
                tzinfo=value.tzinfo,
            )
        else:
            parsed = datetime.fromisoformat(str(value))
        # 표에는 로컬 시간으로 표시
        if parsed.tzinfo is not None:
            return parsed.astimezone()
        return parsed
