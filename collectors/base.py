"""
업데이트 서비스 클라이언트 베이스 클래스
"""

from abc import ABC, abstractmethod
from typing import List

from models import UpdateRecord, HistoryEntry


class UpdateServiceError(Exception):
    """업데이트 서비스 호출 실패 (세션 생성, 검색, 이력 조회)"""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class UpdateServiceClient(ABC):
    """업데이트 서비스 클라이언트 추상 베이스 클래스"""

    @property
    @abstractmethod
    def service_name(self) -> str:
        """서비스 이름 (로그/오류 메시지용)"""
        pass

    @abstractmethod
    def create_session(self) -> None:
        """업데이트 서비스 세션 생성"""
        pass

    @abstractmethod
    def search(self, criteria: str) -> List[UpdateRecord]:
        """검색 조건에 맞는 업데이트 목록 반환 (서비스 반환 순서 유지)"""
        pass

    @abstractmethod
    def get_history_count(self) -> int:
        """전체 업데이트 이력 개수"""
        pass

    @abstractmethod
    def query_history(self, offset: int, count: int) -> List[HistoryEntry]:
        """offset부터 count개의 업데이트 이력 반환"""
        pass
