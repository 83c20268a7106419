"""
펌웨어 키워드 필터
"""

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")

# 기본 펌웨어 판별 키워드
FIRMWARE_KEYWORDS = [
    "firmware",
    "BIOS",
    "UEFI",
    "System Firmware",
    "Embedded Controller",
    "Intel Management Engine",
]


class FirmwareKeywordFilter:
    """제목 키워드 기반 펌웨어 판별 필터

    업데이트 검색 결과와 이력 모두 같은 판별 로직을 사용한다.
    """

    def __init__(self, keywords: List[str] = None):
        """
        Args:
            keywords: 판별 키워드 목록 (기본값: FIRMWARE_KEYWORDS)
                대소문자 구분 없이 부분 문자열로 매칭
        """
        self.keywords = list(keywords) if keywords is not None else list(FIRMWARE_KEYWORDS)
        # (원본 키워드, 소문자 키워드), 빈 키워드는 모든 제목에 매칭되므로 제외
        self._lowered = [(k, k.lower()) for k in self.keywords if k and k.strip()]

    def match(self, title: Optional[str]) -> Optional[str]:
        """처음 매칭된 키워드 반환, 없으면 None"""
        text = (title or "").lower()
        for keyword, lowered in self._lowered:
            # 정규식이 아닌 리터럴 부분 문자열 비교
            if lowered in text:
                return keyword
        return None

    def is_firmware(self, title: Optional[str]) -> bool:
        return self.match(title) is not None

    def filter(self, items: Iterable[T]) -> List[T]:
        """title 속성이 매칭되는 항목만 순서대로 반환"""
        return [item for item in items if self.is_firmware(item.title)]

    def get_all_keywords(self) -> List[str]:
        return [keyword for keyword, _ in self._lowered]
