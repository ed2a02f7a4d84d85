"""
시세 캐시 인터페이스

데이터 제공자가 원본 응답을 저장/재사용하기 위한 캐시 인터페이스를 정의합니다.
"""

from dataclasses import dataclass
from typing import Protocol, Optional, Dict, Any


@dataclass(frozen=True)
class SeriesCacheKey:
    """캐시 키 - 요청에 사용된 값 그대로 사용 (정규화 없음)"""
    symbol: str
    from_date: str
    to_date: str

    @property
    def file_name(self) -> str:
        return f"{self.symbol}-{self.from_date}-{self.to_date}.json"


class ISeriesCache(Protocol):
    """시세 캐시 인터페이스"""

    def has_cache(self, key: SeriesCacheKey) -> bool:
        """캐시 존재 여부 확인"""
        ...

    def load_cache(self, key: SeriesCacheKey) -> Optional[Dict[str, Any]]:
        """캐시된 응답 로드

        Returns:
            캐시된 응답 딕셔너리, 없으면 None
        """
        ...

    def save_cache(self, key: SeriesCacheKey, payload: Dict[str, Any]) -> None:
        """응답 저장"""
        ...

    def clear_cache(self, key: Optional[SeriesCacheKey] = None) -> int:
        """캐시 삭제

        Returns:
            삭제된 항목 수
        """
        ...
