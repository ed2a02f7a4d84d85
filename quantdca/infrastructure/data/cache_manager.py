"""
JSON 파일 기반 캐시 관리자

원격 API 응답을 심볼/기간별 JSON 파일로 저장하여 재실행 시 네트워크 요청을 생략합니다.
파일 경로: {cache_dir}/{symbol}-{from_date}-{to_date}.json
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional, Dict, Any, Iterator, Tuple

from ...config import CACHE_DIR
from ...core.exceptions import ParseError
from ...core.interfaces.series_cache import SeriesCacheKey

logger = logging.getLogger(__name__)

# {symbol}-YYYY-MM-DD-YYYY-MM-DD
_CACHE_STEM_PATTERN = re.compile(r"^(?P<symbol>.+)-\d{4}-\d{2}-\d{2}-\d{4}-\d{2}-\d{2}$")


class CacheManager:
    """JSON 파일 기반 캐시 관리자"""

    def __init__(self, cache_dir: str = None):
        if cache_dir is None:
            cache_dir = CACHE_DIR

        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_file_path(self, key: SeriesCacheKey) -> Path:
        """캐시 파일 경로 생성"""
        return self.cache_dir / key.file_name

    def has_cache(self, key: SeriesCacheKey) -> bool:
        """캐시 존재 여부 확인"""
        return self._get_cache_file_path(key).exists()

    def load_cache(self, key: SeriesCacheKey) -> Optional[Dict[str, Any]]:
        """캐시 파일에서 응답 로드

        Raises:
            ParseError: 캐시 파일이 올바른 JSON이 아닌 경우
        """
        cache_file = self._get_cache_file_path(key)
        if not cache_file.exists():
            return None

        try:
            with open(cache_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Malformed cache file {cache_file}: {e}") from e

    def save_cache(self, key: SeriesCacheKey, payload: Dict[str, Any]) -> None:
        """응답을 들여쓰기된 JSON 파일로 저장"""
        cache_file = self._get_cache_file_path(key)
        with open(cache_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info(f"캐시 저장 완료: {cache_file}")

    def clear_cache(self, key: Optional[SeriesCacheKey] = None) -> int:
        """캐시 삭제 (key가 없으면 디렉토리의 모든 캐시 파일 삭제)"""
        if key is not None:
            cache_file = self._get_cache_file_path(key)
            if cache_file.exists():
                cache_file.unlink()
                return 1
            return 0

        deleted = 0
        for cache_file, _ in self._iter_cache_files():
            cache_file.unlink()
            deleted += 1
        logger.info(f"캐시 삭제 완료: {deleted}개 파일")
        return deleted

    def _iter_cache_files(self) -> Iterator[Tuple[Path, str]]:
        """캐시 키 형식의 파일만 (경로, 심볼) 쌍으로 반환"""
        for path in self.cache_dir.glob("*.json"):
            match = _CACHE_STEM_PATTERN.match(path.stem)
            if match and path.is_file():
                yield path, match.group("symbol")

    def get_cache_stats(self) -> Dict[str, Any]:
        """캐시 통계"""
        cache_files = list(self._iter_cache_files())
        total_size = sum(path.stat().st_size for path, _ in cache_files)

        symbols: Dict[str, int] = {}
        for _, symbol in cache_files:
            symbols[symbol] = symbols.get(symbol, 0) + 1

        return {
            "cache_dir": str(self.cache_dir),
            "total_files": len(cache_files),
            "total_size_mb": total_size / (1024 * 1024),
            "symbols": symbols,
        }


class InMemoryCache:
    """메모리 캐시 - 테스트 및 단일 실행 내 재사용용"""

    def __init__(self):
        self._store: Dict[SeriesCacheKey, str] = {}

    def has_cache(self, key: SeriesCacheKey) -> bool:
        return key in self._store

    def load_cache(self, key: SeriesCacheKey) -> Optional[Dict[str, Any]]:
        # 저장본은 JSON 문자열로 보관 (호출자 수정과 분리)
        serialized = self._store.get(key)
        if serialized is None:
            return None
        return json.loads(serialized)

    def save_cache(self, key: SeriesCacheKey, payload: Dict[str, Any]) -> None:
        self._store[key] = json.dumps(payload)

    def clear_cache(self, key: Optional[SeriesCacheKey] = None) -> int:
        if key is not None:
            return 1 if self._store.pop(key, None) is not None else 0
        deleted = len(self._store)
        self._store.clear()
        return deleted

    def __len__(self) -> int:
        return len(self._store)
