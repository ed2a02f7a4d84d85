"""
NASDAQ 데이터 프로바이더 - JSON 파일 캐시 기반

NASDAQ 히스토리컬 시세 API를 활용한 일별 시세 제공자
"""

import asyncio
import gzip
import json
import logging
import zlib
from datetime import date
from typing import Dict, Any, Optional

import aiohttp

from ...config import (
    NASDAQ_BASE_URL,
    NASDAQ_ROW_LIMIT,
    REQUEST_HEADERS,
    REQUEST_TIMEOUT,
    MAX_RETRIES,
    RETRY_DELAY,
)
from ...core.exceptions import NetworkError, ParseError
from ...core.interfaces.data_provider import PriceSeriesProviderBase
from ...core.interfaces.series_cache import ISeriesCache
from .cache_manager import CacheManager

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 1_000


class NasdaqDataProvider(PriceSeriesProviderBase):
    """NASDAQ API 기반 시세 제공자"""

    PROVIDER_NAME = "nasdaq"

    def __init__(
        self,
        cache: Optional[ISeriesCache] = None,
        cache_dir: str = None,
        timeout: float = REQUEST_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY,
        row_limit: int = NASDAQ_ROW_LIMIT
    ):
        if cache is None:
            cache = CacheManager(cache_dir)
        super().__init__("NasdaqDataProvider", cache)
        self.base_url = NASDAQ_BASE_URL
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.row_limit = row_limit

        # HTTP 세션
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 반환

        응답은 accept-encoding 헤더에 따라 gzip으로 압축되어 오므로
        자동 압축 해제를 끄고 직접 해제합니다.
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=REQUEST_HEADERS,
                auto_decompress=False
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_url(self, symbol: str) -> str:
        """요청 URL 생성 (심볼은 대문자로 변환)"""
        return f"{self.base_url}/{symbol.upper()}/historical"

    def build_params(self, from_date: date, to_date: date) -> Dict[str, str]:
        """쿼리 파라미터 생성"""
        return {
            "assetclass": "stocks",
            "fromdate": from_date.isoformat(),
            "limit": str(self.row_limit),
            "todate": to_date.isoformat(),
            "random": "50",
        }

    async def _request_raw(self, url: str, params: Dict[str, str]) -> bytes:
        """원본 응답 바이트 조회 (재시도 포함)"""
        session = await self._get_session()

        for attempt in range(self.max_retries):
            try:
                async with session.get(url, params=params) as response:
                    response.raise_for_status()
                    return await response.read()
            except aiohttp.ClientResponseError as e:
                raise NetworkError(f"NASDAQ API returned HTTP {e.status} for {url}") from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt < self.max_retries - 1:
                    logger.warning(f"요청 실패 ({attempt + 1}/{self.max_retries}): {e!r}, 재시도...")
                    await asyncio.sleep(self.retry_delay * (attempt + 1))
                else:
                    raise NetworkError(f"Request to {url} failed: {e!r}") from e

        raise NetworkError(f"Request to {url} was not attempted (max_retries={self.max_retries})")

    @staticmethod
    def decode_body(raw: bytes) -> Dict[str, Any]:
        """gzip 응답 본문을 해제하고 JSON으로 파싱

        Raises:
            NetworkError: gzip 형식이 아니거나 잘린 응답
            ParseError: JSON 파싱 실패
        """
        try:
            data = gzip.decompress(raw)
        except (OSError, EOFError, zlib.error) as e:
            raise NetworkError(f"Could not decompress response body: {e}") from e

        try:
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Malformed JSON response: {e}") from e

    async def _fetch_payload(
        self,
        symbol: str,
        from_date: date,
        to_date: date
    ) -> Dict[str, Any]:
        """NASDAQ API에서 히스토리컬 시세 조회"""
        url = self.build_url(symbol)
        params = self.build_params(from_date, to_date)

        logger.info(f"📥 Fetching URL: {url} {params}")
        raw = await self._request_raw(url, params)
        payload = self.decode_body(raw)

        if logger.isEnabledFor(logging.DEBUG):
            text = json.dumps(payload)
            logger.debug(text[:PREVIEW_CHARS])
            logger.debug(f"Read {len(text)} chars")

        return payload
