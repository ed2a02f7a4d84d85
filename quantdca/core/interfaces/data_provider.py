"""
시세 데이터 제공자 인터페이스

시세 시리즈 조회와 관련된 핵심 인터페이스와 캐시 우선 조회 기본 클래스를 정의합니다.
"""

from abc import ABC, abstractmethod
from typing import Protocol, List, Dict, Any, Optional
from datetime import date
import logging
import polars as pl

from ..entities.price_data import PriceSeries
from ..exceptions import ParseError
from ..utils.dates import NASDAQ_DATE_FORMAT
from .series_cache import ISeriesCache, SeriesCacheKey

logger = logging.getLogger(__name__)

RAW_COLUMNS = ["date", "open", "high", "low", "close", "volume"]
PRICE_COLUMNS = ["open", "high", "low", "close"]


class IPriceSeriesProvider(Protocol):
    """시세 시리즈 제공자 인터페이스"""

    async def get_series(
        self,
        symbol: str,
        from_date: date,
        to_date: date
    ) -> PriceSeries:
        """심볼의 일별 시세 시리즈 조회

        Args:
            symbol: 심볼
            from_date: 시작일
            to_date: 종료일

        Returns:
            최신순으로 정렬된 시세 시리즈
        """
        ...


def _get_field(data: Optional[Dict[str, Any]], name: str) -> Any:
    """대소문자 구분 없이 필드 조회

    이전 버전 도구가 저장한 캐시 파일은 "Data", "Rows", "Date"처럼
    대문자로 시작하는 키를 사용합니다.
    """
    if not isinstance(data, dict):
        return None
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if key.lower() == lowered:
            return value
    return None


class PriceSeriesProviderBase(ABC):
    """시세 시리즈 제공자 기본 클래스

    캐시에 응답이 있으면 그대로 사용하고, 없으면 원격 조회 후 행이 1개 이상인
    응답만 캐시에 저장합니다. 빈 응답은 일시적 오류일 수 있으므로 저장하지 않습니다.
    """

    def __init__(self, name: str, cache: Optional[ISeriesCache] = None):
        self.name = name
        self.cache = cache

    @abstractmethod
    async def _fetch_payload(
        self,
        symbol: str,
        from_date: date,
        to_date: date
    ) -> Dict[str, Any]:
        """원격 응답 조회 - 서브클래스에서 구현"""
        pass

    async def get_series(
        self,
        symbol: str,
        from_date: date,
        to_date: date
    ) -> PriceSeries:
        """시세 시리즈 조회 (캐시 우선)"""
        key = SeriesCacheKey(symbol, from_date.isoformat(), to_date.isoformat())

        payload = self.cache.load_cache(key) if self.cache is not None else None
        if payload is not None:
            logger.debug(f"캐시 히트: {key.file_name}")
            return self.parse_payload(symbol, payload)

        logger.debug(f"캐시 미스: {key.file_name}")
        payload = await self._fetch_payload(symbol, from_date, to_date)

        rows = self.extract_rows(payload)
        if rows and self.cache is not None:
            self.cache.save_cache(key, payload)
        elif not rows:
            logger.warning(f"{symbol}: {key.from_date} ~ {key.to_date} 기간 데이터 없음 (캐시 저장 안 함)")

        return self.parse_payload(symbol, payload)

    @staticmethod
    def extract_rows(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        """응답에서 거래 행 목록 추출 (data.tradesTable.rows)"""
        data = _get_field(payload, "data")
        trades_table = _get_field(data, "tradesTable")
        rows = _get_field(trades_table, "rows")
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise ParseError(f"Unexpected rows type in payload: {type(rows).__name__}")
        return rows

    def parse_payload(self, symbol: str, payload: Dict[str, Any]) -> PriceSeries:
        """응답 딕셔너리를 시세 시리즈로 변환

        금액 문자열은 "$"를 제거한 뒤 실수로, 날짜는 MM/DD/YYYY 형식으로 파싱합니다.
        행 순서(최신순)는 그대로 유지합니다.

        Raises:
            ParseError: 날짜나 금액 문자열이 잘못된 경우
        """
        rows = self.extract_rows(payload)
        data = _get_field(payload, "data")
        total_records = _get_field(data, "totalRecords")

        raw = pl.DataFrame(
            {
                column: [self._to_str(_get_field(row, column)) for row in rows]
                for column in RAW_COLUMNS
            },
            schema={column: pl.Utf8 for column in RAW_COLUMNS},
        )

        try:
            df = raw.select([
                pl.col("date").str.strip_chars().str.to_date(NASDAQ_DATE_FORMAT, strict=True),
                *[
                    pl.col(column)
                    .str.replace_all("$", "", literal=True)
                    .str.strip_chars()
                    .cast(pl.Float64, strict=True)
                    for column in PRICE_COLUMNS
                ],
                pl.col("volume")
                .str.replace_all(",", "", literal=True)
                .str.strip_chars()
                .cast(pl.Float64, strict=False),
            ])
        except pl.exceptions.PolarsError as e:
            raise ParseError(f"Malformed price data for symbol {symbol!r}: {e}") from e

        null_counts = df.null_count()
        missing = [c for c in ["date"] + PRICE_COLUMNS if null_counts[c].item() > 0]
        if missing:
            raise ParseError(f"Missing values in columns {missing} for symbol {symbol!r}")

        if total_records is not None:
            try:
                total_records = int(total_records)
            except (TypeError, ValueError):
                raise ParseError(f"Invalid totalRecords value: {total_records!r}") from None

        return PriceSeries.from_dataframe(symbol, df, total_records=total_records)

    @staticmethod
    def _to_str(value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    async def close(self) -> None:
        """리소스 정리 - 필요 시 서브클래스에서 구현"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
