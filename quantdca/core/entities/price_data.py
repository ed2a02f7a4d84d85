"""
가격 데이터 엔티티

일별 시세 레코드와 심볼별 시세 시리즈를 정의합니다.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, Optional, Tuple
import polars as pl

from ..exceptions import EmptyDataError


PRICE_SERIES_SCHEMA = {
    "date": pl.Date,
    "open": pl.Float64,
    "high": pl.Float64,
    "low": pl.Float64,
    "close": pl.Float64,
    "volume": pl.Float64,
}


@dataclass(frozen=True)
class PriceRecord:
    """단일 거래일의 시세"""

    date: date
    open: float
    close: float
    high: float
    low: float
    volume: Optional[float] = None

    @property
    def ohlc(self) -> Tuple[float, float, float, float]:
        """OHLC 튜플 반환"""
        return (self.open, self.high, self.low, self.close)

    @property
    def avg_price(self) -> float:
        """평균 가격 (OHLC/4)"""
        return (self.open + self.close + self.high + self.low) / 4

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class PriceSeries:
    """심볼별 시세 시리즈

    레코드는 데이터 제공자가 반환한 순서 그대로 최신순(newest-first)으로 보관합니다.
    """

    symbol: str
    total_records: int
    records: Tuple[PriceRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return len(self.records) == 0

    @property
    def first_trade_date(self) -> date:
        """실제 가격 데이터가 존재하는 가장 이른 날짜"""
        if self.is_empty:
            raise EmptyDataError(self.symbol)
        return self.records[-1].date

    @property
    def last_trade_date(self) -> date:
        """가장 최근 거래일"""
        if self.is_empty:
            raise EmptyDataError(self.symbol)
        return self.records[0].date

    def to_dataframe(self) -> pl.DataFrame:
        """Polars DataFrame으로 변환 (최신순 유지)"""
        if self.is_empty:
            return pl.DataFrame(schema=PRICE_SERIES_SCHEMA)
        return pl.DataFrame(
            [record.to_dict() for record in self.records],
            schema=PRICE_SERIES_SCHEMA,
        )

    @classmethod
    def from_dataframe(cls, symbol: str, df: pl.DataFrame,
                       total_records: Optional[int] = None) -> "PriceSeries":
        """Polars DataFrame에서 시리즈 생성 (행 순서 유지)"""
        records = tuple(
            PriceRecord(
                date=row["date"],
                open=row["open"],
                close=row["close"],
                high=row["high"],
                low=row["low"],
                volume=row.get("volume"),
            )
            for row in df.iter_rows(named=True)
        )
        return cls(
            symbol=symbol,
            total_records=len(records) if total_records is None else total_records,
            records=records,
        )
