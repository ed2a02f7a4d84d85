"""
DCA 결과

심볼별 DCA 시뮬레이션 결과와 포트폴리오 집계 결과를 담는 값 객체입니다.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Dict, Any, Optional
import math
import polars as pl

from .dca_config import PurchaseFrequency


def calculate_pnl(total_return: float, total_invested: float) -> float:
    """손익률 (%) 계산

    투자 원금이 0이면 정의되지 않으므로 NaN을 반환합니다.
    """
    if total_invested == 0:
        return math.nan
    return ((total_return / total_invested) - 1) * 100


@dataclass(frozen=True)
class DCAResult:
    """심볼별 DCA 시뮬레이션 결과"""

    symbol: str
    units: float
    total_invested: float
    total_return: float  # 최종 평가금액 (수익이 아님)
    pnl: float
    start_date: date  # 실제 데이터 시작일로 보정된 시작일
    end_date: date
    frequency: PurchaseFrequency
    purchase_amount: float
    purchase_count: int
    last_price: float

    # 매수 내역 (save_purchase_history=True일 때 수집)
    purchases: Optional[pl.DataFrame] = field(default=None, compare=False)

    @property
    def profit(self) -> float:
        """평가 손익"""
        return self.total_return - self.total_invested

    @property
    def avg_cost(self) -> float:
        """평균 매입 단가"""
        if self.units == 0:
            return math.nan
        return self.total_invested / self.units

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "symbol": self.symbol,
            "units": self.units,
            "total_invested": self.total_invested,
            "total_return": self.total_return,
            "profit": self.profit,
            "pnl": self.pnl,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "frequency": self.frequency.value,
            "purchase_amount": self.purchase_amount,
            "purchase_count": self.purchase_count,
            "last_price": self.last_price,
        }

    def get_summary(self, formatter=None) -> Dict[str, str]:
        """요약 정보 반환 (출력 순서 유지)"""
        if formatter is None:
            from ...utils.report_printer import NumberFormatter
            formatter = NumberFormatter()

        return {
            "Symbol": self.symbol,
            "Period": f"{self.start_date.isoformat()} - {self.end_date.isoformat()}",
            "Total Invested": f"${formatter.money(self.total_invested)}",
            "Total Return": f"${formatter.money(self.total_return)}",
            "PNL": f"{formatter.percent(self.pnl)} %",
        }


@dataclass(frozen=True)
class PortfolioResult:
    """포트폴리오 DCA 결과"""

    positions: List[DCAResult]
    total_invested: float
    total_return: float
    pnl: float
    start_date: date
    end_date: date

    @property
    def symbols(self) -> List[str]:
        """포트폴리오 심볼 목록 (입력 순서)"""
        return [position.symbol for position in self.positions]

    @property
    def profit(self) -> float:
        """평가 손익"""
        return self.total_return - self.total_invested

    @classmethod
    def from_positions(cls, positions: List[DCAResult]) -> "PortfolioResult":
        """심볼별 결과를 합산하여 포트폴리오 결과 생성

        평가금액과 투자금은 단순 합계이며, 기간은 심볼별 시작일의 최솟값과
        종료일의 최댓값입니다. 손익률은 합계로부터 다시 계산합니다.
        """
        if not positions:
            raise ValueError("Portfolio requires at least one position")

        total_invested = 0.0
        total_return = 0.0
        start_date: Optional[date] = None
        end_date: Optional[date] = None

        for position in positions:
            total_invested += position.total_invested
            total_return += position.total_return

            if start_date is None or start_date > position.start_date:
                start_date = position.start_date
            if end_date is None or end_date < position.end_date:
                end_date = position.end_date

        return cls(
            positions=list(positions),
            total_invested=total_invested,
            total_return=total_return,
            pnl=calculate_pnl(total_return, total_invested),
            start_date=start_date,
            end_date=end_date,
        )

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "symbols": self.symbols,
            "total_invested": self.total_invested,
            "total_return": self.total_return,
            "profit": self.profit,
            "pnl": self.pnl,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "positions": [position.to_dict() for position in self.positions],
        }

    def get_summary(self, formatter=None) -> Dict[str, str]:
        """요약 정보 반환"""
        if formatter is None:
            from ...utils.report_printer import NumberFormatter
            formatter = NumberFormatter()

        return {
            "Portfolio": ",".join(self.symbols),
            "Period": f"{self.start_date.isoformat()} - {self.end_date.isoformat()}",
            "Total Invested": f"${formatter.money(self.total_invested)}",
            "Total Return": f"${formatter.money(self.total_return)}",
            "PNL": f"{formatter.percent(self.pnl)} %",
        }
