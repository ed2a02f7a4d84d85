"""
DCA 시뮬레이터

단일 심볼에 대해 정해진 주기마다 고정 금액을 매수하는 적립식 투자를 시뮬레이션합니다.
"""

import logging
import math
from datetime import date
from typing import List, Dict, Any, Optional

import polars as pl

from ...core.exceptions import ConfigurationError, EmptyDataError
from ...core.interfaces.data_provider import IPriceSeriesProvider
from ...core.utils.dates import next_purchase_date
from ...core.utils.price_lookup import price_on_or_before
from ...core.value_objects.dca_config import PurchaseFrequency
from ...core.value_objects.dca_result import DCAResult, calculate_pnl

logger = logging.getLogger(__name__)

PURCHASE_HISTORY_SCHEMA = {
    "date": pl.Date,
    "price": pl.Float64,
    "units": pl.Float64,
    "cumulative_units": pl.Float64,
    "cumulative_invested": pl.Float64,
}


class DCASimulator:
    """심볼별 DCA 시뮬레이터"""

    def __init__(self, data_provider: IPriceSeriesProvider):
        self.data_provider = data_provider

    async def simulate(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
        frequency: PurchaseFrequency,
        amount: float,
        save_purchase_history: bool = False
    ) -> DCAResult:
        """DCA 시뮬레이션 실행

        시작일부터 종료일 직전까지 주기마다 amount만큼 매수합니다. 종료일과 같거나
        이후인 매수일은 실행하지 않습니다. 최종 평가금액은 마지막 매수 가격 기준입니다.

        Args:
            symbol: 심볼
            start_date: 요청 시작일 (데이터 시작일보다 앞서면 데이터 시작일로 보정)
            end_date: 종료일
            frequency: 매수 주기
            amount: 주기당 매수 금액
            save_purchase_history: 매수 내역 DataFrame 저장 여부

        Returns:
            DCA 결과

        Raises:
            ConfigurationError: 시작일이 종료일 이후이거나 금액이 잘못된 경우
            EmptyDataError: 해당 기간 시세 데이터가 없는 경우
        """
        if start_date > end_date:
            raise ConfigurationError(f"from date {start_date} is after to date {end_date}")
        if not math.isfinite(amount) or amount < 0:
            raise ConfigurationError(f"amount must be a finite, non-negative number, got {amount}")

        series = await self.data_provider.get_series(symbol, start_date, end_date)
        if series.is_empty:
            raise EmptyDataError(
                symbol,
                f"No data available for symbol {symbol!r} between {start_date} and {end_date}"
            )

        # 실제 데이터가 시작되는 날짜로 시작일 보정
        first_trade_date = series.first_trade_date
        if start_date < first_trade_date:
            start_date = first_trade_date

        units = 0.0
        total_invested = 0.0
        last_price = 0.0
        purchase_count = 0
        history: List[Dict[str, Any]] = []

        at = start_date
        while at < end_date:
            price = price_on_or_before(series, at)
            bought = amount / price

            units += bought
            total_invested += amount
            purchase_count += 1

            if save_purchase_history:
                history.append({
                    "date": at,
                    "price": price,
                    "units": bought,
                    "cumulative_units": units,
                    "cumulative_invested": total_invested,
                })

            at = next_purchase_date(at, frequency)
            last_price = price

        total_return = units * last_price

        purchases: Optional[pl.DataFrame] = None
        if save_purchase_history:
            purchases = pl.DataFrame(history, schema=PURCHASE_HISTORY_SCHEMA)

        logger.info(f"{symbol} 시뮬레이션 완료: {purchase_count}회 매수, "
                    f"{start_date} ~ {end_date}")

        return DCAResult(
            symbol=symbol,
            units=units,
            total_invested=total_invested,
            total_return=total_return,
            pnl=calculate_pnl(total_return, total_invested),
            start_date=start_date,
            end_date=end_date,
            frequency=frequency,
            purchase_amount=amount,
            purchase_count=purchase_count,
            last_price=last_price,
            purchases=purchases,
        )
