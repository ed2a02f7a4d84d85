"""
가격 조회

최신순으로 정렬된 시세 시리즈에서 매수일에 사용할 대표 가격을 찾습니다.
"""

from datetime import date

from ..entities.price_data import PriceRecord, PriceSeries
from ..exceptions import EmptyDataError


def record_on_or_before(series: PriceSeries, target: date) -> PriceRecord:
    """매수일에 사용할 시세 레코드 조회

    최신 레코드부터 과거 방향으로 순회하며, 조회일이 레코드 날짜보다 뒤가 되는
    순간 멈추고 직전 후보를 반환합니다. 결과적으로:

    - 조회일 이상인 레코드 중 가장 이른 레코드를 선택합니다.
    - 조회일이 모든 레코드보다 뒤면 첫 번째(최신) 레코드를 반환합니다.
    - 조회일이 모든 레코드보다 앞서면 마지막(가장 오래된) 레코드를 반환합니다.

    Raises:
        EmptyDataError: 시리즈가 비어 있는 경우
    """
    if series.is_empty:
        raise EmptyDataError(series.symbol)

    current = series.records[0]
    for record in series.records:
        if target > record.date:
            break
        current = record

    return current


def price_on_or_before(series: PriceSeries, target: date) -> float:
    """매수일의 대표 가격 (선택된 레코드의 OHLC 평균)"""
    return record_on_or_before(series, target).avg_price
