"""
가격 조회 테스트

최신순 시세 시리즈에서 매수일 가격을 선택하는 규칙을 검증합니다.
"""

import pytest
from datetime import date, timedelta

from quantdca.core.entities.price_data import PriceRecord, PriceSeries
from quantdca.core.exceptions import EmptyDataError
from quantdca.core.utils.price_lookup import price_on_or_before, record_on_or_before


def flat(d: date, price: float) -> PriceRecord:
    return PriceRecord(date=d, open=price, close=price, high=price, low=price)


class TestPriceLookup:
    """price_on_or_before 테스트"""

    @pytest.fixture
    def series(self) -> PriceSeries:
        return PriceSeries(
            symbol="TEST",
            total_records=3,
            records=(
                flat(date(2023, 1, 3), 9.0),
                flat(date(2023, 1, 2), 10.0),
                flat(date(2023, 1, 1), 11.0),
            ),
        )

    @pytest.fixture
    def sparse_series(self) -> PriceSeries:
        return PriceSeries(
            symbol="GAPS",
            total_records=3,
            records=(
                flat(date(2023, 1, 10), 30.0),
                flat(date(2023, 1, 5), 20.0),
                flat(date(2023, 1, 1), 10.0),
            ),
        )

    def test_exact_dates(self, series):
        assert price_on_or_before(series, date(2023, 1, 1)) == 11.0
        assert price_on_or_before(series, date(2023, 1, 2)) == 10.0
        assert price_on_or_before(series, date(2023, 1, 3)) == 9.0

    def test_gap_selects_next_available_row(self, sparse_series):
        # 조회일 이상인 레코드 중 가장 이른 레코드
        assert record_on_or_before(sparse_series, date(2023, 1, 3)).date == date(2023, 1, 5)
        assert record_on_or_before(sparse_series, date(2023, 1, 7)).date == date(2023, 1, 10)

    def test_query_after_all_rows_returns_newest(self, series):
        assert price_on_or_before(series, date(2023, 2, 1)) == 9.0

    def test_query_before_all_rows_returns_oldest(self, series):
        assert price_on_or_before(series, date(2022, 12, 25)) == 11.0

    def test_uses_average_price(self):
        series = PriceSeries(
            symbol="AVG",
            total_records=1,
            records=(PriceRecord(date(2023, 1, 2), open=1.0, close=2.0, high=4.0, low=1.0),),
        )

        assert price_on_or_before(series, date(2023, 1, 2)) == 2.0

    def test_selected_dates_are_monotonic(self, sparse_series):
        start = date(2023, 1, 1)
        selected = [
            record_on_or_before(sparse_series, start + timedelta(days=i)).date
            for i in range(10)
        ]

        assert selected == sorted(selected)

    def test_empty_series_raises(self):
        with pytest.raises(EmptyDataError, match="EMPTY"):
            price_on_or_before(PriceSeries(symbol="EMPTY", total_records=0), date(2023, 1, 1))
