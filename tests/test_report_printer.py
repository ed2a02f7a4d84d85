"""
결과 출력 테스트
"""

import io
import pytest
from datetime import date

from quantdca.core.value_objects.dca_config import PurchaseFrequency
from quantdca.core.value_objects.dca_result import DCAResult, PortfolioResult, calculate_pnl
from quantdca.utils.report_printer import NumberFormatter, ReportPrinter


def make_result(symbol: str, invested: float, value: float) -> DCAResult:
    return DCAResult(
        symbol=symbol,
        units=value / 10.0,
        total_invested=invested,
        total_return=value,
        pnl=calculate_pnl(value, invested),
        start_date=date(2008, 1, 2),
        end_date=date(2024, 6, 1),
        frequency=PurchaseFrequency.MONTHLY,
        purchase_amount=100.0,
        purchase_count=int(invested // 100),
        last_price=10.0,
    )


class TestNumberFormatter:
    """NumberFormatter 테스트"""

    @pytest.mark.parametrize("value, decimals, expected", [
        (1234567.89, 0, "1,234,568"),
        (-4.5454, 2, "-4.55"),
        (0.0, 2, "0.00"),
        (float("nan"), 2, "NaN"),
        (float("inf"), 0, "+Inf"),
        (float("-inf"), 0, "-Inf"),
    ])
    def test_default_separators(self, value, decimals, expected):
        assert NumberFormatter().format(value, decimals) == expected

    def test_custom_separators(self):
        formatter = NumberFormatter(thousands_sep=".", decimal_sep=",")

        assert formatter.percent(1234567.891) == "1.234.567,89"
        assert formatter.money(1234567.891) == "1.234.568"


class TestReportPrinter:
    """ReportPrinter 테스트"""

    def test_print_result_block(self):
        stream = io.StringIO()
        printer = ReportPrinter(stream=stream)

        printer.print_result(make_result("AAPL", invested=97000.0, value=1234567.0))

        assert stream.getvalue() == (
            "Symbol         : AAPL\n"
            "Period         : 2008-01-02 - 2024-06-01\n"
            "Total Invested : $97,000\n"
            "Total Return   : $1,234,567\n"
            "PNL            : 1,172.75 %\n"
            "\n"
        )

    def test_print_portfolio_block(self):
        stream = io.StringIO()
        printer = ReportPrinter(stream=stream)
        portfolio = PortfolioResult.from_positions([
            make_result("AAA", invested=200.0, value=190.909),
            make_result("BBB", invested=200.0, value=200.0),
        ])

        printer.print_portfolio(portfolio)

        lines = stream.getvalue().splitlines()
        assert lines[0] == "Portfolio      : AAA,BBB"
        assert lines[2] == "Total Invested : $400"
        assert lines[3] == "Total Return   : $391"
        assert lines[4] == "PNL            : -2.27 %"
        assert lines[5] == ""

    def test_nan_pnl_printed(self):
        stream = io.StringIO()

        ReportPrinter(stream=stream).print_result(make_result("ZERO", invested=0.0, value=0.0))

        assert "PNL            : NaN %" in stream.getvalue()
