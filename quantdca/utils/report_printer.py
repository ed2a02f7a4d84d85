"""
결과 출력

심볼별 DCA 결과와 포트폴리오 요약을 사람이 읽기 쉬운 형태로 출력합니다.
"""

import math
import sys
from dataclasses import dataclass
from typing import Dict, TextIO, Optional

from ..core.value_objects.dca_result import DCAResult, PortfolioResult


@dataclass(frozen=True)
class NumberFormatter:
    """숫자 포맷터 (천 단위 구분자, 소수점 기호)"""

    thousands_sep: str = ","
    decimal_sep: str = "."

    def format(self, value: float, decimals: int) -> str:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"

        text = f"{value:,.{decimals}f}"
        if self.thousands_sep == "," and self.decimal_sep == ".":
            return text
        return text.translate(str.maketrans({",": self.thousands_sep, ".": self.decimal_sep}))

    def money(self, value: float) -> str:
        """정수 금액 (예: 12,345)"""
        return self.format(value, 0)

    def percent(self, value: float) -> str:
        """소수점 둘째 자리 (예: 1,234.56)"""
        return self.format(value, 2)


class ReportPrinter:
    """DCA 결과 출력기"""

    LABEL_WIDTH = 15

    def __init__(self, formatter: Optional[NumberFormatter] = None, stream: Optional[TextIO] = None):
        self.formatter = formatter or NumberFormatter()
        self.stream = stream

    def _write_block(self, summary: Dict[str, str]) -> None:
        stream = self.stream or sys.stdout
        for key, value in summary.items():
            print(f"{key:{self.LABEL_WIDTH}}: {value}", file=stream)
        print(file=stream)
        stream.flush()

    def print_result(self, result: DCAResult) -> None:
        """심볼별 결과 출력"""
        self._write_block(result.get_summary(self.formatter))

    def print_portfolio(self, portfolio: PortfolioResult) -> None:
        """포트폴리오 요약 출력"""
        self._write_block(portfolio.get_summary(self.formatter))
