"""
DCA 설정

DCA 시뮬레이션 실행을 위한 설정 값 객체입니다.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional
import math

from ..exceptions import ConfigurationError


class PurchaseFrequency(Enum):
    """매수 주기"""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def from_string(cls, value: str) -> "PurchaseFrequency":
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ConfigurationError(
                f"Invalid frequency: {value!r}. Expected one of: {valid}"
            ) from None


@dataclass
class DCAConfig:
    """DCA 포트폴리오 시뮬레이션 설정

    amount는 포트폴리오 전체의 주기당 투자 금액이며 심볼 수로 균등 분할됩니다.
    """
    symbols: List[str]
    start_date: date
    end_date: date
    amount: float
    frequency: PurchaseFrequency = PurchaseFrequency.MONTHLY
    cache_dir: Optional[str] = None
    save_purchase_history: bool = False

    def validate(self) -> None:
        """설정 유효성 검증

        Raises:
            ConfigurationError: 심볼이 없거나, 시작일이 종료일 이후이거나,
                금액이 유한한 0 이상의 값이 아닌 경우
        """
        if not self.symbols:
            raise ConfigurationError("At least one symbol is required")
        if self.start_date > self.end_date:
            raise ConfigurationError(
                f"from date {self.start_date} is after to date {self.end_date}"
            )
        if not math.isfinite(self.amount) or self.amount < 0:
            raise ConfigurationError(
                f"amount must be a finite, non-negative number, got {self.amount}"
            )

    @property
    def amount_per_symbol(self) -> float:
        """심볼당 주기별 투자 금액 (균등 분할)"""
        return self.amount / len(self.symbols)

    def to_dict(self):
        """직렬화 가능한 딕셔너리 반환"""
        return {
            "symbols": list(self.symbols),
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "amount": self.amount,
            "frequency": self.frequency.value,
            "cache_dir": self.cache_dir,
            "save_purchase_history": self.save_purchase_history,
        }

    @classmethod
    def from_dict(cls, data: dict):
        """딕셔너리로부터 DCAConfig 객체를 생성합니다."""
        from ..utils.dates import parse_iso_date

        start_date = data["start_date"]
        end_date = data["end_date"]
        frequency = data.get("frequency", PurchaseFrequency.MONTHLY)
        return cls(
            symbols=list(data["symbols"]),
            start_date=parse_iso_date(start_date) if isinstance(start_date, str) else start_date,
            end_date=parse_iso_date(end_date) if isinstance(end_date, str) else end_date,
            amount=float(data["amount"]),
            frequency=(
                PurchaseFrequency.from_string(frequency)
                if isinstance(frequency, str) else frequency
            ),
            cache_dir=data.get("cache_dir"),
            save_purchase_history=data.get("save_purchase_history", False),
        )
