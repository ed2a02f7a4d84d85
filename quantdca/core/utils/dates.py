"""
날짜 유틸리티

ISO 날짜(YYYY-MM-DD)를 파싱하고 매수 주기에 따라 다음 매수일을 계산합니다.
"""

from datetime import date, datetime, timedelta
import re

from ..exceptions import ParseError
from ..value_objects.dca_config import PurchaseFrequency

ISO_DATE_FORMAT = "%Y-%m-%d"
NASDAQ_DATE_FORMAT = "%m/%d/%Y"

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """YYYY-MM-DD 문자열을 date로 변환

    Raises:
        ParseError: 형식이 맞지 않거나 존재하지 않는 날짜인 경우
    """
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value):
        raise ParseError(f"Invalid ISO date: {value!r}. Expected format: YYYY-MM-DD")
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError as e:
        raise ParseError(f"Invalid ISO date: {value!r}") from e


def add_months(d: date, months: int = 1) -> date:
    """같은 일(day)을 유지한 채 월을 더합니다.

    대상 월에 해당 일이 없으면 초과분만큼 다음 달로 넘어갑니다
    (예: 2023-01-31 + 1개월 = 2023-03-03).
    """
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=d.day - 1)


def next_purchase_date(current: date, frequency: PurchaseFrequency) -> date:
    """다음 매수일 계산

    Args:
        current: 현재 매수일
        frequency: 매수 주기

    Returns:
        MONTHLY는 다음 달 같은 일, WEEKLY는 7일 후, 그 외는 1일 후
    """
    if frequency == PurchaseFrequency.MONTHLY:
        return add_months(current, 1)
    elif frequency == PurchaseFrequency.WEEKLY:
        return current + timedelta(days=7)
    else:
        return current + timedelta(days=1)
