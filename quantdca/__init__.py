"""
QuantDCA - 적립식(DCA) 투자 시뮬레이터

NASDAQ 일별 시세를 기반으로 심볼별/포트폴리오 DCA 수익률을 계산합니다.
"""

__version__ = "0.1.0"

# 엔티티
from .core.entities.price_data import PriceRecord, PriceSeries

# 예외
from .core.exceptions import (
    QuantDCAError,
    ConfigurationError,
    ParseError,
    NetworkError,
    EmptyDataError,
)

# 설정 및 결과
from .core.value_objects.dca_config import DCAConfig, PurchaseFrequency
from .core.value_objects.dca_result import DCAResult, PortfolioResult

# 유틸리티
from .core.utils.price_lookup import price_on_or_before, record_on_or_before
from .core.utils.dates import next_purchase_date, parse_iso_date

# 엔진
from .core.interfaces.dca_engine import IDCAEngine, DCAEngineBase
from .infrastructure.engine.dca_simulator import DCASimulator
from .infrastructure.engine.portfolio_engine import PortfolioEngine

# 데이터 제공자
from .infrastructure.data.nasdaq_provider import NasdaqDataProvider
from .infrastructure.data.cache_manager import CacheManager, InMemoryCache

# 출력
from .utils.report_printer import NumberFormatter, ReportPrinter

__all__ = [
    # 엔티티
    "PriceRecord",
    "PriceSeries",

    # 예외
    "QuantDCAError",
    "ConfigurationError",
    "ParseError",
    "NetworkError",
    "EmptyDataError",

    # 설정 및 결과
    "DCAConfig",
    "PurchaseFrequency",
    "DCAResult",
    "PortfolioResult",

    # 유틸리티
    "price_on_or_before",
    "record_on_or_before",
    "next_purchase_date",
    "parse_iso_date",

    # 엔진
    "IDCAEngine",
    "DCAEngineBase",
    "DCASimulator",
    "PortfolioEngine",

    # 인프라스트럭처
    "NasdaqDataProvider",
    "CacheManager",
    "InMemoryCache",

    # 출력
    "NumberFormatter",
    "ReportPrinter",
]
