"""
Core Interfaces

핵심 인터페이스들을 정의합니다.
"""

from .dca_engine import IDCAEngine, DCAEngineBase
from .data_provider import IPriceSeriesProvider, PriceSeriesProviderBase
from .series_cache import ISeriesCache, SeriesCacheKey

__all__ = [
    "IDCAEngine",
    "DCAEngineBase",
    "IPriceSeriesProvider",
    "PriceSeriesProviderBase",
    "ISeriesCache",
    "SeriesCacheKey",
]
