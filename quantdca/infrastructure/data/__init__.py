"""
Data Infrastructure

시세 데이터 제공자와 캐시 구현체들을 포함합니다.
"""

from .cache_manager import CacheManager, InMemoryCache
from .nasdaq_provider import NasdaqDataProvider

__all__ = [
    "CacheManager",
    "InMemoryCache",
    "NasdaqDataProvider",
]
