"""
Core Entities

시세 데이터 엔티티들을 정의합니다.
"""

from .price_data import PriceRecord, PriceSeries

__all__ = [
    "PriceRecord",
    "PriceSeries",
]
