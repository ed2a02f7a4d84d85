"""
DCA Engine Interface

Defines core interfaces for DCA simulation execution.
"""

from abc import ABC, abstractmethod
from typing import Protocol, Optional, Callable
from tqdm import tqdm

from .data_provider import IPriceSeriesProvider
from ..value_objects.dca_config import DCAConfig
from ..value_objects.dca_result import DCAResult, PortfolioResult


class IDCAEngine(Protocol):
    """DCA engine interface"""

    def set_data_provider(self, data_provider: IPriceSeriesProvider) -> None:
        """Set data provider

        Args:
            data_provider: Price series provider
        """
        ...

    async def run(self, config: DCAConfig) -> PortfolioResult:
        """Run DCA simulation

        Args:
            config: DCA configuration

        Returns:
            Portfolio result
        """
        ...

    def add_result_callback(self, callback: Callable[[DCAResult], None]) -> None:
        """Add per-symbol result callback

        Args:
            callback: Called with each DCAResult as soon as it is produced
        """
        ...


class DCAEngineBase(ABC):
    """Base DCA engine class"""

    def __init__(self, name: str = "DCAEngine"):
        self.name = name
        self.data_provider: Optional[IPriceSeriesProvider] = None
        self.result_callbacks: list[Callable[[DCAResult], None]] = []
        self._is_running = False

    def set_data_provider(self, data_provider: IPriceSeriesProvider) -> None:
        """Set data provider"""
        self.data_provider = data_provider

    def add_result_callback(self, callback: Callable[[DCAResult], None]) -> None:
        """Add per-symbol result callback"""
        self.result_callbacks.append(callback)

    def _notify_result(self, result: DCAResult) -> None:
        """Notify per-symbol result"""
        for callback in self.result_callbacks:
            callback(result)

    def create_progress_bar(self, total: int, desc: str = "Processing", disable: bool = False) -> tqdm:
        """Create tqdm progress bar

        Args:
            total: Total number of items
            desc: Progress bar description
            disable: Whether to disable progress bar

        Returns:
            tqdm progress bar object
        """
        return tqdm(total=total, desc=desc, unit="symbol",
                    bar_format='{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]',
                    disable=disable)

    def _validate_components(self) -> None:
        """Validate components"""
        if self.data_provider is None:
            raise ValueError("Data provider not set")

    @abstractmethod
    async def _execute(self, config: DCAConfig, show_progress: bool) -> PortfolioResult:
        """Execute DCA simulation - to be implemented by subclasses"""
        pass

    async def run(self, config: DCAConfig, show_progress: bool = False) -> PortfolioResult:
        """Run DCA simulation"""
        if self._is_running:
            raise RuntimeError("DCA engine is already running")

        try:
            self._is_running = True

            self._validate_components()
            config.validate()

            return await self._execute(config, show_progress)
        finally:
            self._is_running = False

    @property
    def is_running(self) -> bool:
        """Whether running"""
        return self._is_running
