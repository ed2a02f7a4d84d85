"""
포트폴리오 DCA 엔진

전체 투자 금액을 심볼 수로 균등 분할하여 심볼별 DCA 시뮬레이션을 순차 실행하고
결과를 포트폴리오 단위로 합산합니다.
"""

import logging
from typing import List, Optional

from ...core.interfaces.dca_engine import DCAEngineBase
from ...core.interfaces.data_provider import IPriceSeriesProvider
from ...core.value_objects.dca_config import DCAConfig
from ...core.value_objects.dca_result import DCAResult, PortfolioResult
from .dca_simulator import DCASimulator

logger = logging.getLogger(__name__)


class PortfolioEngine(DCAEngineBase):
    """포트폴리오 DCA 엔진"""

    def __init__(self, data_provider: Optional[IPriceSeriesProvider] = None):
        super().__init__(name="PortfolioEngine")
        if data_provider is not None:
            self.set_data_provider(data_provider)

    async def _execute(self, config: DCAConfig, show_progress: bool) -> PortfolioResult:
        """심볼별 시뮬레이션 실행 후 합산

        심볼은 입력 순서대로 하나씩 실행되며, 각 결과는 생성 즉시 결과 콜백으로
        전달됩니다. 어느 심볼에서든 오류가 나면 전체 실행이 중단됩니다.
        """
        simulator = DCASimulator(self.data_provider)
        amount = config.amount_per_symbol  # 균등 분할
        positions: List[DCAResult] = []

        logger.info(f"포트폴리오 시뮬레이션 시작: {len(config.symbols)}개 심볼, "
                    f"심볼당 {amount:,.2f} / {config.frequency.value}")

        pbar = self.create_progress_bar(len(config.symbols), "DCA", disable=not show_progress)
        try:
            for symbol in config.symbols:
                result = await simulator.simulate(
                    symbol=symbol,
                    start_date=config.start_date,
                    end_date=config.end_date,
                    frequency=config.frequency,
                    amount=amount,
                    save_purchase_history=config.save_purchase_history,
                )
                positions.append(result)
                self._notify_result(result)
                pbar.update(1)
        finally:
            pbar.close()

        return PortfolioResult.from_positions(positions)
