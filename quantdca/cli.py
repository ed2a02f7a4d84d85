"""
QuantDCA 명령줄 인터페이스

사용 예:
    python -m quantdca --symbols AAPL,MSFT --from 2015-01-01 --amount 1000
"""

import argparse
import asyncio
import logging
import sys
from datetime import date
from typing import List, Optional

from .config import CACHE_DIR, DEFAULT_AMOUNT, DEFAULT_FROM_DATE, DEFAULT_SYMBOLS
from .core.exceptions import QuantDCAError
from .core.utils.dates import parse_iso_date
from .core.value_objects.dca_config import DCAConfig, PurchaseFrequency
from .core.value_objects.dca_result import PortfolioResult
from .infrastructure.data.nasdaq_provider import NasdaqDataProvider
from .infrastructure.engine.portfolio_engine import PortfolioEngine
from .utils.report_printer import ReportPrinter

log = logging.getLogger("quantdca")


def _split_symbols(value: str) -> List[str]:
    return [s.strip() for s in value.split(",") if s.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantdca",
        description="Dollar-cost averaging simulator over NASDAQ historical prices",
    )
    parser.add_argument(
        "-s", "--symbols", action="append", type=_split_symbols,
        help=f"Symbols / Tickers to DCA into, comma-separated or repeated "
             f"(default: {','.join(DEFAULT_SYMBOLS)})"
    )
    parser.add_argument(
        "-f", "--from", dest="from_date", default=DEFAULT_FROM_DATE,
        help="Start DCA:ing from this date (YYYY-MM-DD)"
    )
    parser.add_argument(
        "-t", "--to", dest="to_date", default=date.today().isoformat(),
        help="Stop DCA:ing at this date (YYYY-MM-DD, default: today)"
    )
    parser.add_argument(
        "-a", "--amount", type=float, default=DEFAULT_AMOUNT,
        help="Amount to invest every period, split equally across symbols"
    )
    parser.add_argument(
        "--frequency", choices=[f.value for f in PurchaseFrequency],
        default=PurchaseFrequency.MONTHLY.value,
        help="Purchase frequency (default: monthly)"
    )
    parser.add_argument(
        "--cache-dir", default=CACHE_DIR,
        help="Directory for cached API responses (default: $QUANTDCA_CACHE_DIR or .)"
    )
    parser.add_argument("--progress", action="store_true", help="Show progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> DCAConfig:
    symbols = [s for group in args.symbols for s in group] if args.symbols else list(DEFAULT_SYMBOLS)
    return DCAConfig(
        symbols=symbols,
        start_date=parse_iso_date(args.from_date),
        end_date=parse_iso_date(args.to_date),
        amount=args.amount,
        frequency=PurchaseFrequency.from_string(args.frequency),
        cache_dir=args.cache_dir,
    )


async def run_portfolio(
    config: DCAConfig,
    printer: ReportPrinter,
    show_progress: bool = False
) -> PortfolioResult:
    """포트폴리오 시뮬레이션 실행 및 결과 출력"""
    # 시작일 > 종료일 등은 네트워크 요청 전에 중단
    config.validate()

    async with NasdaqDataProvider(cache_dir=config.cache_dir) as provider:
        engine = PortfolioEngine(provider)
        engine.add_result_callback(printer.print_result)
        portfolio = await engine.run(config, show_progress=show_progress)

    printer.print_portfolio(portfolio)
    return portfolio


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
        asyncio.run(run_portfolio(config, ReportPrinter(), show_progress=args.progress))
    except QuantDCAError as e:
        log.error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
