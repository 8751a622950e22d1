"""
Command line entry point for the trading platform.
"""

import logging
from typing import Optional

from .config.settings import PlatformConfig, DEFAULT_CONFIG
from .market.market import Market
from .portfolio.portfolio import Portfolio
from .session.console import Console, StdioConsole
from .session.session import TradingSession


def create_session(config: PlatformConfig = DEFAULT_CONFIG,
                   console: Optional[Console] = None) -> TradingSession:
    """Wire a market, a fresh portfolio and a console into a session"""
    market = Market.from_config(config.market)
    portfolio = Portfolio(config.portfolio.initial_cash)
    return TradingSession(market, portfolio, console or StdioConsole(),
                          save_file=config.portfolio.save_file)


def main() -> int:
    """Run an interactive session on standard input/output"""
    config = DEFAULT_CONFIG
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        create_session(config).run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
