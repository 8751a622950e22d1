"""
Trading Platform - a single-user stock trading simulator.

This package provides:
- A simulated market whose prices follow a bounded random walk
- Portfolio management with cash, holdings and a transaction log
- Flat-file persistence of portfolio state
- A menu-driven console session
"""

__version__ = "1.0.0"
__author__ = "Trading Platform Team"

from .core.types import TransactionType
from .core.models import Security, Transaction
from .config.settings import PlatformConfig, DEFAULT_CONFIG, create_custom_config
from .market.market import Market
from .portfolio.holding import Holding
from .portfolio.portfolio import Portfolio
from .session.console import Console, StdioConsole
from .session.session import TradingSession
from .cli import create_session

__all__ = [
    # Core types
    'TransactionType', 'Security', 'Transaction',
    # Configuration
    'PlatformConfig', 'DEFAULT_CONFIG', 'create_custom_config',
    # Main components
    'Market', 'Holding', 'Portfolio',
    # Session
    'Console', 'StdioConsole', 'TradingSession', 'create_session',
]
