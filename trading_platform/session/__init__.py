"""Interactive console session for the trading platform."""

from .console import Console, StdioConsole
from .session import TradingSession

__all__ = ['Console', 'StdioConsole', 'TradingSession']
