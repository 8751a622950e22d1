"""Portfolio management components."""

from .holding import Holding
from .portfolio import Portfolio
from .statistics import transactions_frame, trading_statistics

__all__ = ['Holding', 'Portfolio', 'transactions_frame', 'trading_statistics']
