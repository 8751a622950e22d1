"""
Portfolio management for cash, holdings and the transaction log.
"""

import logging
import math
import os
from datetime import datetime
from typing import Dict, List, Optional, TYPE_CHECKING

from .holding import Holding
from . import storage
from ..core.models import Transaction
from ..core.types import TransactionType
from ..core.exceptions import (
    TradingPlatformError, InsufficientCashError,
    InsufficientSharesError, InvalidOrderError, PersistenceError
)

if TYPE_CHECKING:
    from ..market.market import Market


class Portfolio:
    """Manages cash balance, stock holdings and trade history"""

    def __init__(self, initial_cash: float):
        if not math.isfinite(initial_cash) or initial_cash < 0:
            raise ValueError("Initial cash must be a non-negative number")

        self.cash = initial_cash
        self.initial_cash = initial_cash
        self.holdings: Dict[str, Holding] = {}
        self.transactions: List[Transaction] = []
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def normalize_symbol(symbol: str) -> str:
        return symbol.strip().upper()

    def get_holding(self, symbol: str) -> Optional[Holding]:
        """Holding for a symbol, or None if no shares are held"""
        return self.holdings.get(self.normalize_symbol(symbol))

    def shares_held(self, symbol: str) -> int:
        holding = self.get_holding(symbol)
        return holding.shares if holding else 0

    @staticmethod
    def _order_value(shares: int, price: float) -> float:
        """Cash value of an order, raising InvalidOrderError if it cannot be priced"""
        if shares <= 0:
            raise InvalidOrderError("Share count must be positive")
        if not math.isfinite(price) or price <= 0:
            raise InvalidOrderError("Price must be positive")
        try:
            value = shares * price
        except OverflowError:
            raise InvalidOrderError("Share count is out of range") from None
        if not math.isfinite(value):
            raise InvalidOrderError("Share count is out of range")
        return value

    def can_buy(self, symbol: str, shares: int, price: float) -> bool:
        """Check if we have enough cash to buy"""
        try:
            return self._order_value(shares, price) <= self.cash
        except InvalidOrderError:
            return False

    def can_sell(self, symbol: str, shares: int) -> bool:
        """Check if we hold enough shares to sell"""
        holding = self.get_holding(symbol)
        return holding is not None and holding.can_sell(shares)

    def execute_buy(self, symbol: str, shares: int, price: float,
                    timestamp: Optional[datetime] = None) -> Transaction:
        """Execute a buy, raising if it cannot be filled in full"""
        symbol = self.normalize_symbol(symbol)
        cost = self._order_value(shares, price)
        if cost > self.cash:
            raise InsufficientCashError(cost, self.cash)

        holding = self.holdings.get(symbol)
        if holding is None:
            holding = Holding(symbol=symbol)
            self.holdings[symbol] = holding
        holding.add_shares(shares, price)
        self.cash -= cost

        return self._record(TransactionType.BUY, symbol, shares, price, timestamp)

    def execute_sell(self, symbol: str, shares: int, price: float,
                     timestamp: Optional[datetime] = None) -> Transaction:
        """Execute a sell, raising if it cannot be filled in full"""
        symbol = self.normalize_symbol(symbol)
        holding = self.holdings.get(symbol)
        if holding is not None and shares > holding.shares:
            raise InsufficientSharesError(symbol, shares, holding.shares)
        proceeds = self._order_value(shares, price)
        if holding is None:
            raise InsufficientSharesError(symbol, shares, 0)

        holding.remove_shares(shares)
        if holding.shares == 0:
            del self.holdings[symbol]
        self.cash += proceeds

        return self._record(TransactionType.SELL, symbol, shares, price, timestamp)

    def _record(self, kind: TransactionType, symbol: str, shares: int, price: float,
                timestamp: Optional[datetime]) -> Transaction:
        transaction = Transaction(
            kind=kind,
            symbol=symbol,
            shares=shares,
            price=price,
            timestamp=timestamp or datetime.now()
        )
        self.transactions.append(transaction)
        self.logger.info(f"Executed {transaction}")
        return transaction

    def buy(self, symbol: str, shares: int, price: float) -> bool:
        """Buy shares. Returns False and leaves state untouched if rejected."""
        try:
            self.execute_buy(symbol, shares, price)
        except TradingPlatformError as e:
            self.logger.info(f"Buy of {shares} {symbol} rejected: {e}")
            return False
        return True

    def sell(self, symbol: str, shares: int, price: float) -> bool:
        """Sell shares. Returns False and leaves state untouched if rejected."""
        try:
            self.execute_sell(symbol, shares, price)
        except TradingPlatformError as e:
            self.logger.info(f"Sell of {shares} {symbol} rejected: {e}")
            return False
        return True

    def market_value(self, market: 'Market') -> float:
        """Cash plus holdings marked at current market prices.

        Holdings whose symbol the market no longer knows contribute nothing.
        """
        total_value = self.cash
        for symbol, holding in self.holdings.items():
            security = market.lookup(symbol)
            if security is not None:
                total_value += holding.market_value(security.price)
        return total_value

    def unrealized_pnl(self, market: 'Market') -> float:
        """Unrealized P&L across holdings the market can price"""
        total_unrealized = 0.0
        for symbol, holding in self.holdings.items():
            security = market.lookup(symbol)
            if security is not None:
                total_unrealized += holding.unrealized_pnl(security.price)
        return total_unrealized

    def holdings_summary(self, market: 'Market') -> Dict[str, Dict]:
        """Per-holding figures marked to market. Unknown symbols price at 0."""
        summary = {}
        for symbol, holding in self.holdings.items():
            security = market.lookup(symbol)
            current_price = security.price if security is not None else 0.0
            unrealized_pnl = holding.unrealized_pnl(current_price)
            pnl_percent = (unrealized_pnl / holding.cost_basis * 100) if holding.cost_basis > 0 else 0.0

            summary[symbol] = {
                'shares': holding.shares,
                'avg_cost': holding.avg_cost,
                'current_price': current_price,
                'market_value': holding.market_value(current_price),
                'cost_basis': holding.cost_basis,
                'unrealized_pnl': unrealized_pnl,
                'pnl_percent': pnl_percent
            }
        return summary

    def persist(self, path: str) -> bool:
        """Overwrite path with a snapshot of cash and holdings. Returns success."""
        lines = storage.format_snapshot(self.cash, self.holdings.values())
        try:
            storage.write_snapshot(path, lines)
        except PersistenceError as e:
            self.logger.error(f"Failed to save portfolio: {e}")
            return False
        self.logger.info(f"Saved portfolio to {path} ({len(self.holdings)} holdings)")
        return True

    def restore(self, path: str) -> bool:
        """
        Replace cash and holdings with the snapshot at path.

        A missing file is a no-op that counts as success. Malformed lines
        are skipped. On a read failure nothing is changed. The transaction
        log is not part of the snapshot and is left as is.
        """
        if not os.path.exists(path):
            self.logger.debug(f"No saved portfolio at {path}")
            return True

        try:
            lines = storage.read_snapshot(path)
        except PersistenceError as e:
            self.logger.error(f"Failed to load portfolio: {e}")
            return False

        cash, holdings = storage.parse_snapshot(lines)
        self.holdings.clear()
        self.holdings.update(holdings)
        if cash is not None:
            self.cash = cash
        self.logger.info(f"Loaded portfolio from {path} ({len(self.holdings)} holdings)")
        return True

    def __str__(self) -> str:
        return f"Portfolio(Cash: ${self.cash:.2f}, Holdings: {len(self.holdings)}, Trades: {len(self.transactions)})"

    def __repr__(self) -> str:
        return self.__str__()
