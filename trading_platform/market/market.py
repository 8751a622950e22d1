"""
In-memory market whose prices follow a bounded multiplicative random walk.
"""

import logging
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..core.models import Security
from ..config.settings import MarketConfig


class Market:
    """Owns the tradable securities and advances their prices tick by tick"""

    def __init__(self, securities: Optional[Iterable[Security]] = None,
                 rng: Optional[np.random.Generator] = None,
                 max_tick_pct: float = 2.0, min_price: float = 0.01):
        if max_tick_pct < 0:
            raise ValueError("max_tick_pct must not be negative")
        if min_price <= 0:
            raise ValueError("min_price must be positive")

        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_tick_pct = max_tick_pct
        self.min_price = min_price
        self.securities: Dict[str, Security] = {}
        self.logger = logging.getLogger(__name__)

        for security in securities or []:
            self.add_security(security)

    @classmethod
    def from_config(cls, config: MarketConfig) -> 'Market':
        """Build a market seeded from configuration"""
        securities = [Security(s.symbol, s.name, s.price) for s in config.securities]
        return cls(
            securities,
            rng=np.random.default_rng(config.seed),
            max_tick_pct=config.max_tick_pct,
            min_price=config.min_price
        )

    def add_security(self, security: Security) -> None:
        """Add or replace a security keyed by its symbol"""
        self.securities[security.symbol] = security

    def lookup(self, symbol: str) -> Optional[Security]:
        """Find a security by symbol, ignoring case. Returns None if unknown."""
        if not symbol:
            return None
        return self.securities.get(symbol.strip().upper())

    def list_all(self) -> List[Security]:
        """All securities in insertion order"""
        return list(self.securities.values())

    @property
    def symbols(self) -> List[str]:
        return list(self.securities)

    def prices(self) -> Dict[str, float]:
        """Snapshot of current prices by symbol"""
        return {symbol: s.price for symbol, s in self.securities.items()}

    def advance(self) -> Dict[str, float]:
        """
        Apply one tick to every security.

        Each price moves by an independent percentage drawn uniformly from
        [-max_tick_pct, +max_tick_pct] and is floored at min_price.
        Returns the percentage change drawn for each symbol.
        """
        changes: Dict[str, float] = {}
        if not self.securities:
            return changes

        pcts = self.rng.uniform(-self.max_tick_pct, self.max_tick_pct, size=len(self.securities))
        for security, pct in zip(self.securities.values(), pcts):
            pct = float(pct)
            security.price = max(self.min_price, security.price * (1.0 + pct / 100.0))
            changes[security.symbol] = pct

        self.logger.debug(f"Market advanced: {changes}")
        return changes

    def __len__(self) -> int:
        return len(self.securities)

    def __contains__(self, symbol: str) -> bool:
        return self.lookup(symbol) is not None

    def __str__(self) -> str:
        return f"Market(Securities: {len(self.securities)})"

    def __repr__(self) -> str:
        return self.__str__()
