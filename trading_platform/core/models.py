"""
Core data models for the trading platform.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime

from .types import TransactionType


@dataclass
class Security:
    """A tradable stock with its current market price"""
    symbol: str
    name: str
    price: float

    def __post_init__(self):
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Symbol must not be empty")
        self.symbol = self.symbol.strip().upper()
        if not math.isfinite(self.price) or self.price <= 0:
            raise ValueError(f"Price for {self.symbol} must be positive, got {self.price}")

    def __str__(self) -> str:
        return f"{self.symbol} ({self.name}) - {self.price:.2f}"


@dataclass(frozen=True)
class Transaction:
    """Represents an executed trade. Never modified once recorded."""
    kind: TransactionType
    symbol: str
    shares: int
    price: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total(self) -> float:
        """Cash value of the trade"""
        return self.shares * self.price

    def __str__(self) -> str:
        return (f"{self.timestamp:%Y-%m-%d %H:%M:%S} - "
                f"{self.kind.value} {self.shares} {self.symbol} @ {self.price:.2f}")
