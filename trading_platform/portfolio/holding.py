"""
Holding management for individual stock positions.
"""

from dataclasses import dataclass


@dataclass
class Holding:
    """Represents owned shares of a single stock"""
    symbol: str
    shares: int = 0
    avg_cost: float = 0.0

    @property
    def cost_basis(self) -> float:
        """Total amount paid for the shares currently held"""
        return self.shares * self.avg_cost

    def market_value(self, current_price: float) -> float:
        """Market value at current price"""
        return self.shares * current_price

    def unrealized_pnl(self, current_price: float) -> float:
        """Unrealized profit/loss at current price"""
        return (current_price - self.avg_cost) * self.shares

    def add_shares(self, shares: int, price: float) -> None:
        """Add shares to the holding, updating the weighted average cost"""
        if shares <= 0:
            raise ValueError("Shares must be positive")

        total_cost = (self.shares * self.avg_cost) + (shares * price)
        self.shares += shares
        self.avg_cost = total_cost / self.shares

    def remove_shares(self, shares: int) -> bool:
        """Remove shares from the holding. Returns True if successful"""
        if shares <= 0:
            raise ValueError("Shares must be positive")

        if shares > self.shares:
            return False

        self.shares -= shares
        return True

    def can_sell(self, shares: int) -> bool:
        """Check if we can sell the requested number of shares"""
        return 0 < shares <= self.shares

    def __str__(self) -> str:
        return f"{self.symbol}: {self.shares} shares @ avg {self.avg_cost:.2f}"

    def __repr__(self) -> str:
        return f"Holding({self.symbol}: {self.shares} @ ${self.avg_cost:.4f})"
