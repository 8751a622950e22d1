"""
Configuration settings for the trading platform.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SecuritySeed:
    """Starting definition of a tradable security"""
    symbol: str
    name: str
    price: float


DEFAULT_SECURITIES = [
    SecuritySeed('AAPL', 'Apple Inc.', 172.45),
    SecuritySeed('GOOG', 'Alphabet Inc.', 128.30),
    SecuritySeed('AMZN', 'Amazon.com', 149.10),
    SecuritySeed('MSFT', 'Microsoft', 352.00),
    SecuritySeed('TSLA', 'Tesla', 265.75),
]


@dataclass
class MarketConfig:
    """Configuration for the simulated market"""
    securities: List[SecuritySeed] = field(default_factory=lambda: list(DEFAULT_SECURITIES))
    max_tick_pct: float = 2.0  # Each tick moves a price by at most +/- this percent
    min_price: float = 0.01
    seed: Optional[int] = None  # None draws fresh entropy on every run


@dataclass
class PortfolioConfig:
    """Configuration for portfolio management"""
    initial_cash: float = 10000.0
    save_file: str = "portfolio.txt"


@dataclass
class PlatformConfig:
    """Top level configuration for a trading session"""
    market: MarketConfig = field(default_factory=MarketConfig)
    portfolio: PortfolioConfig = field(default_factory=PortfolioConfig)
    log_level: str = "WARNING"


DEFAULT_CONFIG = PlatformConfig()


def create_custom_config(initial_cash: float = 10000.0, save_file: str = "portfolio.txt",
                         seed: Optional[int] = None) -> PlatformConfig:
    """Create a configuration with the default securities and custom session settings"""
    return PlatformConfig(
        market=MarketConfig(seed=seed),
        portfolio=PortfolioConfig(initial_cash=initial_cash, save_file=save_file)
    )
