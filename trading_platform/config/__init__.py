"""Configuration for the trading platform."""

from .settings import (
    SecuritySeed, MarketConfig, PortfolioConfig, PlatformConfig,
    DEFAULT_SECURITIES, DEFAULT_CONFIG, create_custom_config
)

__all__ = [
    'SecuritySeed', 'MarketConfig', 'PortfolioConfig', 'PlatformConfig',
    'DEFAULT_SECURITIES', 'DEFAULT_CONFIG', 'create_custom_config'
]
