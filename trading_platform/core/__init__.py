"""Core components of the trading platform."""

from .types import TransactionType
from .models import Security, Transaction
from .exceptions import (
    TradingPlatformError, InsufficientCashError,
    InsufficientSharesError, InvalidOrderError, PersistenceError
)

__all__ = [
    'TransactionType',
    'Security', 'Transaction',
    'TradingPlatformError', 'InsufficientCashError',
    'InsufficientSharesError', 'InvalidOrderError', 'PersistenceError'
]
