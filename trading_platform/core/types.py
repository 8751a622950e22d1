"""
Core type definitions for the trading platform.
"""

from enum import Enum


class TransactionType(Enum):
    """Kind of a recorded trade"""
    BUY = "BUY"
    SELL = "SELL"
