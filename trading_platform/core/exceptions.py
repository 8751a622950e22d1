"""
Custom exceptions for the trading platform.
"""


class TradingPlatformError(Exception):
    """Base exception for the trading platform"""
    pass


class InsufficientCashError(TradingPlatformError):
    """Raised when a buy costs more than the cash balance"""
    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"Not enough cash: order costs ${required:.2f}, balance is ${available:.2f}")


class InsufficientSharesError(TradingPlatformError):
    """Raised when a sell asks for more shares than the holding has"""
    def __init__(self, symbol: str, requested: int, available: int):
        self.symbol = symbol
        self.requested = requested
        self.available = available
        super().__init__(f"Cannot sell {requested} shares of {symbol}: {available} held")


class InvalidOrderError(TradingPlatformError):
    """Raised for invalid trade parameters"""
    pass


class PersistenceError(TradingPlatformError):
    """Raised when a portfolio snapshot cannot be read or written"""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
