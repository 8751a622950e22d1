"""
Tabular views and summary statistics over the transaction log.
"""

from typing import Dict, Iterable

import pandas as pd

from ..core.models import Transaction
from ..core.types import TransactionType

TRANSACTION_COLUMNS = ['timestamp', 'kind', 'symbol', 'shares', 'price', 'total']


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction, in log order"""
    records = [
        {
            'timestamp': t.timestamp,
            'kind': t.kind.value,
            'symbol': t.symbol,
            'shares': t.shares,
            'price': t.price,
            'total': t.total,
        }
        for t in transactions
    ]
    return pd.DataFrame.from_records(records, columns=TRANSACTION_COLUMNS)


def trading_statistics(transactions: Iterable[Transaction]) -> Dict:
    """Get trading activity statistics"""
    frame = transactions_frame(transactions)
    if frame.empty:
        return {'total_trades': 0}

    kinds = frame['kind']
    volume_by_symbol = frame.groupby('symbol')['shares'].sum()

    return {
        'total_trades': int(len(frame)),
        'buy_trades': int((kinds == TransactionType.BUY.value).sum()),
        'sell_trades': int((kinds == TransactionType.SELL.value).sum()),
        'total_volume': int(frame['shares'].sum()),
        'avg_trade_size': float(frame['shares'].mean()),
        'total_traded_value': float(frame['total'].sum()),
        'volume_by_symbol': {symbol: int(v) for symbol, v in volume_by_symbol.items()},
    }
