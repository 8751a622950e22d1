"""
Tests for transaction statistics.
"""

from datetime import datetime

import pytest
from trading_platform.core.models import Transaction
from trading_platform.core.types import TransactionType
from trading_platform.portfolio.statistics import transactions_frame, trading_statistics, TRANSACTION_COLUMNS


@pytest.fixture
def sample_transactions():
    ts = datetime(2024, 3, 1, 10, 0, 0)
    return [
        Transaction(TransactionType.BUY, 'AAPL', 10, 172.45, ts),
        Transaction(TransactionType.BUY, 'MSFT', 2, 352.00, ts),
        Transaction(TransactionType.SELL, 'AAPL', 4, 180.00, ts),
    ]


class TestTransactionsFrame:
    def test_frame_rows(self, sample_transactions):
        frame = transactions_frame(sample_transactions)

        assert list(frame.columns) == TRANSACTION_COLUMNS
        assert len(frame) == 3
        assert list(frame['kind']) == ['BUY', 'BUY', 'SELL']
        assert frame['total'].iloc[0] == pytest.approx(1724.5)

    def test_empty_frame(self):
        frame = transactions_frame([])
        assert frame.empty
        assert list(frame.columns) == TRANSACTION_COLUMNS


class TestTradingStatistics:
    def test_statistics(self, sample_transactions):
        stats = trading_statistics(sample_transactions)

        assert stats['total_trades'] == 3
        assert stats['buy_trades'] == 2
        assert stats['sell_trades'] == 1
        assert stats['total_volume'] == 16
        assert stats['avg_trade_size'] == pytest.approx(16 / 3)
        assert stats['total_traded_value'] == pytest.approx(1724.5 + 704.0 + 720.0)
        assert stats['volume_by_symbol'] == {'AAPL': 14, 'MSFT': 2}

    def test_no_transactions(self):
        assert trading_statistics([]) == {'total_trades': 0}

    def test_from_portfolio_log(self, sample_portfolio):
        sample_portfolio.buy('AAPL', 10, 172.45)
        sample_portfolio.sell('AAPL', 10, 180.0)

        stats = trading_statistics(sample_portfolio.transactions)
        assert stats['buy_trades'] == 1
        assert stats['sell_trades'] == 1
