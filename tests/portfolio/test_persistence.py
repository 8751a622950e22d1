"""
Tests for saving and restoring portfolio snapshots.
"""

import os

import pytest
from trading_platform.portfolio.holding import Holding
from trading_platform.portfolio.portfolio import Portfolio
from trading_platform.portfolio.storage import format_snapshot, parse_snapshot


class TestSnapshotFormat:
    def test_format_snapshot(self):
        """Test the cash line comes first and values use 4 decimals"""
        lines = format_snapshot(8275.5, [Holding('AAPL', 10, 172.45), Holding('MSFT', 3, 1 / 3)])
        assert lines == ['CASH,8275.5000', 'AAPL,10,172.4500', 'MSFT,3,0.3333']

    def test_parse_snapshot(self):
        cash, holdings = parse_snapshot(['CASH,8275.5000', 'AAPL,10,172.4500'])
        assert cash == 8275.5
        assert holdings['AAPL'] == Holding('AAPL', 10, 172.45)

    def test_cash_tag_case_insensitive(self):
        cash, _ = parse_snapshot(['cash,12.5'])
        assert cash == 12.5

    def test_malformed_lines_skipped(self):
        """Test the parser skips lines it cannot read"""
        lines = [
            '',
            'garbage',
            'CASH,not-a-number',
            'AAPL,10',
            'GOOG,ten,128.30',
            'AMZN,5,abc',
            'TSLA,0,265.75',
            'MSFT,-2,352.00',
            'NFLX,3,nan',
            'CASH,500.25',
            'msft,2,350.0,extra',
        ]
        cash, holdings = parse_snapshot(lines)

        assert cash == 500.25
        assert list(holdings) == ['MSFT']
        assert holdings['MSFT'].shares == 2

    def test_digit_separators_rejected(self):
        """Test underscores in numeric fields make a line malformed"""
        cash, holdings = parse_snapshot(['CASH,1_000.0', 'AAPL,1_0,1.0', 'GOOG,2,1_28.30', 'MSFT,3,350.0'])

        assert cash is None
        assert list(holdings) == ['MSFT']

    def test_missing_cash_line(self):
        cash, holdings = parse_snapshot(['AAPL,1,100.0'])
        assert cash is None
        assert 'AAPL' in holdings


class TestPersistRestore:
    def test_round_trip(self, save_file):
        """Test persist then restore reproduces cash and holdings"""
        original = Portfolio(10000.0)
        original.buy('AAPL', 10, 172.45)
        original.buy('AAPL', 3, 175.1234567)
        original.buy('TSLA', 7, 265.75)

        assert original.persist(save_file)

        restored = Portfolio(0.0)
        assert restored.restore(save_file)

        assert restored.cash == pytest.approx(original.cash, abs=1e-4)
        assert set(restored.holdings) == set(original.holdings)
        for symbol, holding in original.holdings.items():
            assert restored.holdings[symbol].shares == holding.shares
            assert restored.holdings[symbol].avg_cost == pytest.approx(holding.avg_cost, abs=1e-4)

    def test_round_trip_mixed_case_symbols(self, save_file):
        """Test holdings bought with lower case symbols restore under the same keys"""
        original = Portfolio(10000.0)
        original.buy('aapl', 10, 172.45)
        original.buy('Tsla', 2, 265.75)
        original.persist(save_file)

        restored = Portfolio(0.0)
        restored.restore(save_file)

        assert set(restored.holdings) == set(original.holdings) == {'AAPL', 'TSLA'}

    def test_file_contents(self, save_file):
        portfolio = Portfolio(10000.0)
        portfolio.buy('AAPL', 10, 172.45)
        portfolio.persist(save_file)

        with open(save_file, encoding='utf-8') as fh:
            assert fh.read().splitlines() == ['CASH,8275.5000', 'AAPL,10,172.4500']

    def test_persist_overwrites(self, save_file):
        with open(save_file, 'w', encoding='utf-8') as fh:
            fh.write('CASH,1.0\nOLD,1,1.0\nOLDER,2,2.0\n')

        Portfolio(50.0).persist(save_file)

        with open(save_file, encoding='utf-8') as fh:
            assert fh.read() == 'CASH,50.0000\n'

    def test_restore_missing_file_is_noop(self, tmp_path):
        """Test restoring from a missing file leaves a fresh portfolio unchanged"""
        portfolio = Portfolio(10000.0)
        assert portfolio.restore(str(tmp_path / 'does-not-exist.txt'))
        assert portfolio.cash == 10000.0
        assert portfolio.holdings == {}

    def test_restore_replaces_holdings(self, save_file):
        with open(save_file, 'w', encoding='utf-8') as fh:
            fh.write('CASH,2500.0\nGOOG,4,120.0\n')

        portfolio = Portfolio(10000.0)
        portfolio.buy('AAPL', 10, 172.45)
        assert portfolio.restore(save_file)

        assert portfolio.cash == 2500.0
        assert list(portfolio.holdings) == ['GOOG']
        # The transaction log is not part of the snapshot
        assert len(portfolio.transactions) == 1

    def test_restore_keeps_cash_without_cash_line(self, save_file):
        with open(save_file, 'w', encoding='utf-8') as fh:
            fh.write('GOOG,4,120.0\n')

        portfolio = Portfolio(1234.0)
        portfolio.restore(save_file)
        assert portfolio.cash == 1234.0

    def test_persist_failure_reported(self, tmp_path):
        """Test an unwritable destination returns failure without raising"""
        portfolio = Portfolio(10000.0)
        portfolio.buy('AAPL', 1, 100.0)
        target = str(tmp_path / 'missing-dir' / 'portfolio.txt')

        assert not portfolio.persist(target)
        assert portfolio.cash == 9900.0
        assert portfolio.get_holding('AAPL').shares == 1

    def test_restore_failure_reported(self, tmp_path):
        """Test an unreadable source returns failure and leaves state unchanged"""
        portfolio = Portfolio(10000.0)
        portfolio.buy('AAPL', 1, 100.0)

        # A directory exists but cannot be read as a file
        assert not portfolio.restore(str(tmp_path))
        assert portfolio.cash == 9900.0
        assert 'AAPL' in portfolio.holdings

    def test_restore_binary_file(self, save_file):
        with open(save_file, 'wb') as fh:
            fh.write(b'\xff\xfe\x00\x81')

        portfolio = Portfolio(10000.0)
        assert not portfolio.restore(save_file)
        assert portfolio.cash == 10000.0

    def test_persist_creates_file(self, save_file):
        assert not os.path.exists(save_file)
        assert Portfolio(1.0).persist(save_file)
        assert os.path.exists(save_file)
