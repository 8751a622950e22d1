"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np
from typing import List, Optional

from trading_platform.core.models import Security
from trading_platform.market.market import Market
from trading_platform.portfolio.portfolio import Portfolio
from trading_platform.session.console import Console
from trading_platform.session.session import TradingSession


class ScriptedConsole(Console):
    """Console fed from a list of input lines that records everything written"""

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def sample_securities():
    """Fresh copies of the default securities"""
    return [
        Security('AAPL', 'Apple Inc.', 172.45),
        Security('GOOG', 'Alphabet Inc.', 128.30),
        Security('AMZN', 'Amazon.com', 149.10),
        Security('MSFT', 'Microsoft', 352.00),
        Security('TSLA', 'Tesla', 265.75),
    ]


@pytest.fixture
def sample_market(sample_securities):
    """Market with a fixed random seed"""
    return Market(sample_securities, rng=np.random.default_rng(42))


@pytest.fixture
def sample_portfolio():
    """Create a sample portfolio for testing"""
    return Portfolio(initial_cash=10000.0)


@pytest.fixture
def save_file(tmp_path):
    return str(tmp_path / "portfolio.txt")


@pytest.fixture
def make_session(sample_market, sample_portfolio, save_file):
    """Build a session driven by the given input lines"""
    def _make(lines: List[str]):
        console = ScriptedConsole(lines)
        session = TradingSession(sample_market, sample_portfolio, console, save_file=save_file)
        return session, console
    return _make


@pytest.fixture
def make_console():
    """Build a scripted console from input lines"""
    return ScriptedConsole
