"""
Menu-driven request/response loop over a market and a portfolio.
"""

import logging
from typing import Callable, Dict, Optional

from .console import Console
from . import formatting
from ..core.exceptions import TradingPlatformError
from ..market.market import Market
from ..portfolio.portfolio import Portfolio
from ..portfolio.statistics import trading_statistics


class TradingSession:
    """Reads one command at a time and dispatches it to the market or portfolio"""

    def __init__(self, market: Market, portfolio: Portfolio, console: Console,
                 save_file: str = "portfolio.txt"):
        self.market = market
        self.portfolio = portfolio
        self.console = console
        self.save_file = save_file
        self.running = False
        self.logger = logging.getLogger(__name__)

        self.actions: Dict[str, Callable[[], None]] = {
            '1': self.show_market,
            '2': self.advance_market,
            '3': self.buy,
            '4': self.sell,
            '5': self.show_summary,
            '6': self.show_history,
            '7': self.save,
            '8': self.load,
            '0': self.exit,
        }

    def say(self, text: str = "") -> None:
        self.console.write_line(text)

    def run(self) -> None:
        """Run until the user exits or input ends. Always saves on the way out."""
        if not self.portfolio.restore(self.save_file):
            self.say(f"Failed to load portfolio from {self.save_file}")

        self.say("Welcome to the Simple Stock Trading Platform!")
        self.running = True
        while self.running:
            for line in formatting.format_menu():
                self.say(line)
            choice = self.console.read_line("Choose an option: ")
            if choice is None:
                self.logger.info("Input closed, exiting session")
                self.exit()
                break
            self.dispatch(choice.strip())

    def dispatch(self, choice: str) -> None:
        action = self.actions.get(choice)
        if action is None:
            self.say("Invalid choice. Try again.")
            return
        try:
            action()
        except TradingPlatformError as e:
            self.logger.error(f"Action {choice} failed: {e}")
            self.say(f"Error: {e}")

    def read_symbol(self, prompt: str) -> Optional[str]:
        line = self.console.read_line(prompt)
        if line is None:
            return None
        return line.strip().upper()

    def read_shares(self, prompt: str) -> int:
        """Read a share count. Anything that is not an integer comes back as -1."""
        line = self.console.read_line(prompt)
        if line is None:
            return -1
        try:
            return int(line.strip())
        except ValueError:
            return -1

    def show_market(self) -> None:
        self.say()
        self.say("-- Market Data --")
        for security in self.market.list_all():
            self.say(formatting.format_security(security))

    def advance_market(self) -> None:
        self.market.advance()
        self.say("Market advanced. Prices updated.")

    def buy(self) -> None:
        symbol = self.read_symbol("Enter stock symbol to BUY: ")
        security = self.market.lookup(symbol) if symbol else None
        if security is None:
            self.say("Unknown symbol.")
            return

        shares = self.read_shares("Enter number of shares to buy: ")
        if shares <= 0:
            self.say("Invalid share count.")
            return

        price = security.price
        if self.portfolio.buy(security.symbol, shares, price):
            self.say(f"Bought {shares} shares of {security.symbol} @ {formatting.format_money(price)}")
        else:
            self.say("Buy failed (insufficient cash or invalid request).")

    def sell(self) -> None:
        symbol = self.read_symbol("Enter stock symbol to SELL: ")
        security = self.market.lookup(symbol) if symbol else None
        if security is None:
            self.say("Unknown symbol.")
            return

        shares = self.read_shares("Enter number of shares to sell: ")
        if shares <= 0:
            self.say("Invalid share count.")
            return

        price = security.price
        if self.portfolio.sell(security.symbol, shares, price):
            self.say(f"Sold {shares} shares of {security.symbol} @ {formatting.format_money(price)}")
        else:
            self.say("Sell failed (not enough shares or invalid request).")

    def show_summary(self) -> None:
        self.say()
        self.say("-- Portfolio Summary --")
        self.say(f"Cash: {formatting.format_money(self.portfolio.cash)}")
        self.say("Holdings:")
        summary = self.portfolio.holdings_summary(self.market)
        if not summary:
            self.say("  (no holdings)")
        for symbol, figures in summary.items():
            self.say(formatting.format_holding(symbol, figures))
        self.say("Total Portfolio Value (cash + market holdings): "
                 f"{formatting.format_money(self.portfolio.market_value(self.market))}")

    def show_history(self) -> None:
        self.say()
        self.say("-- Transaction History --")
        if not self.portfolio.transactions:
            self.say("  (no transactions)")
            return
        for transaction in self.portfolio.transactions:
            self.say(formatting.format_transaction(transaction))
        for line in formatting.format_statistics(trading_statistics(self.portfolio.transactions)):
            self.say(line)

    def save(self) -> None:
        if self.portfolio.persist(self.save_file):
            self.say(f"Portfolio saved to {self.save_file}")
        else:
            self.say(f"Failed to save portfolio to {self.save_file}")

    def load(self) -> None:
        if self.portfolio.restore(self.save_file):
            self.say(f"Portfolio loaded from {self.save_file}")
        else:
            self.say(f"Failed to load portfolio from {self.save_file}")

    def exit(self) -> None:
        self.say("Saving portfolio and exiting...")
        if not self.portfolio.persist(self.save_file):
            self.say(f"Failed to save portfolio to {self.save_file}")
        self.running = False
