"""
Text rendering for the console session.
"""

from typing import Dict, List

from ..core.models import Security, Transaction

MENU_OPTIONS = [
    ('1', 'Display Market Data'),
    ('2', 'Advance Market (simulate price change)'),
    ('3', 'Buy Stock'),
    ('4', 'Sell Stock'),
    ('5', 'Portfolio Summary'),
    ('6', 'Transaction History'),
    ('7', 'Save Portfolio'),
    ('8', 'Load Portfolio'),
    ('0', 'Exit'),
]


def format_menu() -> List[str]:
    lines = ["", "--- Main Menu ---"]
    lines.extend(f"{key}) {label}" for key, label in MENU_OPTIONS)
    return lines


def format_money(amount: float) -> str:
    return f"{amount:.2f}"


def format_signed(amount: float) -> str:
    return f"{amount:+.2f}"


def format_security(security: Security) -> str:
    return str(security)


def format_holding(symbol: str, figures: Dict) -> str:
    """One summary line for a holding as produced by Portfolio.holdings_summary"""
    return (f"  {symbol} - {figures['shares']} shares, "
            f"avg buy {format_money(figures['avg_cost'])}, "
            f"market price {format_money(figures['current_price'])}, "
            f"market value {format_money(figures['market_value'])}, "
            f"unrealized P&L {format_signed(figures['unrealized_pnl'])} "
            f"({figures['pnl_percent']:+.2f}%)")


def format_transaction(transaction: Transaction) -> str:
    return f"  {transaction}"


def format_statistics(stats: Dict) -> List[str]:
    if not stats.get('total_trades'):
        return []
    return [
        f"Trades: {stats['total_trades']} ({stats['buy_trades']} buys, {stats['sell_trades']} sells)",
        f"Shares traded: {stats['total_volume']} (avg {stats['avg_trade_size']:.1f} per trade)",
        f"Traded value: {format_money(stats['total_traded_value'])}",
    ]
