"""
Flat text snapshot format for portfolio persistence.

One record per line, comma separated::

    CASH,<cash>
    <symbol>,<shares>,<average cost>

Parsing is lenient: malformed lines are skipped so that a partially
corrupt file still restores whatever can be read.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

from .holding import Holding
from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

CASH_TAG = "CASH"


def format_snapshot(cash: float, holdings: Iterable[Holding]) -> List[str]:
    """Render cash and holdings as snapshot lines with 4 fractional digits"""
    lines = [f"{CASH_TAG},{cash:.4f}"]
    for holding in holdings:
        lines.append(f"{holding.symbol},{holding.shares},{holding.avg_cost:.4f}")
    return lines


def _parse_float(text: str) -> Optional[float]:
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_holding(fields: List[str]) -> Optional[Holding]:
    symbol = fields[0].upper()
    if not symbol:
        return None
    if "_" in fields[1]:
        return None
    try:
        shares = int(fields[1])
    except ValueError:
        return None
    avg_cost = _parse_float(fields[2])
    if shares <= 0 or avg_cost is None or avg_cost <= 0:
        return None
    return Holding(symbol=symbol, shares=shares, avg_cost=avg_cost)


def parse_snapshot(lines: Iterable[str]) -> Tuple[Optional[float], Dict[str, Holding]]:
    """
    Parse snapshot lines into (cash, holdings).

    Cash is None when no valid cash line is present. Lines with fewer than
    two fields, unparsable numbers or non-positive share counts are skipped.
    A later line for the same symbol replaces an earlier one.
    """
    cash = None
    holdings: Dict[str, Holding] = {}

    for number, line in enumerate(lines, start=1):
        fields = [f.strip() for f in line.strip().split(',')]
        if len(fields) < 2:
            continue

        if fields[0].upper() == CASH_TAG:
            value = _parse_float(fields[1])
            if value is None:
                logger.debug(f"Skipping malformed cash line {number}: {line!r}")
                continue
            cash = value
            continue

        if len(fields) < 3:
            continue

        holding = _parse_holding(fields)
        if holding is None:
            logger.debug(f"Skipping malformed holding line {number}: {line!r}")
            continue
        holdings[holding.symbol] = holding

    return cash, holdings


def write_snapshot(path: str, lines: List[str]) -> None:
    """Overwrite the file at path with the snapshot lines"""
    try:
        with open(path, "w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
    except OSError as e:
        raise PersistenceError(path, e.strerror or str(e)) from e


def read_snapshot(path: str) -> List[str]:
    """Read all snapshot lines from path"""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read().splitlines()
    except OSError as e:
        raise PersistenceError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise PersistenceError(path, f"not a text file ({e.reason})") from e
