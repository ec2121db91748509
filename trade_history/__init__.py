"""
Trade history calibration: summary statistics over a trade log used to
size future positions and set return/loss targets.
"""

from .analytics import AggregationResult, TradeRecord, aggregate
from .loader import load_trades, read_trade_rows

__version__ = "0.1.0"

__all__ = [
    "AggregationResult",
    "TradeRecord",
    "aggregate",
    "load_trades",
    "read_trade_rows",
]
