"""
Historical performance analytics: field coercion, typed records and the
aggregation that calibrates risk/target parameters.
"""

from .aggregator import AggregationResult, HistoryAccumulator, aggregate
from .coercion import (
    finite_or_zero,
    is_blank,
    is_missing,
    parse_amount,
    parse_entry_date,
    strip_currency_symbols,
)
from .records import TradeRecord, coerce_record, coerce_records

__all__ = [
    # Aggregation
    "AggregationResult",
    "HistoryAccumulator",
    "aggregate",

    # Records
    "TradeRecord",
    "coerce_record",
    "coerce_records",

    # Coercion
    "finite_or_zero",
    "is_blank",
    "is_missing",
    "parse_amount",
    "parse_entry_date",
    "strip_currency_symbols",
]
