from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Optional

from trade_history.analytics.coercion import finite_or_zero, is_missing, parse_amount, parse_entry_date
from trade_history.config.settings import Settings
from trade_history.utils.exceptions import ValidationError


@dataclass(frozen=True)
class TradeRecord:
    """One admitted row of the trade log with coerced fields."""

    entry_date: Optional[date]
    investment: float = 0.0
    result: float = 0.0

    def __post_init__(self):
        # amounts built by hand bypass parse_amount
        object.__setattr__(self, "investment", finite_or_zero(self.investment))
        object.__setattr__(self, "result", finite_or_zero(self.result))

    @property
    def is_win(self) -> bool:
        # a flat trade (result == 0) is booked as a win; keep until the desk says otherwise
        return self.result >= 0


def coerce_record(row: Mapping[str, Any], settings: Optional[Settings] = None) -> Optional[TradeRecord]:
    """Turn a raw row into a TradeRecord.

    Returns None when the entry date cell is absent, None, empty or
    otherwise falsy (0, False); such rows are not trades. A whitespace-only
    date is present but unparseable, so the row counts without a month.
    Every other malformed cell degrades per field.
    """
    if not isinstance(row, Mapping):
        raise ValidationError(f"trade row must be a mapping, got {type(row).__name__}")
    s = settings or Settings()

    raw_date = row.get(s.DATE_IN_COLUMN)
    if is_missing(raw_date):
        return None

    return TradeRecord(
        entry_date=parse_entry_date(raw_date, s.DATE_FORMATS),
        investment=parse_amount(row.get(s.INVESTMENT_COLUMN), s.CURRENCY_SYMBOLS),
        result=parse_amount(row.get(s.RESULT_COLUMN), s.CURRENCY_SYMBOLS),
    )


def coerce_records(rows: Iterable[Mapping[str, Any]], settings: Optional[Settings] = None) -> List[TradeRecord]:
    out = []
    for row in rows:
        rec = coerce_record(row, settings)
        if rec is not None:
            out.append(rec)
    return out
