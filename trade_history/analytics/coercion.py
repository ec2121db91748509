"""Lenient field coercion for hand-kept trade logs.

Spreadsheet exports mix currency symbols, thousands separators and
decimal commas in the same column, and dates arrive in whatever format
the trader typed. Every helper here is pure and never raises: a value
that cannot be read degrades to ``0.0`` (amounts) or ``None`` (dates).
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

from trade_history.config.settings import DEFAULT_CURRENCY_SYMBOLS, DEFAULT_DATE_FORMATS

# a comma followed by exactly three digits groups thousands
_THOUSANDS_COMMA = re.compile(r",(?=\d{3}(?!\d))")
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_missing(value: Any) -> bool:
    """True for an absent cell: None, "", False, 0 or NaN. Whitespace is present."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def strip_currency_symbols(text: str, symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS) -> str:
    """Remove every occurrence of the given currency symbols from ``text``.

    Longer symbols are removed first so ``"US$"`` wins over ``"$"``.
    """
    for symbol in sorted({s for s in symbols if s}, key=len, reverse=True):
        text = text.replace(symbol, "")
    return text


def parse_amount(value: Any, symbols: Iterable[str] = DEFAULT_CURRENCY_SYMBOLS) -> float:
    """Parse a free-form monetary value, falling back to 0.0.

    >>> parse_amount("€1,234.56")
    1234.56
    >>> parse_amount("95,25")
    95.25
    >>> parse_amount("foo")
    0.0
    """
    if value is None:
        return 0.0
    try:
        text = str(value)
    except ValueError:
        # int too large for str()
        return 0.0
    text = strip_currency_symbols(text, symbols)
    text = _THOUSANDS_COMMA.sub("", text)
    text = text.replace(",", ".", 1)
    m = _NUMERIC_PREFIX.match(text)
    if not m:
        return 0.0
    try:
        number = float(m.group(0))
    except ValueError:
        return 0.0
    return finite_or_zero(number)


def finite_or_zero(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _from_epoch(v: float) -> Optional[date]:
    # ms vs s
    if v > 1e12:
        return datetime.fromtimestamp(v / 1000.0, tz=timezone.utc).date()
    if v > 1e9:
        return datetime.fromtimestamp(v, tz=timezone.utc).date()
    return None


def parse_entry_date(value: Any, formats: Iterable[str] = DEFAULT_DATE_FORMATS) -> Optional[date]:
    """Best-effort calendar date of a trade entry, or None."""
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return _from_epoch(float(value))
        s = str(value).strip()
        if s.isdigit():
            d = _from_epoch(float(s))
            if d is not None:
                return d
        # ISO parse (accept Z)
        try:
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        except ValueError:
            pass
        for fmt in formats:
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
    except (OverflowError, OSError, ValueError):
        return None
    return None
