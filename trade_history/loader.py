from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Optional, Union

from trade_history.analytics.records import TradeRecord, coerce_records
from trade_history.config.settings import Settings, get_settings
from trade_history.utils.exceptions import DataSourceError, ValidationError
from trade_history.utils.logger import get_logger

logger = get_logger(__name__)


def read_trade_rows(path: Union[str, Path], settings: Optional[Settings] = None) -> List[Dict[str, str]]:
    """Read a header-row CSV trade log into a list of row dicts.

    Blank lines and rows whose cells are all empty strings are dropped. Header
    names are stripped so ``" DATE IN "`` still matches ``"DATE IN"``.
    """
    s = settings or get_settings()
    p = Path(path)
    out: List[Dict[str, str]] = []
    try:
        with p.open("r", encoding=s.CSV_ENCODING, newline="") as fh:
            reader = csv.DictReader(fh, delimiter=s.CSV_DELIMITER)
            if reader.fieldnames is None:
                logger.warning("trade log %s is empty", p)
                return out
            reader.fieldnames = [(name or "").strip() for name in reader.fieldnames]
            if s.DATE_IN_COLUMN not in reader.fieldnames:
                raise ValidationError(f"{p}: missing column {s.DATE_IN_COLUMN!r} in header")
            for row in reader:
                values = [v for k, v in row.items() if k is not None]
                if all(v is None or v == "" for v in values):
                    continue
                out.append(row)
    except (UnicodeDecodeError, csv.Error) as e:
        raise DataSourceError(f"cannot parse trade log {p}: {e}") from e
    logger.info("read %d rows from %s", len(out), p)
    return out


def load_trades(path: Union[str, Path], settings: Optional[Settings] = None) -> List[TradeRecord]:
    """Read and coerce a trade log, keeping only rows with an entry date."""
    s = settings or get_settings()
    rows = read_trade_rows(path, s)
    records = coerce_records(rows, s)
    if len(records) != len(rows):
        logger.info("dropped %d rows without %r", len(rows) - len(records), s.DATE_IN_COLUMN)
    return records
