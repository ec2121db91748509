from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Set, Tuple

from trade_history.analytics.records import TradeRecord, coerce_record
from trade_history.config.settings import Settings
from trade_history.utils.exceptions import ValidationError
from trade_history.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AggregationResult:
    success: bool
    historical_win_rate: float
    historical_avg_investment_per_op: float
    historical_avg_trades_per_month: float
    suggested_roi_target_percent: float
    suggested_loss_per_failed_op_percent: float
    years: Tuple[int, ...]
    trade_count: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    months_with_trades: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "historicalWinRate": self.historical_win_rate,
            "historicalAvgInvestmentPerOp": self.historical_avg_investment_per_op,
            "historicalAvgTradesPerMonth": self.historical_avg_trades_per_month,
            "suggestedRoiTargetPercent": self.suggested_roi_target_percent,
            "suggestedLossPerFailedOpPercent": self.suggested_loss_per_failed_op_percent,
            "years": list(self.years),
            "tradeCount": self.trade_count,
            "winningTrades": self.winning_trades,
            "losingTrades": self.losing_trades,
            "monthsWithTrades": self.months_with_trades,
        }


class HistoryAccumulator:
    """Running totals over admitted trade records."""

    def __init__(self):
        self.total_invested: float = 0.0
        self.trade_count: int = 0
        self.gross_profit: float = 0.0
        self.gross_loss: float = 0.0
        self.win_count: int = 0
        self.loss_count: int = 0
        self.years: Set[int] = set()
        self.months: Set[Tuple[int, int]] = set()

    def add(self, record: TradeRecord) -> None:
        self.total_invested += record.investment
        self.trade_count += 1

        d = record.entry_date
        if d is not None:
            self.years.add(d.year)
            self.months.add((d.year, d.month))

        if record.is_win:
            self.win_count += 1
            self.gross_profit += record.result
        else:
            self.loss_count += 1
            self.gross_loss += abs(record.result)

    def result(self) -> AggregationResult:
        closed = self.win_count + self.loss_count
        month_count = len(self.months)

        avg_investment = self.total_invested / self.trade_count if self.trade_count else 0.0
        avg_trades_per_month = closed / month_count if month_count else 0.0
        avg_win = self.gross_profit / self.win_count if self.win_count else 0.0
        avg_loss = self.gross_loss / self.loss_count if self.loss_count else 0.0
        win_rate = self.win_count / closed if closed else 0.0
        roi_target = avg_win / avg_investment if (self.win_count and avg_investment > 0) else 0.0
        loss_per_failed = avg_loss / avg_investment if (self.loss_count and avg_investment > 0) else 0.0

        return AggregationResult(
            success=True,
            historical_win_rate=win_rate,
            historical_avg_investment_per_op=avg_investment,
            historical_avg_trades_per_month=avg_trades_per_month,
            suggested_roi_target_percent=roi_target,
            suggested_loss_per_failed_op_percent=loss_per_failed,
            years=tuple(sorted(self.years)),
            trade_count=self.trade_count,
            winning_trades=self.win_count,
            losing_trades=self.loss_count,
            months_with_trades=month_count,
        )


def aggregate(trades: Iterable[Any], settings: Optional[Settings] = None) -> AggregationResult:
    """Fold a trade history into win rate, sizing and target statistics.

    ``trades`` is an ordered iterable of raw row mappings (keyed by the
    configured column names) and/or TradeRecords. Rows without an entry
    date are skipped; malformed amounts count as 0 and unparseable dates
    are left out of the calendar statistics. Only a structurally invalid
    input raises ValidationError.
    """
    if trades is None or isinstance(trades, (str, bytes, Mapping)) or not isinstance(trades, Iterable):
        raise ValidationError(f"trades must be an iterable of records, got {type(trades).__name__}")
    s = settings or Settings()

    acc = HistoryAccumulator()
    skipped = 0
    for idx, item in enumerate(trades):
        if isinstance(item, TradeRecord):
            record = item
        elif isinstance(item, Mapping):
            record = coerce_record(item, s)
        else:
            raise ValidationError(f"trade #{idx} must be a mapping or TradeRecord, got {type(item).__name__}")
        if record is None:
            skipped += 1
            continue
        acc.add(record)

    res = acc.result()
    logger.debug(
        "aggregated %d trades (%d skipped without entry date), %d months, win_rate=%.4f",
        res.trade_count, skipped, res.months_with_trades, res.historical_win_rate,
    )
    return res
